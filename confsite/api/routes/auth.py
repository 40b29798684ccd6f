"""Authentication routes."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, Response, status
from sqlalchemy import select

from confsite.api.deps import AppSettings, Auth, CurrentUser, DBSession
from confsite.config import Settings
from confsite.models import AdminUser
from confsite.schemas.auth import (
    AdminLogin,
    AdminUserResponse,
    ChangePasswordRequest,
)
from confsite.services.auth import AdminAccountService

router = APIRouter(prefix="/auth", tags=["auth"])


def set_auth_cookies(
    response: Response,
    access_token: str,
    refresh_token: str,
    settings: Settings,
) -> None:
    """Set HTTP-only authentication cookies."""
    secure = not settings.is_development
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=secure,
        samesite="lax",
        max_age=settings.jwt_access_token_expire_minutes * 60,
        path="/",
    )
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=secure,
        samesite="lax",
        max_age=settings.jwt_refresh_token_expire_days * 24 * 3600,
        path="/",
    )


def clear_auth_cookies(response: Response) -> None:
    """Clear authentication cookies."""
    response.delete_cookie(key="access_token", path="/")
    response.delete_cookie(key="refresh_token", path="/")


@router.post("/login", response_model=AdminUserResponse)
async def login(
    user_data: AdminLogin,
    response: Response,
    db: DBSession,
    auth: Auth,
    settings: AppSettings,
) -> AdminUser:
    """Login and set HTTP-only cookies."""
    user = await AdminAccountService(db, auth).authenticate(user_data.email, user_data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive",
        )

    access_token = auth.create_access_token(user.id, user.email)
    refresh_token = auth.create_refresh_token(user.id, user.email)
    set_auth_cookies(response, access_token, refresh_token, settings)

    return user


@router.post("/refresh", response_model=AdminUserResponse)
async def refresh_token(
    request: Request,
    response: Response,
    db: DBSession,
    auth: Auth,
    settings: AppSettings,
) -> AdminUser:
    """Refresh access token using refresh token from cookie."""
    refresh_token_value = request.cookies.get("refresh_token")

    if not refresh_token_value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No refresh token provided",
        )

    payload = auth.verify_refresh_token(refresh_token_value)

    if payload is None:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    user_id = payload.get("sub")
    email = payload.get("email")

    if not user_id or not email:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    result = await db.execute(select(AdminUser).where(AdminUser.id == UUID(user_id)))
    user = result.scalar_one_or_none()

    if not user:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    if not user.is_active:
        clear_auth_cookies(response)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive",
        )

    new_access_token = auth.create_access_token(user.id, user.email)
    new_refresh_token = auth.create_refresh_token(user.id, user.email)
    set_auth_cookies(response, new_access_token, new_refresh_token, settings)

    return user


@router.post("/logout")
async def logout(response: Response) -> dict:
    """Logout and clear authentication cookies."""
    clear_auth_cookies(response)
    return {"message": "Successfully logged out"}


@router.get("/me", response_model=AdminUserResponse)
async def get_current_user_info(current_user: CurrentUser) -> AdminUser:
    """Get current authenticated admin info."""
    return current_user


@router.post("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    current_user: CurrentUser,
    db: DBSession,
    auth: Auth,
) -> dict:
    """Change the signed-in admin's password."""
    try:
        await AdminAccountService(db, auth).change_password(
            current_user, data.current_password, data.new_password
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return {"message": "Password updated successfully"}
