"""Translation of service exceptions into HTTP errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status
from pydantic import ValidationError

from confsite.services.ordering import StoreWriteError, UnknownItemError
from confsite.services.schedule_service import DayNotFoundError


@contextmanager
def service_errors() -> Iterator[None]:
    """Map exceptions raised by services to HTTP status codes.

    Unknown items and days are 404, store failures 503, invalid documents
    422 and any other ValueError 400.
    """
    try:
        yield
    except (UnknownItemError, DayNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except StoreWriteError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from e
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


def not_found(noun: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{noun} not found",
    )
