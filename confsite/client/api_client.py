"""HTTP client for the admin API."""

import enum
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from confsite.schemas.ordering import PositionUpdate
from confsite.services.ordering import StoreWriteError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class OrderedCollection(str, enum.Enum):
    """Admin paths of the ordered collections."""

    GALLERY = "gallery"
    SECRETARIAT = "secretariat"
    HIGHLIGHTS = "highlights"
    DOCUMENTS = "documents"
    SCHEDULE_DAYS = "schedule/days"
    SCHEDULE_EVENTS = "schedule/days/{day_id}/events"


class RemoteOrderedCollection:
    """Ordered store backed by the admin API."""

    def __init__(self, client: httpx.AsyncClient, path: str):
        self.client = client
        self.path = path

    async def read_all(self) -> list[dict[str, Any]]:
        response = await self.client.get(self.path)
        response.raise_for_status()
        return response.json()

    async def write_batch(self, updates: Sequence[PositionUpdate]) -> None:
        """Send a full write-batch. Any failure surfaces as StoreWriteError."""
        payload = {"items": [update.model_dump(mode="json") for update in updates]}
        try:
            response = await self.client.put(f"{self.path}/reorder", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Reorder of {self.path} rejected: {e.response.status_code}")
            raise StoreWriteError(
                f"Reorder of {self.path} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Reorder of {self.path} failed: {e}")
            raise StoreWriteError(f"Reorder of {self.path} failed: {e}") from e


class CMSClient:
    """Client for the conference CMS admin API.

    Authentication uses the same HTTP-only cookies as the dashboard, kept
    by the underlying httpx client.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + API_PREFIX,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "CMSClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Sign in; later requests carry the auth cookies."""
        response = await self._client.post(
            "/auth/login",
            json={"email": email, "password": password},
        )
        response.raise_for_status()
        return response.json()

    async def logout(self) -> None:
        response = await self._client.post("/auth/logout")
        response.raise_for_status()
        self._client.cookies.clear()

    def collection(
        self,
        collection: OrderedCollection,
        **path_params: Any,
    ) -> RemoteOrderedCollection:
        """Ordered store for one collection, e.g. the events of a day."""
        path = "/" + collection.value.format(**path_params)
        return RemoteOrderedCollection(self._client, path)

    async def create(
        self,
        collection: OrderedCollection,
        data: dict[str, Any],
        **path_params: Any,
    ) -> dict[str, Any]:
        """Create an item at the end of a collection."""
        path = "/" + collection.value.format(**path_params)
        response = await self._client.post(path, json=data)
        response.raise_for_status()
        return response.json()
