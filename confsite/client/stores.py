"""Ordered store interface used by the synchronizer, plus an in-memory store."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from confsite.schemas.ordering import PositionUpdate
from confsite.services.ordering import StoreWriteError, check_batch


class OrderedStore(Protocol):
    """Defines what the synchronizer needs from an ordered collection."""

    async def read_all(self) -> list[dict[str, Any]]:
        ...

    async def write_batch(self, updates: Sequence[PositionUpdate]) -> None:
        ...


@dataclass
class InMemoryOrderedStore:
    """Test double for an ordered collection.

    ``fail_on`` holds 1-based ordinals of write-batches that should fail.
    When ``gate`` is set, every write waits for it before applying.
    """

    items: list[dict[str, Any]] = field(default_factory=list)
    fail_on: set[int] = field(default_factory=set)
    gate: asyncio.Event | None = None
    writes: list[list[PositionUpdate]] = field(default_factory=list)

    async def read_all(self) -> list[dict[str, Any]]:
        ordered = sorted(self.items, key=lambda item: (item["position"], str(item["id"])))
        return [dict(item) for item in ordered]

    async def write_batch(self, updates: Sequence[PositionUpdate]) -> None:
        self.writes.append(list(updates))
        ordinal = len(self.writes)
        if self.gate is not None:
            await self.gate.wait()
        if ordinal in self.fail_on:
            raise StoreWriteError(f"Write {ordinal} rejected")

        by_id = {item["id"]: item for item in self.items}
        check_batch(updates, by_id.keys())
        for update in updates:
            by_id[update.id]["position"] = update.position
