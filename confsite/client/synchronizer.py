"""Optimistic reordering for an ordered collection.

A drag is applied to the local sequence at once and the resulting order is
written to the store in the background. Each gesture gets a token from a
monotonic counter, and writes reach the store one at a time in token order.
Only the last confirmed order is kept as the rollback target: when the
newest gesture fails the local sequence returns to it exactly, while the
failure of a gesture that has since been superseded is only reported.
"""

import asyncio
import enum
import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any

from confsite.client.stores import OrderedStore
from confsite.services.ordering import reorder, sequential_positions

logger = logging.getLogger(__name__)

ErrorNotifier = Callable[[Exception], Any]


class SyncState(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


def item_id(item: Any) -> Any:
    """Id of a collection item given as a mapping or an object."""
    if isinstance(item, dict):
        return item["id"]
    return item.id


class OptimisticReorderSynchronizer:
    """Keeps a local view of a collection in step with its store."""

    def __init__(
        self,
        store: OrderedStore,
        on_error: ErrorNotifier | None = None,
        id_of: Callable[[Any], Any] = item_id,
    ):
        self.store = store
        self.on_error = on_error
        self.id_of = id_of
        self._sequence: list[Any] = []
        self._confirmed: list[Any] = []
        self._latest_token = 0
        self._outstanding: set[int] = set()
        self._tasks: set[asyncio.Task] = set()
        self._write_lock = asyncio.Lock()

    @property
    def sequence(self) -> list[Any]:
        """The order currently shown to the user."""
        return list(self._sequence)

    @property
    def confirmed(self) -> list[Any]:
        """The last order the store accepted."""
        return list(self._confirmed)

    @property
    def state(self) -> SyncState:
        return SyncState.PENDING if self._outstanding else SyncState.IDLE

    @property
    def latest_token(self) -> int:
        return self._latest_token

    async def load(self) -> list[Any]:
        """Read the store and take its order as both view and snapshot."""
        items = await self.store.read_all()
        self._sequence = list(items)
        self._confirmed = list(items)
        return self.sequence

    def move(self, from_index: int, to_index: int) -> asyncio.Task | None:
        """Apply a drag locally and dispatch the write.

        Invalid indices raise IndexError and change nothing. Moving an item
        onto itself issues no write and returns None; otherwise the returned
        task resolves to True when the store accepted the write.
        """
        moved = reorder(self._sequence, from_index, to_index)
        if from_index == to_index:
            return None

        self._latest_token += 1
        token = self._latest_token
        self._sequence = moved
        self._outstanding.add(token)

        task = asyncio.create_task(self._write(token, moved))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every dispatched write has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _write(self, token: int, sequence: Sequence[Any]) -> bool:
        updates = sequential_positions(self.id_of(item) for item in sequence)
        try:
            # Lock waiters are served first come first served, so writes
            # reach the store in the order their tasks were created.
            async with self._write_lock:
                await self.store.write_batch(updates)
        except Exception as e:
            # CancelledError is a BaseException and still propagates
            await self._handle_failure(token, e)
            return False
        finally:
            self._outstanding.discard(token)

        self._confirmed = list(sequence)
        logger.debug(f"Reorder {token} confirmed")
        return True

    async def _handle_failure(self, token: int, error: Exception) -> None:
        if token == self._latest_token:
            self._sequence = list(self._confirmed)
            logger.warning(f"Reorder {token} failed, restored last confirmed order: {error}")
        else:
            logger.warning(
                f"Reorder {token} failed but was superseded by {self._latest_token}: {error}"
            )

        if self.on_error is not None:
            result = self.on_error(error)
            if inspect.isawaitable(result):
                await result
