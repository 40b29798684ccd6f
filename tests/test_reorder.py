"""Tests for the reorder reducer and write-batch validation."""

import itertools
from uuid import uuid4

import pytest

from confsite.schemas.ordering import PositionUpdate
from confsite.services.ordering import (
    OrderingError,
    UnknownItemError,
    check_batch,
    reorder,
    sequential_positions,
)

ITEMS = ["A", "B", "C", "D"]


class TestReorder:
    """Tests for the splice move."""

    def test_move_forward(self):
        assert reorder(ITEMS, 0, 2) == ["B", "C", "A", "D"]

    def test_move_to_front(self):
        assert reorder(ITEMS, 3, 0) == ["D", "A", "B", "C"]

    def test_same_index_is_identity(self):
        assert reorder(ITEMS, 1, 1) == ITEMS

    def test_input_not_mutated(self):
        items = list(ITEMS)
        reorder(items, 0, 3)
        assert items == ITEMS

    def test_accepts_tuples(self):
        assert reorder(("x", "y"), 1, 0) == ["y", "x"]

    def test_every_move_is_a_permutation_and_reversible(self):
        for i, j in itertools.product(range(len(ITEMS)), repeat=2):
            moved = reorder(ITEMS, i, j)
            assert sorted(moved) == sorted(ITEMS)
            assert moved[j] == ITEMS[i]
            assert reorder(moved, j, i) == ITEMS

    @pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, -1), (4, 0), (0, 4)])
    def test_invalid_indices(self, from_index, to_index):
        with pytest.raises(IndexError):
            reorder(ITEMS, from_index, to_index)

    def test_empty_sequence(self):
        with pytest.raises(IndexError):
            reorder([], 0, 0)


class TestSequentialPositions:
    def test_positions_follow_order(self):
        ids = [uuid4(), uuid4(), uuid4()]
        updates = sequential_positions(ids)
        assert [u.id for u in updates] == ids
        assert [u.position for u in updates] == [0, 1, 2]


class TestCheckBatch:
    """Tests for write-batch validation against the current collection."""

    def setup_method(self):
        self.ids = [uuid4(), uuid4(), uuid4()]

    def test_valid_batch(self):
        check_batch(sequential_positions(reversed(self.ids)), self.ids)

    def test_gaps_are_allowed(self):
        updates = [PositionUpdate(id=item_id, position=i * 10) for i, item_id in enumerate(self.ids)]
        check_batch(updates, self.ids)

    def test_unknown_id(self):
        stranger = uuid4()
        updates = sequential_positions([*self.ids, stranger])
        with pytest.raises(UnknownItemError) as exc:
            check_batch(updates, self.ids)
        assert exc.value.ids == [stranger]

    def test_missing_item(self):
        with pytest.raises(OrderingError, match="every item"):
            check_batch(sequential_positions(self.ids[:2]), self.ids)

    def test_duplicate_id(self):
        updates = sequential_positions([self.ids[0], self.ids[0], self.ids[1], self.ids[2]])
        with pytest.raises(OrderingError, match="only once"):
            check_batch(updates, self.ids)

    def test_positions_must_increase(self):
        updates = [
            PositionUpdate(id=self.ids[0], position=0),
            PositionUpdate(id=self.ids[1], position=2),
            PositionUpdate(id=self.ids[2], position=2),
        ]
        with pytest.raises(OrderingError, match="strictly increase"):
            check_batch(updates, self.ids)

    def test_unknown_item_error_is_an_ordering_error(self):
        assert issubclass(UnknownItemError, OrderingError)
        assert issubclass(OrderingError, ValueError)
