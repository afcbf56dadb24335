"""Unit tests for the recent-items ring and the undo stack."""

from __future__ import annotations

import pytest

from itemcatalog.core.history import RecentItemsRing, UndoStack
from itemcatalog.errors import EmptyStackError
from itemcatalog.models import AddAction, DeleteAction, Item


def make_items(count: int) -> list[Item]:
    return [Item(id=i, name=f"Item {i}", price=i * 100) for i in range(1, count + 1)]


class TestRecentItemsRing:
    """Test RecentItemsRing eviction and snapshots."""

    def test_starts_empty(self):
        ring = RecentItemsRing(capacity=5)

        assert ring.snapshot() == []
        assert len(ring) == 0
        assert ring.capacity == 5

    @pytest.mark.parametrize("calls", [0, 1, 4, 5, 6, 12])
    def test_length_is_min_of_calls_and_capacity(self, calls):
        """Ring holds min(calls, K) items, the most recent ones in order."""
        ring = RecentItemsRing(capacity=5)
        items = make_items(calls)

        for item in items:
            ring.enqueue(item)

        snapshot = ring.snapshot()
        assert len(snapshot) == min(calls, 5)
        assert snapshot == items[-5:]

    def test_overflow_evicts_oldest_item(self):
        """Enqueuing K+1 items evicts exactly the first one."""
        ring = RecentItemsRing(capacity=5)
        items = make_items(6)

        for item in items:
            ring.enqueue(item)

        snapshot = ring.snapshot()
        assert items[0] not in snapshot
        assert snapshot == items[1:]

    def test_snapshot_is_idempotent(self):
        ring = RecentItemsRing(capacity=3)
        for item in make_items(4):
            ring.enqueue(item)

        assert ring.snapshot() == ring.snapshot()

    def test_snapshot_is_a_copy(self):
        """Mutating a snapshot does not change the ring."""
        ring = RecentItemsRing(capacity=3)
        ring.enqueue(make_items(1)[0])

        snapshot = ring.snapshot()
        snapshot.clear()

        assert len(ring.snapshot()) == 1

    def test_capacity_of_one_keeps_latest(self):
        ring = RecentItemsRing(capacity=1)
        items = make_items(3)
        for item in items:
            ring.enqueue(item)

        assert ring.snapshot() == [items[-1]]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RecentItemsRing(capacity=0)


class TestUndoStack:
    """Test UndoStack LIFO behavior."""

    def test_pop_on_empty_stack_raises(self):
        """Popping an empty stack raises EmptyStackError and leaves it empty."""
        stack = UndoStack()

        with pytest.raises(EmptyStackError):
            stack.pop_last()

        assert len(stack) == 0

    def test_strict_lifo_order(self):
        stack = UndoStack()
        first, second = make_items(2)
        action_a = AddAction(item=first)
        action_b = DeleteAction(item=second)

        stack.push(action_a)
        stack.push(action_b)

        assert stack.pop_last() == action_b
        assert stack.pop_last() == action_a
        with pytest.raises(EmptyStackError):
            stack.pop_last()

    def test_each_push_is_consumed_once(self):
        stack = UndoStack()
        action = AddAction(item=make_items(1)[0])
        stack.push(action)

        assert stack.pop_last() == action
        assert len(stack) == 0
        with pytest.raises(EmptyStackError):
            stack.pop_last()

    def test_len_counts_pending_actions(self):
        stack = UndoStack()
        for item in make_items(3):
            stack.push(AddAction(item=item))

        assert len(stack) == 3
        stack.pop_last()
        assert len(stack) == 2
