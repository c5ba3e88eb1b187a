from __future__ import annotations

import heapq


class ExpenseHeap:
    """
    Max-priority queue of expense magnitudes seen so far.

    heapq is a min-heap, so entries are stored as (-amount, index).
    Equal magnitudes come out earliest index first.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, amount: int, index: int = -1) -> None:
        if amount <= 0:
            raise ValueError(f"expense magnitude must be > 0, got {amount}")
        heapq.heappush(self._entries, (-amount, index))

    def peek_max(self) -> int:
        if not self._entries:
            raise IndexError("peek_max from empty ExpenseHeap")
        return -self._entries[0][0]

    def pop_max(self) -> tuple[int, int]:
        """Remove the largest expense. Returns (amount, index)."""
        if not self._entries:
            raise IndexError("pop_max from empty ExpenseHeap")
        neg_amount, index = heapq.heappop(self._entries)
        return -neg_amount, index
