from __future__ import annotations

from typing import Sequence

from .models import RelocationPlan


def apply_plan(transactions: Sequence[int], plan: RelocationPlan) -> list[int]:
    """
    Move every relocated expense to the end of the sequence,
    in the order the relocations happened.
    """
    moved = {s.expense_index for s in plan.steps}
    kept = [t for i, t in enumerate(transactions) if i not in moved]
    tail = [transactions[s.expense_index] for s in plan.steps]
    return kept + tail


def prefix_balances(transactions: Sequence[int]) -> list[int]:
    out: list[int] = []
    balance = 0
    for t in transactions:
        balance += t
        out.append(balance)
    return out


def is_feasible(transactions: Sequence[int]) -> bool:
    return all(b >= 0 for b in prefix_balances(transactions))
