from __future__ import annotations

import logging
from typing import Iterable

from .errors import ExhaustedSourceError, InvalidInputError
from .expenses import ExpenseHeap
from .models import RelocationPlan, RelocationStep

logger = logging.getLogger(__name__)


def validate_transactions(transactions: Iterable[int]) -> list[int]:
    """
    Materialize the input and check the precondition up front:
    every element is an int and the total sum is >= 0.
    """
    txs = list(transactions)

    for i, t in enumerate(txs):
        # bool is an int subclass, but True/False are never amounts
        if isinstance(t, bool) or not isinstance(t, int):
            raise InvalidInputError(
                f"transaction at index {i} must be an int, got {type(t).__name__}: {t!r}"
            )

    total = sum(txs)
    if total < 0:
        raise InvalidInputError(
            f"total sum of transactions must be >= 0, got {total}", total=total
        )
    return txs


def plan_relocations(transactions: Iterable[int], *, validate: bool = True) -> RelocationPlan:
    """
    Greedy scan over transactions in order.

    Every expense seen so far waits in a max-heap. Whenever the balance
    drops below zero, the largest waiting expense is relocated (moved to
    the end) until the balance is back to >= 0. Relocating the largest
    expense first gives the minimum number of relocations.

    With validate=False a negative total is not rejected. The scan still
    finishes, since relocating every expense seen so far always repairs
    the balance, but moving those expenses to the end leaves the final
    balance negative.
    """
    txs = validate_transactions(transactions) if validate else transactions

    balance = 0
    min_balance: int | None = None
    expenses = ExpenseHeap()
    steps: list[RelocationStep] = []

    for i, t in enumerate(txs):
        balance += t
        if t < 0:
            expenses.push(-t, i)

        while balance < 0:
            if not expenses:
                raise ExhaustedSourceError(index=i, balance=balance)
            amount, expense_index = expenses.pop_max()
            balance += amount
            steps.append(RelocationStep(at_index=i, expense_index=expense_index, amount=amount))
            logger.debug(
                "Relocated expense #%s (%s) at index %s, balance=%s",
                expense_index,
                amount,
                i,
                balance,
            )

        if min_balance is None or balance < min_balance:
            min_balance = balance

    plan = RelocationPlan(
        relocations=len(steps),
        steps=tuple(steps),
        final_balance=balance,
        min_balance=min_balance if min_balance is not None else 0,
    )
    logger.debug(
        "Relocation plan: relocations=%s final_balance=%s", plan.relocations, plan.final_balance
    )
    return plan


def relocation_count(transactions: Iterable[int], *, validate: bool = True) -> int:
    """Minimum number of expenses to move to the end so no prefix balance is negative."""
    return plan_relocations(transactions, validate=validate).relocations
