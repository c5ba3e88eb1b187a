from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RelocationStep:
    at_index: int  # transaction that pushed the balance below zero
    expense_index: int  # transaction that was relocated
    amount: int  # magnitude of the relocated expense


@dataclass(frozen=True)
class RelocationPlan:
    relocations: int
    steps: tuple[RelocationStep, ...]
    final_balance: int
    min_balance: int

    @property
    def relocated_indices(self) -> list[int]:
        return sorted(s.expense_index for s in self.steps)

    @property
    def relocated_total(self) -> int:
        return sum(s.amount for s in self.steps)
