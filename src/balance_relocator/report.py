from __future__ import annotations

from pydantic import BaseModel, Field

from .relocation.models import RelocationPlan


class RelocationStepModel(BaseModel):
    at_index: int
    expense_index: int
    amount: int


class RelocationReport(BaseModel):
    relocations: int
    final_balance: int
    min_balance: int
    relocated_indices: list[int] = Field(default_factory=list)
    steps: list[RelocationStepModel] = Field(default_factory=list)

    @classmethod
    def from_plan(cls, plan: RelocationPlan) -> "RelocationReport":
        return cls(
            relocations=plan.relocations,
            final_balance=plan.final_balance,
            min_balance=plan.min_balance,
            relocated_indices=plan.relocated_indices,
            steps=[
                RelocationStepModel(
                    at_index=s.at_index, expense_index=s.expense_index, amount=s.amount
                )
                for s in plan.steps
            ],
        )
