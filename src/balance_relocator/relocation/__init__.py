from .errors import ExhaustedSourceError, InvalidInputError, RelocationError
from .expenses import ExpenseHeap
from .greedy import plan_relocations, relocation_count, validate_transactions
from .models import RelocationPlan, RelocationStep
from .simulate import apply_plan, is_feasible, prefix_balances

__all__ = [
    "relocation_count",
    "plan_relocations",
    "validate_transactions",
    "RelocationPlan",
    "RelocationStep",
    "ExpenseHeap",
    "RelocationError",
    "InvalidInputError",
    "ExhaustedSourceError",
    "apply_plan",
    "prefix_balances",
    "is_feasible",
]
