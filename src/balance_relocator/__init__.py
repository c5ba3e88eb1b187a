from .relocation import (
    ExhaustedSourceError,
    InvalidInputError,
    RelocationError,
    RelocationPlan,
    plan_relocations,
    relocation_count,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "relocation_count",
    "plan_relocations",
    "RelocationPlan",
    "RelocationError",
    "InvalidInputError",
    "ExhaustedSourceError",
]
