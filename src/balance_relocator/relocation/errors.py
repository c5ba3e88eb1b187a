from __future__ import annotations


class RelocationError(Exception):
    """Base class for everything the relocation core raises."""


class InvalidInputError(RelocationError, ValueError):
    """
    Input rejected by eager validation:
    a non-int element, or a negative total sum.
    """

    def __init__(self, message: str, total: int | None = None):
        super().__init__(message)
        self.total = total


class ExhaustedSourceError(RelocationError, RuntimeError):
    """
    Balance is negative but there is no expense left to relocate.
    Guards the scan invariant; int input never triggers it.
    """

    def __init__(self, index: int, balance: int):
        super().__init__(
            f"No expense left to relocate at index {index} (balance={balance}); "
            "total sum of transactions must be >= 0"
        )
        self.index = index
        self.balance = balance
