"""Enumeration types for banking domain entities."""

from enum import Enum


class OperationResult(str, Enum):
    """Outcome of a balance operation.

    Truthy only for ``SUCCESS`` so callers can test results the same way
    they would test a boolean.
    """

    SUCCESS = "SUCCESS"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_AMOUNT = "INVALID_AMOUNT"

    def __bool__(self) -> bool:
        return self is OperationResult.SUCCESS
