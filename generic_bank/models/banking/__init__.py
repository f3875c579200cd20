"""Banking domain models."""

from generic_bank.models.banking.account import Account, format_currency, to_amount
from generic_bank.models.banking.customer import Customer
from generic_bank.models.banking.enums import OperationResult

__all__ = [
    "Account",
    "Customer",
    "OperationResult",
    "format_currency",
    "to_amount",
]
