"""Custom exception hierarchy for generic-bank.

Business outcomes such as insufficient funds are reported through
``OperationResult`` values; these exceptions cover misuse and bad
configuration only.
"""


class GenericBankError(Exception):
    """Base exception for all generic-bank errors."""


class EntityNotFoundError(GenericBankError):
    """Raised when a required entity does not exist."""


class InvalidAmountError(GenericBankError, ValueError):
    """Raised when a monetary amount is not a finite number."""


class ConfigurationError(GenericBankError):
    """Raised when configuration is invalid or missing."""
