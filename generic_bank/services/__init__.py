"""Services built on top of the banking domain."""

from generic_bank.services.banking import BankingService

__all__ = ["BankingService"]
