"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from generic_bank.models.banking import Account, Customer
from generic_bank.services import BankingService
from generic_bank.store import Repository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def customer() -> Customer:
    """Sample customer."""
    return Customer(name="John Smith", document="111-111-111")


@pytest.fixture
def funded_account() -> Account:
    """Account holding 1500.00."""
    account = Account(account_number="1001")
    account.deposit(Decimal("1500.00"))
    return account


@pytest.fixture
def empty_account() -> Account:
    """Account with a zero balance."""
    return Account(account_number="1002")


@pytest.fixture
def customer_repo() -> Repository[Customer]:
    """Fresh customer repository."""
    return Repository()


@pytest.fixture
def service() -> BankingService:
    """Banking service with empty repositories."""
    return BankingService()
