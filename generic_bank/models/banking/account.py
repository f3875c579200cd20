"""Account model for banking domain."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Union

from generic_bank.exceptions import InvalidAmountError
from generic_bank.models.base import Entity
from generic_bank.models.banking.enums import OperationResult

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0.00")


def to_amount(value: Amount) -> Decimal:
    """Convert a monetary value to ``Decimal``.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Amount must be numeric, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return amount


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount as currency, e.g. ``$1,500.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


@dataclass(eq=False)
class Account(Entity):
    """Bank account entity.

    The balance starts at zero and only moves through ``deposit``,
    ``withdraw`` and ``transfer_to``; it never drops below zero.
    """

    account_number: str = ""
    _balance: Decimal = field(default=ZERO, init=False, repr=False)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Amount) -> OperationResult:
        """Add ``amount`` to the balance.

        Negative amounts are rejected with ``INVALID_AMOUNT``; zero is a no-op.
        """
        value = to_amount(amount)
        if value < 0:
            return OperationResult.INVALID_AMOUNT
        self._balance += value
        return OperationResult.SUCCESS

    def withdraw(self, amount: Amount) -> OperationResult:
        """Subtract ``amount`` if the balance covers it.

        Returns ``INSUFFICIENT_FUNDS`` (balance untouched) when
        ``amount > balance`` and ``INVALID_AMOUNT`` when ``amount < 0``.
        Withdrawing zero succeeds without changing the balance.
        """
        value = to_amount(amount)
        if value < 0:
            return OperationResult.INVALID_AMOUNT
        if value > self._balance:
            return OperationResult.INSUFFICIENT_FUNDS
        self._balance -= value
        return OperationResult.SUCCESS

    def transfer_to(self, destination: "Account", amount: Amount) -> OperationResult:
        """Move ``amount`` from this account to ``destination``.

        The withdrawal from this account must succeed before the
        destination is credited; on any failure neither balance changes.

        Parameters
        ----------
        destination : Account
            Account to credit.
        amount : Amount
            Positive amount to move.

        Returns
        -------
        OperationResult
            ``SUCCESS``, ``INVALID_AMOUNT`` or ``INSUFFICIENT_FUNDS``.
        """
        value = to_amount(amount)
        if value <= 0:
            return OperationResult.INVALID_AMOUNT

        result = self.withdraw(value)
        if not result:
            return result

        destination.deposit(value)
        return OperationResult.SUCCESS

    def __str__(self) -> str:
        return f"Account {self.account_number} - Balance: {format_currency(self._balance)}"
