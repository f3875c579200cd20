"""Banking service layering reporting on top of the account domain."""

import logging
from decimal import Decimal

from generic_bank.models.banking import Account, Customer, OperationResult, format_currency
from generic_bank.models.banking.account import Amount, to_amount
from generic_bank.store import Repository

logger = logging.getLogger(__name__)


class BankingService:
    """Customer and account registry with logged balance operations.

    Account methods return ``OperationResult`` values and never log; this
    service delegates to them and reports each outcome. Results are passed
    back unchanged.

    Parameters
    ----------
    customers : Repository[Customer] | None
        Customer repository (a fresh one when omitted).
    accounts : Repository[Account] | None
        Account repository (a fresh one when omitted).
    currency_symbol : str
        Symbol used when formatting amounts in log messages.
    """

    def __init__(
        self,
        customers: Repository[Customer] | None = None,
        accounts: Repository[Account] | None = None,
        currency_symbol: str = "$",
    ) -> None:
        self.customers: Repository[Customer] = customers if customers is not None else Repository()
        self.accounts: Repository[Account] = accounts if accounts is not None else Repository()
        self.currency_symbol = currency_symbol

    def register_customer(self, name: str, document: str) -> Customer:
        """Create a customer and add it to the customer repository."""
        customer = Customer(name=name, document=document)
        self.customers.add(customer)
        return customer

    def add_customer(self, customer: Customer) -> Customer:
        """Add an existing customer to the customer repository."""
        self.customers.add(customer)
        return customer

    def open_account(self, account_number: str, initial_deposit: Amount = 0) -> Account:
        """Create an account, fund it and add it to the account repository.

        A zero ``initial_deposit`` leaves the account empty.
        """
        account = Account(account_number=account_number)
        if to_amount(initial_deposit) != 0:
            self.deposit(account, initial_deposit)
        self.accounts.add(account)
        return account

    def add_account(self, account: Account) -> Account:
        """Add an existing account to the account repository."""
        self.accounts.add(account)
        return account

    def deposit(self, account: Account, amount: Amount) -> OperationResult:
        result = account.deposit(amount)
        if result:
            logger.debug(
                "Deposited %s into account %s", self._fmt(amount), account.account_number
            )
        else:
            logger.warning(
                "Deposit rejected: invalid amount %s for account %s",
                amount,
                account.account_number,
            )
        return result

    def withdraw(self, account: Account, amount: Amount) -> OperationResult:
        result = account.withdraw(amount)
        if result is OperationResult.INSUFFICIENT_FUNDS:
            logger.warning(
                "Withdrawal failed: insufficient funds in account %s", account.account_number
            )
        elif result is OperationResult.INVALID_AMOUNT:
            logger.warning("Withdrawal amount must not be negative.")
        else:
            logger.debug(
                "Withdrew %s from account %s", self._fmt(amount), account.account_number
            )
        return result

    def transfer(self, source: Account, destination: Account, amount: Amount) -> OperationResult:
        """Transfer between two accounts and log the outcome.

        Every outcome record carries ``source``, ``destination``, ``amount``
        and ``result`` fields for the JSON log format.
        """
        result = source.transfer_to(destination, amount)
        fields = {
            "extra": {
                "source": source.account_number,
                "destination": destination.account_number,
                "amount": str(to_amount(amount)),
                "result": result.value,
            }
        }
        if result is OperationResult.INVALID_AMOUNT:
            logger.warning("Transfer amount must be greater than zero.", extra=fields)
        elif result is OperationResult.INSUFFICIENT_FUNDS:
            logger.warning(
                "Transfer failed: insufficient funds in account %s",
                source.account_number,
                extra=fields,
            )
        else:
            logger.info(
                "Transfer successful: %s from %s to %s",
                self._fmt(amount),
                source.account_number,
                destination.account_number,
                extra=fields,
            )
        return result

    def find_customers_by_name(self, fragment: str) -> list[Customer]:
        """Return customers whose name contains ``fragment`` (case-sensitive)."""
        return self.customers.find(lambda c: fragment in c.name)

    def find_account_by_number(self, account_number: str) -> Account | None:
        matches = self.accounts.find(lambda a: a.account_number == account_number)
        return matches[0] if matches else None

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return sum((a.balance for a in self.accounts), Decimal("0.00"))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "customers": len(self.customers),
            "accounts": len(self.accounts),
        }

    def _fmt(self, amount: Amount) -> str:
        return format_currency(to_amount(amount), self.currency_symbol)
