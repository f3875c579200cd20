"""Demo scenario walking through the basic banking operations."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from generic_bank.generators.banking import AccountGenerator, CustomerGenerator
from generic_bank.models.banking import Account, Customer, OperationResult, format_currency
from generic_bank.services import BankingService
from generic_bank.sinks import ConsoleSink

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """Everything the demo produced."""

    service: BankingService
    found_customers: list[Customer]
    results: dict[str, OperationResult] = field(default_factory=dict)


class DemoScenario:
    """Reproduce the reference banking walkthrough.

    Registers two customers and two accounts, runs a withdrawal, a
    deposit and a transfer, then searches customers by name. Optionally
    adds generated customers and accounts first; generated names never
    contain ``SEARCH_NAME``, so the final search still finds only the
    walkthrough customer.
    """

    SEARCH_NAME = "Mary"

    def __init__(
        self,
        extra_customers: int = 0,
        seed: int | None = None,
        locale: str = "en_US",
        currency_symbol: str = "$",
        sink: ConsoleSink | None = None,
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        extra_customers : int
            Generated customers (each with one account) to add up front.
        seed : int | None
            Random seed for the generated data.
        locale : str
            Faker locale for generated names and documents.
        currency_symbol : str
            Symbol used in logged amounts.
        sink : ConsoleSink | None
            Where listings are printed (a default sink when None).
        """
        self.extra_customers = extra_customers
        self.sink = sink or ConsoleSink()
        self.service = BankingService(currency_symbol=currency_symbol)
        self._customer_gen = CustomerGenerator(
            seed=seed, locale=locale, exclude_name_fragment=self.SEARCH_NAME
        )
        self._account_gen = AccountGenerator(seed=seed, locale=locale)

    def run(self) -> DemoResult:
        """Run the demo.

        Returns
        -------
        DemoResult
            The service holding both repositories, the customers found by
            the final name search and the outcome of each operation.
        """
        logger.info("Starting demo scenario: %d extra customers", self.extra_customers)
        service = self.service

        service.register_customer("John Smith", "111-111-111")
        service.register_customer("Mary Johnson", "222-222-222")

        account1 = service.open_account("1001", 1500)
        account2 = service.open_account("1002", 3000)

        self._add_generated_data()

        self.sink.write_batch("Customers", service.customers.get_all())
        self.sink.write_batch("Accounts", service.accounts.get_all())

        results = self._run_operations(account1, account2)

        self.sink.write_batch("Updated Accounts", service.accounts.get_all())

        found = service.find_customers_by_name(self.SEARCH_NAME)
        self.sink.write_batch(f"Find Customer {self.SEARCH_NAME}", found)

        logger.info("Demo complete: %s", service.summary())
        return DemoResult(service=service, found_customers=found, results=results)

    def _run_operations(self, account1: Account, account2: Account) -> dict[str, OperationResult]:
        service = self.service
        self.sink.write_line("\n--- Banking Operations ---")

        self.sink.write_line(
            f"Withdrawing {self._fmt(500)} from account {account1.account_number}..."
        )
        withdraw = service.withdraw(account1, 500)

        self.sink.write_line(
            f"Depositing {self._fmt(1000)} into account {account2.account_number}..."
        )
        deposit = service.deposit(account2, 1000)

        self.sink.write_line(
            f"Transferring {self._fmt(700)} from account {account2.account_number} "
            f"to account {account1.account_number}..."
        )
        transfer = service.transfer(account2, account1, 700)

        return {"withdraw": withdraw, "deposit": deposit, "transfer": transfer}

    def _add_generated_data(self) -> None:
        for customer in self._customer_gen.generate_batch(self.extra_customers):
            self.service.add_customer(customer)
            self.service.add_account(self._account_gen.generate())

    def _fmt(self, amount: int) -> str:
        return format_currency(Decimal(amount), self.service.currency_symbol)
