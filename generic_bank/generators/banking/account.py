"""Account generator for banking domain."""

import random
from decimal import Decimal
from typing import Iterator

from generic_bank.generators.base import BaseGenerator
from generic_bank.models.banking import Account


class AccountGenerator(BaseGenerator):
    """Generate sample accounts with sequential numbers.

    Opening balances are applied through ``Account.deposit`` so generated
    accounts never bypass the balance rules.
    """

    # Opening deposit range (inclusive)
    MIN_OPENING = 100
    MAX_OPENING = 10000

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        start_number: int = 2001,
    ) -> None:
        super().__init__(seed, locale)
        self._next_number = start_number

    def generate(self) -> Account:
        """Generate a single funded account."""
        account = Account(account_number=str(self._next_number))
        self._next_number += 1

        opening = Decimal(str(round(random.uniform(self.MIN_OPENING, self.MAX_OPENING), 2)))
        account.deposit(opening)
        return account

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts with consecutive numbers."""
        for _ in range(count):
            yield self.generate()
