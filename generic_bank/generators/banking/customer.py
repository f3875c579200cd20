"""Customer generator for banking domain."""

from __future__ import annotations

from typing import Iterator

from generic_bank.generators.base import BaseGenerator
from generic_bank.models.banking import Customer


class CustomerGenerator(BaseGenerator):
    """Generate sample customers with Faker names and SSN-style documents.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    exclude_name_fragment : str | None
        Names containing this substring are redrawn, so generated
        customers never match a name search for it.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        exclude_name_fragment: str | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.exclude_name_fragment = exclude_name_fragment

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer.
        """
        return Customer(name=self._name(), document=self.fake.ssn())

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def _name(self) -> str:
        name = self.fake.name()
        if self.exclude_name_fragment:
            while self.exclude_name_fragment in name:
                name = self.fake.name()
        return name
