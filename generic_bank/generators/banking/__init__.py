"""Banking domain generators."""

from generic_bank.generators.banking.account import AccountGenerator
from generic_bank.generators.banking.customer import CustomerGenerator

__all__ = ["AccountGenerator", "CustomerGenerator"]
