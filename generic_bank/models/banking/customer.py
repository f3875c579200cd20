"""Customer model for banking domain."""

from dataclasses import dataclass

from generic_bank.models.base import Entity


@dataclass(eq=False)
class Customer(Entity):
    """Bank customer entity."""

    name: str = ""
    document: str = ""  # CPF/SSN style identifier, not validated

    def __str__(self) -> str:
        return f"Customer: {self.name} - Document: {self.document}"
