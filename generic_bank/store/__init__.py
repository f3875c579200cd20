"""In-memory stores for banking entities."""

from generic_bank.store.repository import Repository

__all__ = ["Repository"]
