"""Domain models for the in-memory bank."""

from generic_bank.models.base import Entity, Identifiable

__all__ = ["Entity", "Identifiable"]
