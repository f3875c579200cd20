"""Base models shared across domains."""

import uuid
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Anything exposing a process-unique identifier."""

    @property
    def id(self) -> uuid.UUID: ...


@dataclass(eq=False)
class Entity:
    """Base entity with an immutable identity.

    The identifier is a random UUID assigned once at construction and
    exposed read-only through ``id``. Equality is object identity, so two
    entities holding the same field values are still distinct.
    """

    _id: uuid.UUID = field(default_factory=uuid.uuid4, init=False, repr=False)

    @property
    def id(self) -> uuid.UUID:
        return self._id
