"""Generic in-memory repository keyed by entity identity."""

import logging
import uuid
from typing import Callable, Generic, Iterator, TypeVar

from generic_bank.exceptions import EntityNotFoundError
from generic_bank.models.base import Identifiable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Identifiable)


class Repository(Generic[T]):
    """Ordered in-memory collection of entities.

    Items are stored by reference: anything returned from ``get_all``,
    ``get_by_id`` or ``find`` is the stored instance, so mutating it is
    visible to every holder. Duplicate ids are not checked.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        """Append an item to the repository."""
        self._items.append(item)
        logger.info("%s added to repository!", item)

    def get_all(self) -> list[T]:
        """Return all items in insertion order."""
        return list(self._items)

    def get_by_id(self, entity_id: uuid.UUID) -> T | None:
        """Return the first item with the given id, or None."""
        for item in self._items:
            if item.id == entity_id:
                return item
        return None

    def require(self, entity_id: uuid.UUID) -> T:
        """Return the item with the given id.

        Raises
        ------
        EntityNotFoundError
            If no stored item has that id.
        """
        item = self.get_by_id(entity_id)
        if item is None:
            raise EntityNotFoundError(f"Entity {entity_id} not found")
        return item

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return every item matching ``predicate`` in insertion order."""
        return [item for item in self._items if predicate(item)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        if isinstance(value, uuid.UUID):
            return self.get_by_id(value) is not None
        return any(item is value for item in self._items)
