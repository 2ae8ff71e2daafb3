"""
The boundary between status derivation and the record repository.

:class:`RecordStore` describes the few repository operations that the status
service needs: attribute search, reading a record, and writing it back with
an optimistic-concurrency check. Concrete stores (an HTTP client for the
linked-data repository and its search index, or
:class:`.inmemory.InMemoryRecordStore`) implement the underscore hooks;
argument checking happens here so that every store rejects bad input the
same way.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Any, Optional, Set

from ..domain import EntityType


class RecordStore(ABC):
    """Read, search, and update records in the repository."""

    def find_all_by_attribute(self, entity_type: EntityType, attribute: str,
                              value: Any, limit: Optional[int] = None,
                              offset: int = 0) -> Set[str]:
        """
        Find the identifiers of all records whose ``attribute`` is ``value``.

        Parameters
        ----------
        entity_type : :class:`.EntityType`
            Kind of record to search.
        attribute : str
            Name of the attribute to match, e.g. ``submission``.
        value : object
            Scalar value to match. Collections are not allowed.
        limit : int
            Maximum number of identifiers to return. If not provided, the
            store's default result cap applies.
        offset : int
            Number of matches to skip.

        Returns
        -------
        set
            Record identifiers. Empty if nothing matched.

        Raises
        ------
        ValueError
            If any argument is missing or malformed.

        """
        if not isinstance(entity_type, EntityType):
            raise ValueError(f'Not an entity type: {entity_type!r}')
        if not attribute:
            raise ValueError('attribute cannot be None or empty')
        if value is None:
            raise ValueError('value cannot be None')
        if isinstance(value, Collection) and not isinstance(value, str):
            raise ValueError('value cannot be a collection; search on one'
                             f' value at a time (got {type(value).__name__})')
        if limit is not None and limit < 0:
            raise ValueError('The limit value cannot be less than 0')
        if offset < 0:
            raise ValueError('The offset value cannot be less than 0')
        return self._find_all_by_attribute(entity_type, attribute, value,
                                           limit, offset)

    def read_resource(self, identifier: str, entity_type: EntityType) -> Any:
        """
        Retrieve the record with ``identifier``, including its version tag.

        Raises
        ------
        :class:`.exceptions.NoSuchResource`
            If there is no such record.

        """
        if identifier is None:
            raise ValueError('identifier cannot be None')
        if not isinstance(entity_type, EntityType):
            raise ValueError(f'Not an entity type: {entity_type!r}')
        return self._read_resource(identifier, entity_type)

    def update_resource(self, entity: Any) -> None:
        """
        Write ``entity`` back to the repository.

        Raises
        ------
        :class:`.exceptions.UpdateConflict`
            If ``entity.version_tag`` is set and no longer matches the stored
            record.
        :class:`.exceptions.NoSuchResource`
            If the record does not exist.

        """
        if entity is None:
            raise ValueError('entity cannot be None')
        if getattr(entity, 'id', None) is None:
            raise ValueError('entity must have an id to be updated')
        self._update_resource(entity)

    @abstractmethod
    def _find_all_by_attribute(self, entity_type: EntityType, attribute: str,
                               value: Any, limit: Optional[int],
                               offset: int) -> Set[str]:
        ...

    @abstractmethod
    def _read_resource(self, identifier: str, entity_type: EntityType) -> Any:
        ...

    @abstractmethod
    def _update_resource(self, entity: Any) -> None:
        ...
