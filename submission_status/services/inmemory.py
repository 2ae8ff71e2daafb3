"""A :class:`.RecordStore` that keeps records in process memory."""

import copy
import uuid
from dataclasses import replace
from enum import Enum
from typing import Any, Dict, Optional, Set

from arxiv.base import logging
from arxiv.base.globals import get_application_config

from ..domain import EntityType
from .. import config as defaults
from .exceptions import NoSuchResource, UpdateConflict
from .store import RecordStore

logger = logging.getLogger(__name__)


def _wire(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _new_version_tag() -> str:
    return uuid.uuid4().hex


class InMemoryRecordStore(RecordStore):
    """
    Keeps records in a dict, keyed by entity type and identifier.

    Records go in and come out as copies, so callers never share state with
    the store. Every write assigns a fresh version tag; an update carrying a
    stale tag fails with :class:`.UpdateConflict`, as it would against the
    real repository.
    """

    def __init__(self, default_limit: int = defaults.PASS_SEARCH_LIMIT,
                 base_uri: str = defaults.PASS_BASE_URI) -> None:
        self.default_limit = default_limit
        self.base_uri = base_uri.rstrip('/')
        self._records: Dict[EntityType, Dict[str, Any]] = \
            {entity_type: {} for entity_type in EntityType}

    @classmethod
    def init_app(cls, app: object = None) -> None:
        """Set default configuration params for an application instance."""
        config = get_application_config(app)
        config.setdefault('PASS_SEARCH_LIMIT',
                          str(defaults.PASS_SEARCH_LIMIT))
        config.setdefault('PASS_BASE_URI', defaults.PASS_BASE_URI)

    @classmethod
    def get_session(cls, app: object = None) -> 'InMemoryRecordStore':
        """Get a new store configured for ``app``."""
        config = get_application_config(app)
        limit = int(config.get('PASS_SEARCH_LIMIT',
                               defaults.PASS_SEARCH_LIMIT))
        base_uri = config.get('PASS_BASE_URI', defaults.PASS_BASE_URI)
        return cls(default_limit=limit, base_uri=base_uri)

    def create_resource(self, entity: Any) -> str:
        """
        Store a new record and return its identifier.

        An identifier is minted if ``entity.id`` is not set.
        """
        if entity is None:
            raise ValueError('entity cannot be None')
        entity_type = entity.ENTITY_TYPE
        identifier = entity.id or \
            f'{self.base_uri}/{entity_type.plural}/{uuid.uuid4().hex}'
        if identifier in self._records[entity_type]:
            raise ValueError(f'{entity_type.value} {identifier} already'
                             ' exists')
        self._records[entity_type][identifier] = \
            replace(copy.deepcopy(entity), id=identifier,
                    version_tag=_new_version_tag())
        logger.debug('created %s %s', entity_type.value, identifier)
        return identifier

    def delete_resource(self, identifier: str) -> None:
        """Remove the record with ``identifier``, whatever its type."""
        for records in self._records.values():
            if identifier in records:
                del records[identifier]
                return
        raise NoSuchResource(f'No record with id {identifier}')

    def _read_resource(self, identifier: str, entity_type: EntityType) -> Any:
        try:
            return copy.deepcopy(self._records[entity_type][identifier])
        except KeyError as e:
            raise NoSuchResource(f'No {entity_type.value} with id'
                                 f' {identifier}') from e

    def _update_resource(self, entity: Any) -> None:
        entity_type = entity.ENTITY_TYPE
        try:
            stored = self._records[entity_type][entity.id]
        except KeyError as e:
            raise NoSuchResource(f'No {entity_type.value} with id'
                                 f' {entity.id}') from e
        if entity.version_tag is not None \
                and entity.version_tag != stored.version_tag:
            raise UpdateConflict(f'Failed to update {entity.id}. The data may'
                                 ' have changed since the object was last'
                                 ' retrieved.')
        self._records[entity_type][entity.id] = \
            replace(copy.deepcopy(entity), version_tag=_new_version_tag())
        logger.debug('updated %s %s', entity_type.value, entity.id)

    def _find_all_by_attribute(self, entity_type: EntityType, attribute: str,
                               value: Any, limit: Optional[int],
                               offset: int) -> Set[str]:
        if limit is None:
            limit = self.default_limit
        value = _wire(value)
        matches = sorted(
            identifier for identifier, record
            in self._records[entity_type].items()
            if self._matches(getattr(record, attribute, None), value)
        )
        return set(matches[offset:offset + limit])

    @staticmethod
    def _matches(stored: Any, value: Any) -> bool:
        if isinstance(stored, (list, set, tuple)):
            return value in [_wire(item) for item in stored]
        return _wire(stored) == value
