"""Helpers and utilities."""

from typing import Any, Optional, Type, TypeVar, Iterable, List
from datetime import datetime
from enum import Enum

from dateutil.parser import parse as parse_date
from pytz import UTC

E = TypeVar('E', bound=Enum)


def get_tzaware_utc_now() -> datetime:
    """Generate a datetime for the current moment in UTC."""
    return datetime.now(UTC)


def enum_coerce(enum_type: Type[E], value: Any) -> Optional[E]:
    """Coerce a wire value (or ``None``) to a member of ``enum_type``."""
    if value is None or isinstance(value, enum_type):
        return value
    return enum_type(value)


def datetime_coerce(value: Any) -> Optional[datetime]:
    """
    Coerce an ISO-8601 string or a datetime to a tz-aware datetime.

    Naive datetimes are assumed to be in UTC.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = parse_date(value)
    if value.tzinfo is None:
        value = UTC.localize(value)
    return value


def unique_list(values: Optional[Iterable[Any]]) -> List[Any]:
    """Drop repeated values, preserving the order of first appearance."""
    if values is None:
        return []
    return list(dict.fromkeys(values))
