"""Data structures for the pre-submission event log."""

from typing import Optional, ClassVar
from datetime import datetime
from enum import Enum

from dataclasses import dataclass, field

from .entity import EntityType
from .util import enum_coerce, datetime_coerce, get_tzaware_utc_now


class EventType(Enum):
    """Actions that can be taken on a submission before it is submitted."""

    APPROVAL_REQUESTED_NEWUSER = 'approval-requested-newuser'
    """A preparer asked someone without an account to approve."""

    APPROVAL_REQUESTED = 'approval-requested'
    CHANGES_REQUESTED = 'changes-requested'
    CANCELLED = 'cancelled'
    SUBMITTED = 'submitted'


class PerformerRole(Enum):
    """Role of the person who performed a :class:`.SubmissionEvent`."""

    PREPARER = 'preparer'
    SUBMITTER = 'submitter'


@dataclass
class SubmissionEvent:
    """An entry in the append-only log of actions on a submission."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.SUBMISSION_EVENT

    event_type: EventType
    performed_date: datetime = field(default_factory=get_tzaware_utc_now)
    submission: Optional[str] = None
    id: Optional[str] = None
    performed_by: Optional[str] = None
    performer_role: Optional[PerformerRole] = None
    comment: Optional[str] = None
    link: Optional[str] = None
    version_tag: Optional[str] = None

    def __post_init__(self) -> None:
        """Check our enums and dates."""
        self.event_type = enum_coerce(EventType, self.event_type)
        self.performer_role = enum_coerce(PerformerRole, self.performer_role)
        self.performed_date = datetime_coerce(self.performed_date)
