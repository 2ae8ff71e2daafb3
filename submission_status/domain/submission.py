"""Data structures for submissions."""

from typing import Optional, List, ClassVar
from datetime import datetime
from enum import Enum

from dataclasses import dataclass, field

from .entity import EntityType
from .util import enum_coerce, datetime_coerce, unique_list


class SubmissionStatus(Enum):
    """
    Overall status of a :class:`.Submission`.

    Statuses fall into two families. Pre-submission statuses apply while
    ``Submission.submitted`` is ``False`` and are normally set by the user
    interface; post-submission statuses apply once the submission has been
    submitted and are derived from its deposits and repository copies.
    """

    MANUSCRIPT_REQUIRED = 'manuscript-required'
    """Awaiting a manuscript; nothing has been done with the submission yet."""

    APPROVAL_REQUESTED = 'approval-requested'
    """The preparer has asked the submitter to approve the submission."""

    CHANGES_REQUESTED = 'changes-requested'
    """The submitter has asked the preparer for changes."""

    CANCELLED = 'cancelled'
    """The submission was abandoned before it was submitted."""

    SUBMITTED = 'submitted'
    """Submitted, and in progress at one or more target repositories."""

    NEEDS_ATTENTION = 'needs-attention'
    """A target repository rejected or stalled on the submission."""

    COMPLETE = 'complete'
    """Every target repository holds a complete copy."""

    @property
    def is_submitted(self) -> bool:
        """Whether this status belongs to the post-submission family."""
        return _IS_SUBMITTED[self]


_IS_SUBMITTED = {
    SubmissionStatus.MANUSCRIPT_REQUIRED: False,
    SubmissionStatus.APPROVAL_REQUESTED: False,
    SubmissionStatus.CHANGES_REQUESTED: False,
    SubmissionStatus.CANCELLED: False,
    SubmissionStatus.SUBMITTED: True,
    SubmissionStatus.NEEDS_ATTENTION: True,
    SubmissionStatus.COMPLETE: True,
}

PRE_SUBMISSION = frozenset(s for s, sub in _IS_SUBMITTED.items() if not sub)
POST_SUBMISSION = frozenset(s for s, sub in _IS_SUBMITTED.items() if sub)


class AggregatedDepositStatus(Enum):
    """Roll-up of the statuses of all deposits for a submission."""

    NOT_STARTED = 'not-started'
    IN_PROGRESS = 'in-progress'
    ACCEPTED = 'accepted'


class Source(Enum):
    """Where the submission was created."""

    PASS = 'pass'
    """Created through the submission UI."""

    OTHER = 'other'
    """Harvested or imported from elsewhere."""


@dataclass
class Submission:
    """
    Represents a submission to one or more target repositories.

    This is the aggregate root of the data model. Deposits and submission
    events refer to it by :attr:`id`; repository copies are linked through
    the :attr:`publication`.
    """

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.SUBMISSION

    id: Optional[str] = None
    submitted: bool = False
    """Whether the submission has left the hands of its submitter."""

    status: Optional[SubmissionStatus] = None
    repositories: List[str] = field(default_factory=list)
    """Identifiers of the target repositories, in order and without repeats."""

    publication: Optional[str] = None
    source: Optional[Source] = None
    aggregated_deposit_status: Optional[AggregatedDepositStatus] = None
    submitted_date: Optional[datetime] = None
    submitter: Optional[str] = None
    preparers: List[str] = field(default_factory=list)
    grants: List[str] = field(default_factory=list)
    metadata: Optional[str] = None
    """Opaque JSON blob of descriptive metadata collected by the UI."""

    version_tag: Optional[str] = None
    """Concurrency token from the last read; ``None`` disables the check."""

    def __post_init__(self) -> None:
        """Coerce enums, dates, and repository identifiers."""
        self.submitted = bool(self.submitted)
        self.status = enum_coerce(SubmissionStatus, self.status)
        self.source = enum_coerce(Source, self.source)
        self.aggregated_deposit_status = enum_coerce(
            AggregatedDepositStatus, self.aggregated_deposit_status
        )
        self.submitted_date = datetime_coerce(self.submitted_date)
        self.repositories = unique_list(self.repositories)
