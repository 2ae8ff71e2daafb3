"""Data structures for deposits and repository copies."""

from typing import Optional, List, ClassVar
from enum import Enum

from dataclasses import dataclass, field

from .entity import EntityType
from .util import enum_coerce


class DepositStatus(Enum):
    """
    Status of a single deposit attempt.

    Some repositories do not pass through every status.
    """

    SUBMITTED = 'submitted'
    """A package was sent to the repository; waiting to hear back."""

    ACCEPTED = 'accepted'
    """The repository took the files in."""

    REJECTED = 'rejected'
    """The repository turned the deposit down."""

    FAILED = 'failed'
    """The deposit could not be transferred to the repository."""


class CopyStatus(Enum):
    """Status of a copy of the published work held by a repository."""

    ACCEPTED = 'accepted'
    IN_PROGRESS = 'in-progress'
    STALLED = 'stalled'
    """Processing stopped and needs someone to look at it."""

    COMPLETE = 'complete'
    REJECTED = 'rejected'


@dataclass
class Deposit:
    """One attempt to place a submission's content into a repository."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.DEPOSIT

    id: Optional[str] = None
    status: Optional[DepositStatus] = None
    repository: Optional[str] = None
    submission: Optional[str] = None
    repository_copy: Optional[str] = None
    deposit_status_ref: Optional[str] = None
    """Repository-specific locator used to poll for status updates."""

    version_tag: Optional[str] = None

    def __post_init__(self) -> None:
        """Make sure that :attr:`.status` is a :class:`.DepositStatus`."""
        self.status = enum_coerce(DepositStatus, self.status)


@dataclass
class RepositoryCopy:
    """A copy of the published work that landed in a target repository."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.REPOSITORY_COPY

    id: Optional[str] = None
    copy_status: Optional[CopyStatus] = None
    repository: Optional[str] = None
    publication: Optional[str] = None
    access_url: Optional[str] = None
    external_ids: List[str] = field(default_factory=list)
    version_tag: Optional[str] = None

    def __post_init__(self) -> None:
        """Make sure that :attr:`.copy_status` is a :class:`.CopyStatus`."""
        self.copy_status = enum_coerce(CopyStatus, self.copy_status)
