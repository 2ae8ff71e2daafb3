"""Core data structures for submissions and their dependent records."""

from .entity import EntityType
from .submission import Submission, SubmissionStatus, \
    AggregatedDepositStatus, Source, PRE_SUBMISSION, POST_SUBMISSION
from .deposit import Deposit, DepositStatus, RepositoryCopy, CopyStatus
from .event import SubmissionEvent, EventType, PerformerRole
