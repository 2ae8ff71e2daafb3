"""Helpers for building records in tests."""

from contextlib import contextmanager
from datetime import datetime
from typing import Optional

from flask import Flask
from pytz import UTC

from ..domain import Deposit, DepositStatus, RepositoryCopy, CopyStatus, \
    SubmissionEvent, EventType
from ..services import InMemoryRecordStore

REPO_1 = 'https://pass.example.org/fcrepo/repositories/1'
REPO_2 = 'https://pass.example.org/fcrepo/repositories/2'
REPO_3 = 'https://pass.example.org/fcrepo/repositories/3'
PUBLICATION = 'https://pass.example.org/fcrepo/publications/1'
SUBMISSION = 'https://pass.example.org/fcrepo/submissions/1'


def deposit(status: Optional[DepositStatus], repository: str,
            submission: str = SUBMISSION) -> Deposit:
    """Make a :class:`.Deposit` for ``repository``."""
    return Deposit(status=status, repository=repository,
                   submission=submission)


def repo_copy(status: Optional[CopyStatus], repository: str,
              publication: str = PUBLICATION) -> RepositoryCopy:
    """Make a :class:`.RepositoryCopy` held by ``repository``."""
    return RepositoryCopy(copy_status=status, repository=repository,
                          publication=publication)


def event(performed: datetime, event_type: EventType,
          submission: str = SUBMISSION) -> SubmissionEvent:
    """Make a :class:`.SubmissionEvent` performed at ``performed``."""
    return SubmissionEvent(event_type=event_type, performed_date=performed,
                           submission=submission)


def at(day: int, hour: int = 12, minute: int = 0, second: int = 0) -> datetime:
    """A moment in February 2018, in UTC."""
    return datetime(2018, 2, day, hour, minute, second, tzinfo=UTC)


@contextmanager
def in_memory_store(app: Optional[Flask] = None):
    """Provide an :class:`.InMemoryRecordStore` configured for ``app``."""
    if app is None:
        app = Flask('test')
    with app.app_context():
        InMemoryRecordStore.init_app(app)
        yield InMemoryRecordStore.get_session(app)
