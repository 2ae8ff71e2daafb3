"""
Submission status derivation for the scholarly-submission repository.

Submissions, deposits, repository copies and submission events are kept in an
external linked-data repository. This package works out the single status
that a :class:`.domain.Submission` should have, given the records that depend
on it, and writes that status back under the rules for who owns it.

Overview
========

:mod:`.domain` defines the records as `PEP 557 data classes
<https://www.python.org/dev/peps/pep-0557/>`_, along with their status enums.

:mod:`.calculator` holds the pure decision logic.
:func:`.calculate_post_submission_status` rolls up deposits and repository
copies for a submitted submission; :func:`.calculate_pre_submission_status`
follows the most recent submission event for one that has not been submitted;
:func:`.validate_status_change` rejects statuses that contradict the
submission's ``submitted`` flag.

:class:`.SubmissionStatusService` loads the dependent records from a
:class:`.services.RecordStore`, runs the calculator, and persists the result.

.. code-block:: python

   from submission_status import SubmissionStatusService
   from submission_status.services import InMemoryRecordStore

   store = InMemoryRecordStore()
   service = SubmissionStatusService(store)
   status = service.calculate_and_update_status(submission)


Pre-submission statuses are normally set by the UI, so an existing one is
not replaced unless ``override_ui_status=True`` is passed.

Watch out for :class:`.exceptions.InvalidStatusChange`, raised when the data
for a submission is contradictory, and for
:class:`.services.UpdateConflict`, raised when the submission was changed by
someone else after it was read. Neither is retried here.
"""

from .calculator import calculate_post_submission_status, \
    calculate_pre_submission_status, validate_status_change, \
    calculate_aggregated_deposit_status, apply_status
from .domain import Submission, SubmissionStatus, Deposit, DepositStatus, \
    RepositoryCopy, CopyStatus, SubmissionEvent, EventType, EntityType
from .exceptions import InvalidStatusChange
from .service import SubmissionStatusService
