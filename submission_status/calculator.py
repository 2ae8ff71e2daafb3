"""
Calculate and validate the status of a submission.

Different data and rules apply depending on whether the submission has been
submitted. Before submission, status follows the most recent
:class:`.SubmissionEvent`. After submission, it is rolled up from the
:class:`.Deposit` and :class:`.RepositoryCopy` records for each target
repository.

All functions here are pure: records must already be loaded.
"""

import copy
from typing import Dict, Iterable, List, Optional, Set
from dataclasses import replace

from arxiv.base import logging

from .domain import Submission, SubmissionStatus, SubmissionEvent, EventType, \
    Deposit, DepositStatus, RepositoryCopy, CopyStatus, \
    AggregatedDepositStatus, Source
from .exceptions import InvalidStatusChange

logger = logging.getLogger(__name__)

StatusMap = Dict[str, Optional[SubmissionStatus]]

NEEDS_ATTENTION_COPY_STATUSES = (CopyStatus.REJECTED, CopyStatus.STALLED)

EVENT_STATUSES = {
    EventType.APPROVAL_REQUESTED: SubmissionStatus.APPROVAL_REQUESTED,
    EventType.APPROVAL_REQUESTED_NEWUSER: SubmissionStatus.APPROVAL_REQUESTED,
    EventType.CHANGES_REQUESTED: SubmissionStatus.CHANGES_REQUESTED,
    EventType.CANCELLED: SubmissionStatus.CANCELLED,
    EventType.SUBMITTED: SubmissionStatus.SUBMITTED,
}
"""Pre-submission status implied by the type of the latest event."""


def calculate_post_submission_status(
        repositories: List[str],
        deposits: Optional[Iterable[Deposit]],
        repository_copies: Optional[Iterable[RepositoryCopy]]) \
        -> SubmissionStatus:
    """
    Calculate the status of a submission that has been submitted.

    Each target repository is given a status from its deposit, and then from
    its repository copy, if there is one. The copy wins: a complete copy
    means the repository is done, whatever happened to the deposit.

    Parameters
    ----------
    repositories : list
        Identifiers of the submission's target repositories.
    deposits : iterable
        :class:`.Deposit` records for the submission.
    repository_copies : iterable
        :class:`.RepositoryCopy` records for the submission's publication.

    Returns
    -------
    :class:`.SubmissionStatus`
        ``NEEDS_ATTENTION`` if any repository needs attention, ``COMPLETE``
        if every repository is complete, otherwise ``SUBMITTED``.

    Raises
    ------
    ValueError
        If ``repositories`` is ``None``.

    """
    if repositories is None:
        raise ValueError('repositories cannot be None')
    status_map = _map_repository_statuses(repositories, deposits or [],
                                          repository_copies or [])
    return _reduce_statuses(set(status_map.values()))


def calculate_pre_submission_status(
        events: Optional[Iterable[SubmissionEvent]]) \
        -> Optional[SubmissionStatus]:
    """
    Calculate the status of a submission that has not been submitted.

    The most recent :class:`.SubmissionEvent` decides. With no events the
    submission has not been acted on, so it is awaiting a manuscript.

    Returns ``None`` if the latest event type has no corresponding status.
    """
    events = list(events or [])
    if not events:
        return SubmissionStatus.MANUSCRIPT_REQUIRED
    # Events with the same performed_date tie; max() keeps the first one.
    latest = max(events, key=lambda event: event.performed_date)
    return EVENT_STATUSES.get(latest.event_type)


def validate_status_change(submitted: bool,
                           from_status: Optional[SubmissionStatus],
                           to_status: Optional[SubmissionStatus]) -> None:
    """
    Check that a submission may move from ``from_status`` to ``to_status``.

    A mismatch between two pre-submission statuses is only logged: the UI
    owns those, and this may just mean that it got there first.

    Raises
    ------
    :class:`.InvalidStatusChange`
        If ``to_status`` is missing, or if either status contradicts the
        ``submitted`` flag.

    """
    if to_status is None:
        raise InvalidStatusChange(from_status, to_status,
                                  'The new status cannot be None.')
    if submitted:
        if not to_status.is_submitted:
            raise InvalidStatusChange(
                from_status, to_status,
                f'The status `{to_status.value}` cannot be assigned to a'
                ' Submission that has already been submitted. There may be a'
                ' data issue.'
            )
        return

    if to_status.is_submitted:
        raise InvalidStatusChange(
            from_status, to_status,
            f'The status `{to_status.value}` cannot be assigned to a'
            ' Submission that has not yet been submitted. There may be a data'
            ' issue.'
        )
    if from_status is not None and from_status.is_submitted:
        raise InvalidStatusChange(
            from_status, to_status,
            f'The current status of the Submission is `{from_status.value}`.'
            ' This indicates that the Submission was already submitted and'
            ' therefore should not be assigned a pre-submission status. There'
            ' may be a data issue.'
        )
    if from_status is not None and from_status != to_status:
        logger.warning('The status on the Submission record is `%s`, while'
                       ' the status calculated from the most recent'
                       ' SubmissionEvent is `%s`. The UI is responsible for'
                       ' setting pre-submission statuses, but this mismatch'
                       ' may indicate a data issue.',
                       from_status.value, to_status.value)


def calculate_aggregated_deposit_status(
        deposits: Optional[Iterable[Deposit]],
        source: Optional[Source]) -> Optional[AggregatedDepositStatus]:
    """
    Roll up the statuses of a submission's deposits.

    Only submissions created through the submission UI (``Source.PASS``) get
    an aggregated status; for anything else this returns ``None``.

    Raises
    ------
    ValueError
        If one of the deposits is ``None``, which suggests that something
        went wrong loading them.

    """
    if source is not Source.PASS:
        return None
    deposits = list(deposits or [])
    if not deposits:
        return AggregatedDepositStatus.NOT_STARTED
    if any(deposit is None for deposit in deposits):
        raise ValueError('A Deposit in the list was None. This may indicate a'
                         ' system problem. Please verify your deposits.')
    if all(deposit.status is DepositStatus.ACCEPTED for deposit in deposits):
        return AggregatedDepositStatus.ACCEPTED
    return AggregatedDepositStatus.IN_PROGRESS


def apply_status(submission: Submission,
                 status: Optional[SubmissionStatus]) -> Submission:
    """Get a copy of ``submission`` with its status set to ``status``."""
    return replace(copy.deepcopy(submission), status=status)


def _map_repository_statuses(repositories: Iterable[str],
                             deposits: Iterable[Deposit],
                             repository_copies: Iterable[RepositoryCopy]) \
        -> StatusMap:
    status_map: StatusMap = {repository: None for repository in repositories}
    for deposit in deposits:
        if deposit.status is DepositStatus.REJECTED:
            status_map[deposit.repository] = SubmissionStatus.NEEDS_ATTENTION
        else:
            status_map[deposit.repository] = SubmissionStatus.SUBMITTED
    for repo_copy in repository_copies:
        repository = repo_copy.repository
        if repo_copy.copy_status is CopyStatus.COMPLETE:
            status_map[repository] = SubmissionStatus.COMPLETE
        elif repo_copy.copy_status in NEEDS_ATTENTION_COPY_STATUSES:
            status_map[repository] = SubmissionStatus.NEEDS_ATTENTION
        else:
            # Nothing is wrong with the copy, so whatever went wrong with the
            # deposit is assumed to be resolved.
            status_map[repository] = SubmissionStatus.SUBMITTED
    return status_map


def _reduce_statuses(statuses: Set[Optional[SubmissionStatus]]) \
        -> SubmissionStatus:
    if SubmissionStatus.NEEDS_ATTENTION in statuses:
        return SubmissionStatus.NEEDS_ATTENTION
    if statuses == {SubmissionStatus.COMPLETE}:
        return SubmissionStatus.COMPLETE
    return SubmissionStatus.SUBMITTED
