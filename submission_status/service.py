"""
Calculate and update the status of a single submission.

Responsibility for the status is divided. Pre-submission statuses are managed
by the UI; post-submission statuses are managed by back-end services such as
this one. So :meth:`.SubmissionStatusService.calculate_and_update_status`
only replaces a pre-submission status if there is none yet, or if it is
explicitly told to override the UI.
"""

from typing import Any, List

from arxiv.base import logging

from .calculator import calculate_pre_submission_status, \
    calculate_post_submission_status, validate_status_change, apply_status
from .domain import Submission, SubmissionStatus, EntityType
from .exceptions import InvalidStatusChange
from .services.store import RecordStore

logger = logging.getLogger(__name__)


class SubmissionStatusService:
    """Derives submission status from records in a :class:`.RecordStore`."""

    def __init__(self, store: RecordStore) -> None:
        if store is None:
            raise ValueError('store cannot be None')
        self.store = store

    def calculate_status(self, submission: Submission) -> SubmissionStatus:
        """
        Calculate the appropriate status for ``submission``.

        Uses the :class:`.Deposit` and :class:`.RepositoryCopy` records of a
        submitted submission, or the :class:`.SubmissionEvent` records of one
        that has not been submitted. Nothing is persisted.

        Raises
        ------
        ValueError
            If ``submission`` is missing or has no ``id``.
        :class:`.InvalidStatusChange`
            If the calculated status conflicts with the submission's data.

        """
        self._check(submission)
        if not submission.submitted:
            # Before submission, the events are our only clue.
            events = self._load(EntityType.SUBMISSION_EVENT, 'submission',
                                submission.id)
            to_status = calculate_pre_submission_status(events)
        else:
            deposits = self._load(EntityType.DEPOSIT, 'submission',
                                  submission.id)
            repository_copies = []
            if submission.publication is not None:
                repository_copies = self._load(EntityType.REPOSITORY_COPY,
                                               'publication',
                                               submission.publication)
            to_status = calculate_post_submission_status(
                submission.repositories, deposits, repository_copies
            )

        try:
            validate_status_change(submission.submitted, submission.status,
                                   to_status)
        except InvalidStatusChange as e:
            raise InvalidStatusChange(e.from_status, e.to_status, e.reason,
                                      submission_id=submission.id) from e
        return to_status

    def calculate_and_update_status(self, submission: Submission,
                                    override_ui_status: bool = False) \
            -> SubmissionStatus:
        """
        Calculate the status of ``submission``, and persist it if it changed.

        The UI will typically have responsibility for the status before the
        submission is submitted. So by default an existing pre-submission
        status is left alone; only a missing one is filled in.

        Parameters
        ----------
        submission : :class:`.Submission`
            Not modified; an updated copy is written to the store.
        override_ui_status : bool
            If ``True``, replace the current pre-submission status even though
            it may have been set by the UI.

        Returns
        -------
        :class:`.SubmissionStatus`
            The status that the submission has after this call.

        Raises
        ------
        :class:`.InvalidStatusChange`
            If the calculated status conflicts with the submission's data.
        :class:`.UpdateConflict`
            If the submission changed in the store since it was read.

        """
        from_status = submission.status if submission is not None else None
        to_status = self.calculate_status(submission)

        if from_status is not None and from_status == to_status:
            logger.debug('Status of Submission %s did not change. The current'
                         ' status is `%s`', submission.id, from_status.value)
            return from_status

        if not override_ui_status and not submission.submitted \
                and from_status is not None:
            logger.info('Status of Submission %s did not change because'
                        ' pre-submission UI statuses are protected. The'
                        ' current status will stay as `%s`', submission.id,
                        from_status.value)
            return from_status

        logger.info('Updating status of Submission %s from `%s` to `%s`',
                    submission.id, getattr(from_status, 'value', None),
                    to_status.value)
        self.store.update_resource(apply_status(submission, to_status))
        return to_status

    def update_status_by_id(self, submission_id: str,
                            override_ui_status: bool = False) \
            -> SubmissionStatus:
        """
        Load the submission with ``submission_id``, then update its status.

        See :meth:`.calculate_and_update_status`.

        Raises
        ------
        :class:`.NoSuchResource`
            If there is no submission with that id.

        """
        if submission_id is None:
            raise ValueError('submission_id cannot be None')
        submission = self.store.read_resource(submission_id,
                                              EntityType.SUBMISSION)
        return self.calculate_and_update_status(submission, override_ui_status)

    def _load(self, entity_type: EntityType, attribute: str,
              value: Any) -> List[Any]:
        identifiers = self.store.find_all_by_attribute(entity_type, attribute,
                                                       value)
        logger.debug('found %i %s for %s %s', len(identifiers),
                     entity_type.plural, attribute, value)
        return [self.store.read_resource(identifier, entity_type)
                for identifier in sorted(identifiers)]

    @staticmethod
    def _check(submission: Submission) -> None:
        if submission is None:
            raise ValueError('submission cannot be None')
        if submission.id is None:
            raise ValueError('No status could be calculated for the'
                             ' Submission as it does not have an id.')
