"""Exceptions raised while deriving submission status."""

from typing import Any, Optional


def _label(status: Any) -> Optional[str]:
    return getattr(status, 'value', status)


class InvalidStatusChange(ValueError):
    """
    Raised when a status change would contradict the submission's data.

    For example, assigning a pre-submission status to a submission that has
    already been submitted.
    """

    def __init__(self, from_status: Any, to_status: Any, reason: str = '',
                 submission_id: Optional[str] = None) -> None:
        """Use the status values to build an error message."""
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        self.submission_id = submission_id
        target = f' on Submission {submission_id}' if submission_id else ''
        r = (f"Cannot change status from `{_label(from_status)}` to"
             f" `{_label(to_status)}`{target}: {reason}")
        super(InvalidStatusChange, self).__init__(r)
