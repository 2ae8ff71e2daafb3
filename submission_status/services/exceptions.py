"""Exceptions raised by :mod:`submission_status.services`."""


class RecordStoreError(RuntimeError):
    """Base for record store exceptions."""


class NoSuchResource(RecordStoreError):
    """A request was made for a record that does not exist."""


class UpdateConflict(RecordStoreError):
    """
    The record changed since it was last read.

    The version tag on the entity being written no longer matches the stored
    one. Callers may re-read the record and try again.
    """
