"""Entity types known to the repository."""

from enum import Enum


class EntityType(Enum):
    """Kinds of record stored in the repository, by their type name."""

    SUBMISSION = 'Submission'
    DEPOSIT = 'Deposit'
    REPOSITORY_COPY = 'RepositoryCopy'
    SUBMISSION_EVENT = 'SubmissionEvent'

    @property
    def plural(self) -> str:
        """Collection name under which records of this type are kept."""
        return _PLURALS[self]

    @classmethod
    def from_name(cls, name: str) -> 'EntityType':
        """Look up an entity type by its type name, e.g. ``Deposit``."""
        try:
            return cls(name)
        except ValueError as e:
            raise ValueError(f'Entity type "{name}" is not recognized') from e


_PLURALS = {
    EntityType.SUBMISSION: 'submissions',
    EntityType.DEPOSIT: 'deposits',
    EntityType.REPOSITORY_COPY: 'repositoryCopies',
    EntityType.SUBMISSION_EVENT: 'submissionEvents',
}
