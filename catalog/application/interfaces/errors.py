"""Errors raised by repository implementations.

Services rely on exactly two distinguishable kinds (not-found and
already-exists); anything else is treated as an internal failure.
"""


class RepositoryError(Exception):
    """Base class for storage-level failures signalled by repositories.

    resource_type/resource_id name the row that was missing or conflicting
    (which can differ from the entity being written, e.g. an unknown item
    referenced by an order).
    """

    def __init__(
        self,
        message: str = "",
        resource_type: str | None = None,
        resource_id: object | None = None,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(message or f"{resource_type}: {resource_id}")


class NotFoundError(RepositoryError):
    """The addressed row (or a row it references) does not exist."""


class AlreadyExistsError(RepositoryError):
    """A create violated a uniqueness constraint."""
