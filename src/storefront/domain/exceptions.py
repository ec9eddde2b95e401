"""Domain-level exceptions.

Every failure a use case can report is a subclass of DomainException so
the CLI and the HTTP layer can catch them uniformly and map each kind to
its own exit message or status code.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidStateError(DomainException):
    """The operation is not valid for the current state (e.g. empty cart)."""


class ValidationError(InvalidStateError):
    """A business rule or invariant was violated by an input value."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnauthenticatedError(DomainException):
    """No identity, or an identity that could not be verified."""


class ForbiddenError(DomainException):
    """The caller is authenticated but not allowed to do this."""


class ConflictError(DomainException):
    """A concurrent write changed the aggregate since it was read."""
