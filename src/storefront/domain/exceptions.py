"""Domain-level exceptions.

Every rejected caller input is a subclass of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Empty listings are never errors.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantity(ValidationError):
    """A requested quantity is below 1."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
