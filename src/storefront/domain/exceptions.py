"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist or does not belong to the caller."""


class ProductUnavailableError(DomainException):
    """The product exists but is not in a state that allows the action."""


class InsufficientStockError(DomainException):
    """The requested quantity exceeds what the catalog has available."""


class DuplicateItemError(DomainException):
    """The item is already present where duplicates are not allowed."""


class ConcurrentModificationError(DomainException):
    """The stored document changed between load and save."""
