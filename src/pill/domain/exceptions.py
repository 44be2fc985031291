"""Domain-level exceptions.

Every rejected inventory operation is expressed as a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages. None of them are fatal: the store is left
unchanged whenever one is raised.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument was rejected (blank name, non-positive quantity, ...)."""


class EntityNotFoundError(DomainException):
    """The batch targeted by a delete, edit or use does not exist."""
