"""Domain-level exceptions.

All cart rule violations and collaborator faults are expressed as
subclasses of DomainException so the engine can catch them uniformly
and turn them into user-facing failure signals.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InventoryUnavailableError(DomainException):
    """The inventory service could not answer a lookup."""


class StorageError(DomainException):
    """The durable store could not be read or written."""
