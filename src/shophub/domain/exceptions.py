"""Domain-level exceptions.

All failures that should reach the user are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.

Cart stock problems are not exceptions: the cart engine
reports them as issues on a ``CartResult`` and keeps going.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class SnapshotError(DomainException):
    """A persisted cart snapshot could not be decoded."""


class UpstreamError(DomainException):
    """A remote data source failed or returned something unusable."""


class CatalogError(DomainException):
    """The stored product catalog could not be read."""
