"""
Domain exceptions - Semantic error types for catalog requests.

Absence of data is never an exception: repository lookups return None
(or False for deletes) so callers can map it straight to a status code.
"""


class CatalogError(Exception):
    """Base class for catalog domain errors."""

    pass


class InvalidIdentifier(CatalogError):
    """Path parameter is not a valid entity identifier."""

    pass


class EmptyParameter(CatalogError):
    """Required free-text parameter is missing or blank."""

    pass
