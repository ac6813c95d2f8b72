"""
Service layer abstraction.

Each service encapsulates the business rules of a domain and talks to
the ``EntityStore`` passed in by the caller.  Lookups return ``None``
for missing rows; rule violations raise ``ValueError`` and missing
parents of a compound operation raise ``NotFoundError``.  Endpoints
translate both into HTTP errors.
"""


class NotFoundError(LookupError):
    """A resource referenced by an operation does not exist."""
