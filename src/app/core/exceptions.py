"""Application-level exceptions."""


class StorageError(Exception):
    """The data store failed to apply a unit of work.

    Raised for connectivity problems and constraint violations; the original
    driver/ORM error is chained as ``__cause__``.
    """
