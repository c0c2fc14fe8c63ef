"""Exception classes for the product sales service."""


class SalesServiceError(Exception):
    """Base exception for the sales service."""
    pass


class StoreError(SalesServiceError):
    """Backing store errors."""
    pass


class StoreReadError(StoreError):
    """The store file is missing, unreadable or does not hold a transaction list.

    Never leaves ``models.store.load``; reads fail open to an empty log.
    """
    pass


class StoreWriteError(StoreError):
    """The store file could not be replaced."""
    pass
