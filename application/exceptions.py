"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Store operations never raise them across their own boundary: they are carried
inside a Result (see application.result) so callers decide what to do.
"""


class LockedError(Exception):
    """Base class for errors raised by the Locked data-access layer."""

    pass


class NotFoundError(LockedError):
    """A document required by a read or update does not exist."""

    pass


class InvalidArgumentError(LockedError):
    """A required argument was blank or empty.

    Raised before any write is issued, so an operation failing with this
    error has performed zero writes.
    """

    pass


class StoreError(LockedError):
    """Transport or commit failure reported by an in-process document store.

    Production adapters pass their client's own exceptions through unchanged;
    this type exists for stores that have no native error hierarchy.
    """

    pass


class NotAuthenticatedError(LockedError):
    """No signed-in principal was available for an operation that needs one."""

    pass
