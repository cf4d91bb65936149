class AliasFinderError(Exception):
    """Base exception for alias-finder errors."""

    pass


class UsageError(AliasFinderError):
    """Raised when a request cannot be built from the given arguments."""

    pass


class SnapshotError(AliasFinderError):
    """Raised when an alias listing cannot be read."""

    pass
