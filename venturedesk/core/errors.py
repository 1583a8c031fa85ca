class VentureDeskError(Exception):
    """Base error for venturedesk."""


class ConfigError(VentureDeskError):
    """Raised when a required setting is missing."""


class StorageError(VentureDeskError):
    """Raised when the object store rejects an upload or copy."""
