"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class MediaStorageError(AdapterError):
    """Media could not be written to or removed from storage."""

    pass
