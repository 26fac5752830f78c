"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class MediaStoreError(AdapterError):
    """The image host rejected a request or could not be reached."""

    pass
