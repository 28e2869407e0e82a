"""Exception hierarchy for Maplify."""


class MaplifyError(Exception):
    """Base class for all Maplify errors."""


class ConfigurationError(MaplifyError, ValueError):
    """Raised when sources are configured inconsistently."""


class TransportError(MaplifyError):
    """HTTP failure while fetching a source, with the offending URL attached."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(MaplifyError):
    """Raised when a payload cannot be turned into entries."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url
