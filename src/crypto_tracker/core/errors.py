"""Exception hierarchy for remote lookups and configuration resolution."""


class CryptoTrackerError(Exception):
    """Base class for all crypto tracker errors."""


class RemoteFetchError(CryptoTrackerError):
    """
    A remote lookup failed.

    Parameters
    ----------
    url : str
        URL that was requested
    message : str
        Human-readable failure description

    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(RemoteFetchError):
    """Request could not be built or the connection failed."""


class HttpStatusError(RemoteFetchError):
    """Response status was not 200."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP error {status_code} for {url}")
        self.status_code = status_code


class EmptyBodyError(RemoteFetchError):
    """Response carried no bytes."""


class DecodeError(RemoteFetchError):
    """Response body was not UTF-8 encoded JSON."""


class ConfigurationError(CryptoTrackerError):
    """Portfolio configuration could not be resolved."""


class ConfigurationMissingError(ConfigurationError):
    """No usable configuration document was found."""


class ConfigurationInvalidError(ConfigurationError):
    """Configuration document exists but is malformed."""
