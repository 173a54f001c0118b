from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when required runtime configuration is missing."""


class QuoteFetchError(RuntimeError):
    """Base class for failures fetching or decoding the upstream quote."""


class ProviderError(QuoteFetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Finnhub returned {status_code}")
        self.status_code = status_code


class TransportError(QuoteFetchError):
    pass


class ParseError(QuoteFetchError):
    pass
