"""Custom exceptions for the stock media proxy."""


class StockMediaError(Exception):
    """Base exception for the stock media proxy."""

    pass


class ConfigurationError(StockMediaError):
    """Exception raised when a required provider credential is missing."""

    def __init__(self, env_name: str):
        self.env_name = env_name
        super().__init__(f"{env_name} is not configured")


class UpstreamError(StockMediaError):
    """Exception raised when a provider call fails.

    ``status_code`` is None for transport failures and unreadable bodies.
    """

    def __init__(self, provider: str, status_code: int | None = None, message: str = ""):
        self.provider = provider
        self.status_code = status_code
        self.message = message or f"{provider} error {status_code}"
        super().__init__(self.message)


class ValidationError(StockMediaError):
    """Exception raised for bad or missing client parameters."""

    pass


class ProxyError(StockMediaError):
    """Exception raised when a download cannot be proxied.

    Carries the HTTP status returned to the caller (400, 502 or 500).
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
