"""
Custom exception classes for oajournal.

This module defines specific exception types for the failure modes of a
journal lookup, enabling callers to tell bad input from missing
configuration and from catalog/network trouble.
"""


class OAJournalException(Exception):
    """Base exception class for all oajournal errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class NetworkError(OAJournalException):
    """
    Raised when the catalog cannot be reached.

    Examples:
        - Connection timeout
        - DNS resolution failure
        - Network unreachable
    """

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message, f"URL: {url}" if url else None)


class APIError(OAJournalException):
    """
    Raised when the OpenAlex API answers with an error status.

    Examples:
        - 400 Bad Request
        - 429 Rate Limit Exceeded
        - 500 Internal Server Error
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
        url: str | None = None,
    ):
        self.status_code = status_code
        self.response_text = response_text
        self.url = url

        details = []
        if status_code:
            details.append(f"Status: {status_code}")
        if url:
            details.append(f"URL: {url}")
        if response_text and len(response_text) < 200:
            details.append(f"Response: {response_text}")

        detail_str = ", ".join(details) if details else None
        super().__init__(message, detail_str)


class RateLimitError(APIError):
    """
    Raised when the catalog rate limit is exceeded.

    The OpenAlex API allows 10 requests per second and
    100,000 requests per day.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        **kwargs,
    ):
        self.retry_after = retry_after
        if retry_after:
            message = f"{message}. Retry after {retry_after} seconds."
        super().__init__(message, status_code=429, **kwargs)


class ValidationError(OAJournalException):
    """
    Raised when input validation fails.

    Examples:
        - Journal name is not a string
        - Journal name is empty
        - Batch input is not a list of names
    """

    def __init__(
        self, message: str, field: str | None = None, value: str | None = None
    ):
        self.field = field
        self.value = value

        details = []
        if field:
            details.append(f"Field: {field}")
        if value:
            details.append(f"Value: {value}")

        detail_str = ", ".join(details) if details else None
        super().__init__(message, detail_str)


class ConfigurationError(OAJournalException):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - No contact email for the OpenAlex polite pool
        - Invalid configuration value
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        detail_str = f"Key: {config_key}" if config_key else None
        super().__init__(message, detail_str)


class DataError(OAJournalException):
    """
    Raised when a catalog response cannot be processed.

    Examples:
        - Body is not JSON
        - Missing ``results`` list
        - Source record fails validation
    """

    def __init__(self, message: str, data_type: str | None = None):
        self.data_type = data_type
        detail_str = f"Type: {data_type}" if data_type else None
        super().__init__(message, detail_str)


class CLIError(OAJournalException):
    """
    Raised when CLI-specific errors occur.

    Examples:
        - No journal names given
        - Input file not found
    """

    def __init__(self, message: str, command: str | None = None):
        self.command = command
        detail_str = f"Command: {command}" if command else None
        super().__init__(message, detail_str)
