"""Configuration management for oajournal."""

import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

from oajournal._version import __version__

# Load .env from the current directory
load_dotenv(dotenv_path=Path.cwd() / ".env", verbose=False)


# Constants
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_BACKOFF_FACTOR = 0.5
DEFAULT_RETRY_HTTP_CODES = [429, 500, 502, 503, 504]

# HTTP Client Defaults
DEFAULT_TIMEOUT = 30

# API Limits
MAX_PER_PAGE = 200
MIN_PER_PAGE = 1

# Search Defaults
DEFAULT_SEARCH_PER_PAGE = MAX_PER_PAGE
DEFAULT_SEARCH_MAX_RESULTS = 200


class JournalConfig(dict):
    """Configuration class for journal lookups against OpenAlex.

    Attributes
    ----------
    email : str
        Contact email sent to OpenAlex (polite pool). Required to search.
    api_key : str
        API key for authentication.
    user_agent : str
        User agent string for API requests.
    openalex_url : str
        Base URL for OpenAlex API.
    max_retries : int
        Maximum number of retries for API requests.
    retry_backoff_factor : float
        Backoff factor for retries.
    retry_http_codes : list
        List of HTTP status codes to retry on.
    timeout : float
        Timeout in seconds for a single API request.
    search_per_page : int
        Number of sources requested per page (1-200).
    search_max_results : int
        Maximum number of candidate sources collected for one journal.
    """

    def __getattr__(self, key):
        try:
            return super().__getitem__(key)
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        return super().__setitem__(key, value)

    def with_overrides(self, **overrides):
        """Return a copy with the non-None overrides applied.

        The original configuration is left untouched.
        """
        merged = dict(self)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return self.__class__(merged)


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable with validation."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        warnings.warn(
            f"Invalid integer for {key}: {value}. Using default: {default}",
            stacklevel=2,
        )
        return default


def _get_env_float(key: str, default: float) -> float:
    """Get float from environment variable with validation."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        warnings.warn(
            f"Invalid float for {key}: {value}. Using default: {default}",
            stacklevel=2,
        )
        return default


def _clamp_per_page(value: int) -> int:
    return max(MIN_PER_PAGE, min(MAX_PER_PAGE, value))


def load_config() -> JournalConfig:
    """Build a configuration from environment variables.

    Returns
    -------
    JournalConfig
        Configuration with environment values applied over the defaults.
    """
    return JournalConfig(
        email=os.getenv("OPENALEX_EMAIL") or None,
        api_key=os.getenv("OPENALEX_API_KEY") or None,
        user_agent=os.getenv("OPENALEX_USER_AGENT", f"oajournal/{__version__}"),
        openalex_url=os.getenv("OPENALEX_URL", "https://api.openalex.org"),
        max_retries=_get_env_int("OPENALEX_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        retry_backoff_factor=_get_env_float(
            "OPENALEX_RETRY_BACKOFF", DEFAULT_RETRY_BACKOFF_FACTOR
        ),
        retry_http_codes=list(DEFAULT_RETRY_HTTP_CODES),
        timeout=_get_env_float("OPENALEX_TIMEOUT", DEFAULT_TIMEOUT),
        search_per_page=_clamp_per_page(
            _get_env_int("OPENALEX_SEARCH_PER_PAGE", DEFAULT_SEARCH_PER_PAGE)
        ),
        search_max_results=_get_env_int(
            "OPENALEX_SEARCH_MAX_RESULTS", DEFAULT_SEARCH_MAX_RESULTS
        ),
    )


config = load_config()
