"""Search of OpenAlex sources by free-text name."""

import requests
from pydantic import ValidationError as PydanticValidationError

from oajournal.client.session import get_requests_session
from oajournal.core.config import MAX_PER_PAGE
from oajournal.core.config import MIN_PER_PAGE
from oajournal.exceptions import APIError
from oajournal.exceptions import DataError
from oajournal.exceptions import NetworkError
from oajournal.exceptions import RateLimitError
from oajournal.logger import log_api_request
from oajournal.logger import log_api_response
from oajournal.models.source import CandidateRecord

SOURCES_PATH = "sources"


def _handle_error_response(response, url):
    """Raise the exception matching an HTTP error response.

    Args:
        response: The HTTP response object
        url: The request URL

    Raises:
        RateLimitError: For 429 responses
        APIError: For all other error responses
    """
    response_text = response.text[:200] if response.text else None

    if response.status_code == 429:
        retry_after = response.headers.get("Retry-After")
        raise RateLimitError(
            "Rate limit exceeded",
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            url=url,
            response_text=response_text,
        )

    error_msg = f"HTTP {response.status_code} error"
    if response.status_code == 404:
        error_msg = "Resource not found"
    elif response.status_code >= 500:
        error_msg = "Server error"

    raise APIError(
        error_msg,
        status_code=response.status_code,
        url=url,
        response_text=response_text,
    )


def _parse_page(response):
    """Return the results list and the total match count of a page."""
    try:
        payload = response.json()
    except ValueError as e:
        raise DataError("Response is not valid JSON", data_type="sources") from e

    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise DataError("Response has no results list", data_type="sources")

    meta = payload.get("meta") or {}
    return results, meta.get("count")


def _fetch_page(session, url, params, timeout):
    log_api_request(url, params)
    try:
        response = session.get(url, params=params, timeout=timeout)
    except requests.exceptions.RetryError as e:
        raise APIError("Maximum retries exceeded", url=url) from e
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Network error: {e}", url=url) from e

    if response.status_code >= 400:
        _handle_error_response(response, url)

    return _parse_page(response)


def _to_records(results):
    try:
        return [CandidateRecord.model_validate(result) for result in results]
    except PydanticValidationError as e:
        raise DataError(
            f"Invalid source record ({e.error_count()} validation errors)",
            data_type="source",
        ) from e


def search_sources(query, config=None, session=None):
    """Search OpenAlex sources matching a free-text name.

    Pages are requested in order until the catalog has no more matches
    or ``config.search_max_results`` records were collected.

    Parameters
    ----------
    query : str
        Free-text source name.
    config : JournalConfig, optional
        Configuration to use. If not provided, uses global config.
    session : requests.Session, optional
        Session to send requests with. A retrying session is created
        (and closed afterwards) when not provided.

    Returns
    -------
    list of CandidateRecord
        Candidate sources in catalog order, possibly empty.

    Raises
    ------
    RateLimitError
        If the catalog rejects the request with HTTP 429.
    APIError
        If the catalog answers with another error status.
    NetworkError
        If the catalog cannot be reached.
    DataError
        If a response cannot be parsed.
    """
    if config is None:
        from oajournal.core.config import config as global_config
        config = global_config

    url = f"{config.openalex_url.rstrip('/')}/{SOURCES_PATH}"
    per_page = max(MIN_PER_PAGE, min(MAX_PER_PAGE, config.search_per_page))
    max_results = config.search_max_results

    own_session = session is None
    if own_session:
        session = get_requests_session(config)

    records = []
    page = 1
    try:
        while len(records) < max_results:
            params = {"search": query, "per-page": per_page, "page": page}
            results, total = _fetch_page(session, url, params, config.timeout)
            log_api_response(len(results), total)
            records.extend(_to_records(results))

            if len(results) < per_page:
                break
            if total is not None and page * per_page >= total:
                break
            page += 1
    finally:
        if own_session:
            session.close()

    return records[:max_results]
