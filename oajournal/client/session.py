"""HTTP session management for OpenAlex API."""

import requests
from urllib3.util import Retry

from oajournal.client.auth import OpenAlexAuth


def get_requests_session(config=None):
    """Create a Requests session with automatic retry.

    Parameters
    ----------
    config : JournalConfig, optional
        Configuration object for OpenAlex API. If not provided, uses global config.

    Returns
    -------
    requests.Session
        Requests session with retry configuration and OpenAlex auth headers.
    """
    if config is None:
        from oajournal.core.config import config as global_config
        config = global_config

    requests_session = requests.Session()
    retries = Retry(
        total=config.max_retries,
        backoff_factor=config.retry_backoff_factor,
        status_forcelist=config.retry_http_codes,
        allowed_methods={"GET"},
        respect_retry_after_header=True,
        raise_on_status=False,
    )
    adapter = requests.adapters.HTTPAdapter(max_retries=retries)
    requests_session.mount("https://", adapter)
    requests_session.mount("http://", adapter)
    requests_session.auth = OpenAlexAuth(config)

    return requests_session
