"""Politeness and authentication for OpenAlex requests."""

from requests.auth import AuthBase


class OpenAlexAuth(AuthBase):
    """Attach the caller's identity to every OpenAlex request.

    The contact email is sent both as the ``From`` header and as the
    ``mailto`` query parameter, which routes requests to the polite pool.
    An API key, when configured, is sent as a bearer token.

    Parameters
    ----------
    config : JournalConfig
        Configuration holding ``email``, ``api_key`` and ``user_agent``.
    """

    def __init__(self, config):
        self.config = config

    def headers(self):
        """Return the identity headers for the configured caller."""
        headers = {}
        if self.config.get("api_key"):
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        if self.config.get("email"):
            headers["From"] = self.config.email
        if self.config.get("user_agent"):
            headers["User-Agent"] = self.config.user_agent
        return headers

    def __call__(self, r):
        r.headers.update(self.headers())
        if self.config.get("email"):
            r.prepare_url(r.url, {"mailto": self.config.email})
        return r
