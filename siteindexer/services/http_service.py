import requests
from typing import Callable

from siteindexer.domain.http_response import HttpResponse
from siteindexer.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection.
    This enables easy testing without patching and allows swapping HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, connect_timeout: float = 10, read_timeout: float = 15):
        self.user_agent = user_agent
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return its status code and body text.

        Any status code is returned as-is; only transport failures raise `HttpFetchError`.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(
                url,
                headers=headers,
                timeout=(self.connect_timeout, self.read_timeout),
            )
            text = resp.text
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        return HttpResponse(resp.status_code, text)
