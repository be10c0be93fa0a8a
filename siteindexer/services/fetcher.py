from __future__ import annotations

import logging
from typing import Protocol

from siteindexer.domain.fetch_result import FetchResult
from siteindexer.exceptions import HttpFetchError
from siteindexer.services.http_service import HttpService

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and report either an HTTP response or a give-up failure."""

    def fetch(self, url: str) -> FetchResult: ...


class RetryingFetcher:
    """Retries transport failures of `HttpService.fetch` back to back.

    HTTP error statuses are responses, not failures, and are never retried.
    """

    def __init__(self, http_service: HttpService, max_attempts: int = 3):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._http_service = http_service
        self.max_attempts = max_attempts

    def fetch(self, url: str) -> FetchResult:
        last_error = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = self._http_service.fetch(url)
            except HttpFetchError as e:
                last_error = e
                logger.warning("Attempt %s/%s for %s failed: %s", attempt, self.max_attempts, url, e.original)
                continue
            return FetchResult(url=url, attempts=attempt, response=response)

        logger.error("Giving up on %s after %s attempts", url, self.max_attempts)
        return FetchResult(url=url, attempts=self.max_attempts, error=str(last_error))
