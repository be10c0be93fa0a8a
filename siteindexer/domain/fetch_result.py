"""Outcome of fetching one URL with retries."""
from typing import NamedTuple, Optional

from siteindexer.domain.http_response import HttpResponse


class FetchResult(NamedTuple):
    url: str
    attempts: int
    response: Optional[HttpResponse] = None
    """Set when one of the attempts produced an HTTP response (any status code)"""

    error: Optional[str] = None
    """Last transport error when every attempt failed"""

    @property
    def ok(self) -> bool:
        return self.response is not None
