import logging
import threading
import time
from typing import Callable, Optional

from siteindexer.domain import CrawlResult, CrawlState, Frontier, PageRecord, SiteRecord
from siteindexer.services.fetcher import Fetcher
from siteindexer.services.link_extractor import LinkExtractor
from siteindexer.services.protocols import PageSink

logger = logging.getLogger(__name__)


class CrawlDriver:
    """Crawls one site breadth-first, one page at a time.

    Each cycle takes the next URL from a `Frontier`, fetches it, stores the page
    through the page sink, and offers the same-site links it contains back to
    the frontier. Cycles are separated by `delay_seconds`. The whole crawl is
    bounded by `deadline_seconds` of wall-clock time; hitting the bound ends
    the crawl early but keeps what was already stored.

    Sink failures are not handled here: they propagate to the caller, which
    decides the fate of the site.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        link_extractor: LinkExtractor,
        page_sink: PageSink,
        delay_seconds: float = 0.5,
        deadline_seconds: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.page_sink = page_sink
        self.delay_seconds = delay_seconds
        self.deadline_seconds = deadline_seconds
        self._clock = clock
        self.state = CrawlState.RUNNING

    def _is_stopped(self, stop_event) -> bool:
        return stop_event is not None and getattr(stop_event, "is_set", lambda: False)()

    def _pause(self, stop_event: Optional[threading.Event]) -> None:
        if self.delay_seconds <= 0:
            return
        if stop_event is not None:
            stop_event.wait(self.delay_seconds)
        else:
            time.sleep(self.delay_seconds)

    @staticmethod
    def relative_path(url: str, base_url: str) -> str:
        if url.startswith(base_url):
            return url[len(base_url):]
        return url

    def crawl(self, site: SiteRecord, stop_event: Optional[threading.Event] = None) -> CrawlResult:
        if site is None or site.id is None:
            raise ValueError("a saved site is required for crawl")

        base_url = site.url
        frontier = Frontier([base_url])
        deadline = self._clock() + self.deadline_seconds
        pages_recorded = 0
        fetch_failures = 0
        self.state = CrawlState.RUNNING

        while True:
            if self._is_stopped(stop_event):
                logger.info("Crawl stopped for %s with %s URLs pending", base_url, len(frontier))
                self.state = CrawlState.STOPPED
                break
            if frontier.is_empty():
                logger.info(
                    "Crawl finished for %s: %s pages from %s visited URLs",
                    base_url,
                    pages_recorded,
                    frontier.visited_count,
                )
                self.state = CrawlState.DRAINING
                break
            if self._clock() >= deadline:
                logger.warning(
                    "Crawl deadline of %ss reached for %s; abandoning %s pending URLs",
                    self.deadline_seconds,
                    base_url,
                    len(frontier),
                )
                self.state = CrawlState.TIMED_OUT
                break

            url = frontier.next()
            result = self.fetcher.fetch(url)
            if not result.ok:
                fetch_failures += 1
            else:
                response = result.response
                path = self.relative_path(url, base_url)
                self.page_sink.save(
                    PageRecord(site_id=site.id, path=path, code=response.status_code, content=response.text)
                )
                pages_recorded += 1
                logger.info("Fetched %s -> status %s", url, response.status_code)
                if response.status_code < 200 or response.status_code >= 300:
                    logger.warning("Non-success status for %s: %s", url, response.status_code)

                for link in self.link_extractor.extract(response.text, base_url):
                    frontier.offer(link)

            if not frontier.is_empty():
                self._pause(stop_event)

        return CrawlResult(
            state=self.state,
            pages_recorded=pages_recorded,
            fetch_failures=fetch_failures,
            pending=len(frontier),
        )
