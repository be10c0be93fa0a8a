import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import datetime
from typing import Callable, NamedTuple, Optional

from siteindexer.domain import CrawlResult, CrawlState, SiteConfig, SiteRecord, SiteStatus
from siteindexer.services.crawl_driver import CrawlDriver
from siteindexer.services.protocols import PageSink, SiteConfigSource, SiteRecordSink
from siteindexer.services.run_guard import RunGuard, RunState

logger = logging.getLogger(__name__)

ALREADY_RUNNING = "already running"
DEADLINE_EXCEEDED = "crawl deadline exceeded"
INDEXING_STOPPED = "indexing stopped"
NOTHING_FETCHED = "no pages could be fetched"


class StartResult(NamedTuple):
    started: bool
    reason: Optional[str] = None


class IndexingCoordinator:
    """Runs full indexing passes over every configured site.

    `start_full_indexing()` never blocks: it either hands a run to the
    background executor or rejects because one is already in progress. Inside
    a run, sites are handled one after another in configured order; for each
    one the old data is purged, a fresh `INDEXING` record is saved, the site is
    crawled, and the record is moved to its terminal status. A failure on one
    site is logged and the run moves on to the next.
    """

    def __init__(
        self,
        *,
        site_config_source: SiteConfigSource,
        sites_repo: SiteRecordSink,
        pages_repo: PageSink,
        crawl_driver_factory: Callable[[], CrawlDriver],
        executor: Optional[Executor] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.site_config_source = site_config_source
        self.sites_repo = sites_repo
        self.pages_repo = pages_repo
        self.crawl_driver_factory = crawl_driver_factory
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="indexing")
        self._now = now
        self._guard = RunGuard()
        self._stop_event = threading.Event()
        self._future: Optional[Future] = None

    @property
    def state(self) -> RunState:
        return self._guard.state

    @property
    def is_running(self) -> bool:
        return self._guard.state is RunState.RUNNING_FULL

    def start_full_indexing(self) -> StartResult:
        if not self._guard.try_acquire():
            logger.warning("Indexing requested while a run is already in progress")
            return StartResult(started=False, reason=ALREADY_RUNNING)
        try:
            self._future = self._executor.submit(self._run_full)
        except Exception:
            self._guard.release()
            raise
        logger.info("Full indexing started")
        return StartResult(started=True)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the most recent run finishes. Returns False on timeout."""
        future = self._future
        if future is None:
            return True
        try:
            future.result(timeout=timeout)
        except FutureTimeoutError:
            return False
        return True

    def shutdown(self, wait: bool = True) -> None:
        self._stop_event.set()
        self._executor.shutdown(wait=wait)

    def _run_full(self) -> None:
        try:
            sites = list(self.site_config_source.list_sites())
            logger.info("Indexing %s configured sites", len(sites))
            for site_config in sites:
                if self._stop_event.is_set():
                    logger.info("Indexing stopped before %s", site_config.url)
                    break
                self.process_site(site_config)
            logger.info("Indexing finished")
        except Exception:
            logger.exception("Indexing run failed")
        finally:
            self._guard.release()

    def process_site(self, site_config: SiteConfig) -> Optional[SiteRecord]:
        """Purge, recreate and crawl one site. Returns the final record, if any."""
        url = site_config.url
        try:
            self._purge(url)
        except Exception:
            logger.exception("Could not purge data for %s; skipping crawl", url)
            return None

        try:
            site = self.sites_repo.save(
                SiteRecord(
                    url=url,
                    name=site_config.name,
                    status=SiteStatus.INDEXING,
                    status_time=self._now(),
                    last_error=None,
                )
            )
            logger.info("Site prepared for indexing: %s (id=%s)", site_config.name, site.id)
        except Exception:
            logger.exception("Could not create site record for %s", url)
            return None

        try:
            result = self.crawl_driver_factory().crawl(site, stop_event=self._stop_event)
        except Exception as e:
            logger.exception("Crawl failed for %s", url)
            return self._finalize(site, SiteStatus.FAILED, str(e) or type(e).__name__)

        status, error = self._terminal_status(result)
        logger.info(
            "Site %s -> %s (pages=%s, fetch_failures=%s, pending=%s)",
            url,
            status.value,
            result.pages_recorded,
            result.fetch_failures,
            result.pending,
        )
        return self._finalize(site, status, error)

    def _purge(self, url: str) -> None:
        existing = self.sites_repo.find_by_url(url)
        if existing is None:
            logger.info("No previous data for %s", url)
            return
        deleted = self.pages_repo.delete_all_for_site(existing)
        self.sites_repo.delete(existing)
        logger.info("Deleted %s pages and site record for %s", deleted, url)

    @staticmethod
    def _terminal_status(result: CrawlResult):
        if result.state is CrawlState.TIMED_OUT:
            return SiteStatus.INDEXED, DEADLINE_EXCEEDED
        if result.state is CrawlState.STOPPED:
            return SiteStatus.FAILED, INDEXING_STOPPED
        if result.pages_recorded == 0:
            return SiteStatus.FAILED, NOTHING_FETCHED
        return SiteStatus.INDEXED, None

    def _finalize(self, site: SiteRecord, status: SiteStatus, error: Optional[str]) -> SiteRecord:
        site.status = status
        site.status_time = self._now()
        site.last_error = error
        try:
            return self.sites_repo.save(site)
        except Exception:
            logger.exception("Could not record status %s for %s", status.value, site.url)
            return site
