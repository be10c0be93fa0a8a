"""Crawl result data model."""
import enum
from typing import NamedTuple


class CrawlState(str, enum.Enum):
    RUNNING = "RUNNING"
    DRAINING = "DRAINING"
    TIMED_OUT = "TIMED_OUT"
    STOPPED = "STOPPED"


class CrawlResult(NamedTuple):
    """Result of one site's crawl.

    Provides feedback about what happened during the crawl,
    enabling callers to log metrics and pick the site's final status.
    """
    state: CrawlState
    """DRAINING when the frontier emptied, TIMED_OUT on deadline, STOPPED on stop_event"""

    pages_recorded: int
    """Number of pages successfully fetched and stored"""

    fetch_failures: int
    """URLs abandoned after exhausting their fetch attempts"""

    pending: int
    """URLs still queued when the crawl ended"""
