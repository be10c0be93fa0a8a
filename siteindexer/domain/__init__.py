"""Domain objects for SiteIndexer - explicit re-exports to satisfy linters."""
from .site import SiteRecord as SiteRecord, SiteStatus as SiteStatus
from .page import PageRecord as PageRecord
from .site_config import SiteConfig as SiteConfig
from .http_response import HttpResponse as HttpResponse
from .fetch_result import FetchResult as FetchResult
from .crawl_result import CrawlResult as CrawlResult, CrawlState as CrawlState
from .frontier import Frontier as Frontier

__all__ = [
    "SiteRecord",
    "SiteStatus",
    "PageRecord",
    "SiteConfig",
    "HttpResponse",
    "FetchResult",
    "CrawlResult",
    "CrawlState",
    "Frontier",
]
