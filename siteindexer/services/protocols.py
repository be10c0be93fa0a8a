"""Protocol (interface) definitions for the persistence and config ports.

The crawl engine depends only on these; the SQLAlchemy repositories and the
YAML sites file are the production implementations.
"""

from typing import Optional, Protocol, Sequence

from siteindexer.domain import PageRecord, SiteConfig, SiteRecord


class SiteConfigSource(Protocol):
    def list_sites(self) -> Sequence[SiteConfig]:
        """Return the seed sites for one full run, in configured order."""
        ...


class SiteRecordSink(Protocol):
    def find_by_url(self, url: str) -> Optional[SiteRecord]: ...

    def save(self, record: SiteRecord) -> SiteRecord: ...

    def delete(self, record: SiteRecord) -> None: ...


class PageSink(Protocol):
    def delete_all_for_site(self, site: SiteRecord) -> int: ...

    def save(self, page: PageRecord): ...
