from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from siteindexer.db.models import Page as DBPage
from siteindexer.domain import PageRecord, SiteRecord


class PagesRepository:
    """Repository for Page database operations.

    Requires an explicit `session_factory` (callable returning a `Session`).
    """
    def __init__(self, session_factory):
        self.session_factory = session_factory

    @staticmethod
    def _sanitize_text(val: Optional[str]) -> Optional[str]:
        """Remove NUL (\x00) characters from text fields to satisfy DB constraints.

        Postgres TEXT columns cannot contain NULs; some fetched content (e.g., PDFs
        or binary responses misclassified as text) may include NUL bytes. Strip them
        before persisting.
        """
        if isinstance(val, str):
            return val.replace("\x00", "")
        return val

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, row: DBPage, full: bool = True) -> PageRecord:
        return PageRecord(
            id=row.id,
            site_id=row.site_id,
            path=row.path,
            code=row.code,
            content=row.content if full else None,
        )

    def save(self, page: PageRecord) -> PageRecord:
        with self.get_session() as session:
            row = DBPage(
                site_id=page.site_id,
                path=page.path,
                code=page.code,
                content=self._sanitize_text(page.content),
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def delete_all_for_site(self, site: SiteRecord) -> int:
        """Delete every page owned by `site`. Returns number deleted."""
        if site.id is None:
            return 0
        with self.get_session() as session:
            result = session.execute(delete(DBPage).where(DBPage.site_id == site.id))
            session.commit()
            return result.rowcount or 0

    def count_for_site(self, site_id: int) -> int:
        with self.get_session() as session:
            q = select(func.count()).select_from(DBPage).where(DBPage.site_id == site_id)
            return session.execute(q).scalar_one()

    def list_for_site(self, site_id: int, full: bool = False, limit: Optional[int] = None) -> List[PageRecord]:
        with self.get_session() as session:
            q = select(DBPage).where(DBPage.site_id == site_id).order_by(DBPage.id)
            if limit:
                q = q.limit(limit)
            rows = session.execute(q).scalars().all()
            return [self._to_domain(r, full=full) for r in rows]
