from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from siteindexer.db.models import Site as DBSite
from siteindexer.domain import SiteRecord


class SitesRepository:
    """Repository for Site rows.

    Requires an explicit `session_factory` (callable returning a `Session`).
    """
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, row: DBSite) -> SiteRecord:
        return SiteRecord(
            id=row.id,
            url=row.url,
            name=row.name,
            status=row.status,
            status_time=row.status_time,
            last_error=row.last_error,
        )

    def find_by_url(self, url: str) -> Optional[SiteRecord]:
        with self.get_session() as session:
            q = select(DBSite).where(DBSite.url == url)
            row = session.execute(q).scalars().first()
            if not row:
                return None
            return self._to_domain(row)

    def save(self, record: SiteRecord) -> SiteRecord:
        """Insert `record` when it has no id, otherwise update the stored row.

        Returns a new `SiteRecord` reflecting the stored state.
        """
        with self.get_session() as session:
            row = session.get(DBSite, record.id) if record.id is not None else None
            if row is None:
                row = DBSite(url=record.url)
                session.add(row)
            row.name = record.name
            row.status = record.status
            row.status_time = record.status_time
            row.last_error = record.last_error
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def delete(self, record: SiteRecord) -> None:
        if record.id is None:
            return
        with self.get_session() as session:
            row = session.get(DBSite, record.id)
            if row is None:
                return
            session.delete(row)
            session.commit()

    def list_sites(self) -> List[SiteRecord]:
        with self.get_session() as session:
            rows = session.execute(select(DBSite).order_by(DBSite.id)).scalars().all()
            return [self._to_domain(r) for r in rows]
