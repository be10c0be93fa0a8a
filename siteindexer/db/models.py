from __future__ import annotations

from sqlalchemy import Column, Integer, Text, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

from siteindexer.domain.site import SiteStatus


Base = declarative_base()


class Site(Base):
    __tablename__ = "sites"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    url = Column(String(512), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    status = Column(Enum(SiteStatus, name="site_status"), nullable=False)
    status_time = Column(DateTime, nullable=False)
    last_error = Column(Text, nullable=True)

    pages = relationship("Page", back_populates="site", passive_deletes=True)


class Page(Base):
    __tablename__ = "pages"

    id = Column(Integer, primary_key=True)
    site_id = Column(Integer, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False, index=True)
    path = Column(Text, nullable=False)
    code = Column(Integer, nullable=False)
    content = Column(Text, nullable=True)

    site = relationship("Site", back_populates="pages")
