"""Database helpers: engine creation and ORM models."""
from .engine import make_engine, init_db
from .models import Base, Site, Page

__all__ = ["make_engine", "init_db", "Base", "Site", "Page"]
