from .sites import SitesRepository
from .pages import PagesRepository

__all__ = ["SitesRepository", "PagesRepository"]
