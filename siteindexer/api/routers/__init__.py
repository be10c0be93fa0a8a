"""API router factory functions."""
from .indexing import create_indexing_router
from .sites import create_sites_router
from .systems import create_systems_router

__all__ = [
    "create_indexing_router",
    "create_sites_router",
    "create_systems_router",
]
