from contextlib import asynccontextmanager

from fastapi import FastAPI

from siteindexer.api.routers import create_indexing_router, create_sites_router, create_systems_router


def create_app(container) -> FastAPI:
    """Build the FastAPI application from a configured `Container`."""
    coordinator = container.indexing_coordinator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        coordinator.shutdown(wait=False)

    app = FastAPI(title="SiteIndexer", lifespan=lifespan)
    app.include_router(create_indexing_router(coordinator))
    app.include_router(
        create_sites_router(container.sites_repository(), container.pages_repository(), coordinator)
    )
    app.include_router(create_systems_router(container.config()))
    return app
