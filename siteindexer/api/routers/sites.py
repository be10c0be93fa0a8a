import logging

from fastapi import APIRouter, HTTPException

logger = logging.getLogger(__name__)


def create_sites_router(sites_repo, pages_repo, indexing_coordinator):
    router = APIRouter(prefix="/api", tags=["Sites"])

    @router.get("/sites")
    def list_sites():
        """Return every stored site with its status and page count."""
        try:
            sites = sites_repo.list_sites()
            items = [
                {
                    "id": s.id,
                    "url": s.url,
                    "name": s.name,
                    "status": s.status.value,
                    "status_time": s.status_time,
                    "last_error": s.last_error,
                    "pages": pages_repo.count_for_site(s.id),
                }
                for s in sites
            ]
        except Exception:
            logger.exception("Could not list sites")
            raise HTTPException(status_code=500, detail="could not list sites")
        return {"indexing": indexing_coordinator.is_running, "sites": items}

    return router
