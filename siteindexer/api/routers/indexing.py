from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from siteindexer.services.indexing_coordinator import IndexingCoordinator


class StartIndexingResponse(BaseModel):
    started: bool
    reason: Optional[str] = None


def create_indexing_router(indexing_coordinator: IndexingCoordinator):
    router = APIRouter(prefix="/api", tags=["Indexing"])

    @router.get("/startIndexing", response_model=StartIndexingResponse, response_model_exclude_none=True)
    def start_indexing():
        """Start a full indexing run in the background.

        Returns immediately; rejects with `started: false` while a run is active.
        """
        result = indexing_coordinator.start_full_indexing()
        return StartIndexingResponse(started=result.started, reason=result.reason)

    return router
