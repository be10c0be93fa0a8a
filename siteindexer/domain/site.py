from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class SiteStatus(str, enum.Enum):
    INDEXING = "INDEXING"
    INDEXED = "INDEXED"
    FAILED = "FAILED"


@dataclass
class SiteRecord:
    """A configured site and the state of its most recent indexing pass."""

    url: str
    name: str
    status: SiteStatus
    status_time: datetime
    last_error: Optional[str] = None
    id: Optional[int] = None

    def __repr__(self):
        return f"<SiteRecord id={self.id} url={self.url} status={self.status.value}>"
