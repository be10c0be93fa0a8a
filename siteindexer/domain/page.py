from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageRecord:
    site_id: int
    path: str
    code: int
    content: Optional[str] = None
    id: Optional[int] = None

    def __repr__(self):
        return f"<PageRecord id={self.id} site_id={self.site_id} path={self.path!r} code={self.code}>"
