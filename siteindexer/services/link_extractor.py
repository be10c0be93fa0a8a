import re
from typing import List

# Lenient scan: double-quoted href values only, no HTML parsing.
_HREF_RE = re.compile(r'href\s*=\s*"(.*?)"')


class LinkExtractor:
    def extract(self, content: str, base_url: str) -> List[str]:
        """Return same-site links found in `content`, in order of appearance.

        `/path` values are appended to `base_url`; absolute `http...` values are
        kept only when they start with `base_url`. Everything else is dropped.
        Duplicates are left for the frontier to handle.
        """
        links = []
        if not content:
            return links
        for match in _HREF_RE.finditer(content):
            link = match.group(1)
            if link.startswith("/"):
                link = base_url + link
            elif not link.startswith("http"):
                continue
            if link.startswith(base_url):
                links.append(link)
        return links
