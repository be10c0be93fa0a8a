import logging
import os
from typing import List, Optional

import yaml

from siteindexer.domain import SiteConfig
from siteindexer.exceptions import SitesConfigError

logger = logging.getLogger(__name__)


class SitesConfigService:
    """Reads the seed sites from a YAML file.

    Expected layout (a top-level ``indexing-settings`` wrapper is also accepted)::

        sites:
          - url: https://example.com
            name: Example

    The file is re-read on every call so edits apply to the next run.
    """

    def __init__(self, sites_file: Optional[str] = None):
        self.sites_file = sites_file or os.path.join(os.getcwd(), "sites.yml")

    def _load_yaml(self):
        if not os.path.isfile(self.sites_file):
            logger.warning("Sites file %s not found; no sites to index", self.sites_file)
            return None
        try:
            with open(self.sites_file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SitesConfigError(self.sites_file, f"is not valid YAML: {e}") from e

    def list_sites(self) -> List[SiteConfig]:
        data = self._load_yaml()
        if not data:
            return []
        if not isinstance(data, dict):
            raise SitesConfigError(self.sites_file, "does not contain a mapping")
        if "indexing-settings" in data and isinstance(data["indexing-settings"], dict):
            data = data["indexing-settings"]

        entries = data.get("sites") or []
        if not isinstance(entries, list):
            raise SitesConfigError(self.sites_file, "'sites' must be a list")

        sites = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("url"):
                logger.warning("Skipping sites entry #%s without url: %r", i, entry)
                continue
            url = str(entry["url"]).strip()
            name = str(entry.get("name") or url)
            sites.append(SiteConfig(url=url, name=name))
        return sites
