from typing import NamedTuple


class SiteConfig(NamedTuple):
    """One seed entry from the sites file."""
    url: str
    name: str
