from datetime import datetime
from unittest.mock import Mock

import pytest
from fastapi import HTTPException

from siteindexer.api.routers.sites import create_sites_router
from siteindexer.domain import SiteRecord, SiteStatus


def _get_endpoint(router, path: str, method: str):
    for route in router.routes:
        if getattr(route, "path", None) != path:
            continue
        methods = getattr(route, "methods", set())
        if method.upper() in methods:
            return route.endpoint
    raise AssertionError(f"No route found for {method} {path}")


def test_list_sites_includes_status_and_page_count():
    site = SiteRecord(
        id=3,
        url="http://s.test",
        name="S",
        status=SiteStatus.INDEXED,
        status_time=datetime(2024, 1, 1),
        last_error="crawl deadline exceeded",
    )
    sites_repo = Mock(list_sites=Mock(return_value=[site]))
    pages_repo = Mock(count_for_site=Mock(return_value=12))
    coordinator = Mock(is_running=False)
    endpoint = _get_endpoint(create_sites_router(sites_repo, pages_repo, coordinator), "/api/sites", "GET")

    result = endpoint()

    assert result["indexing"] is False
    assert result["sites"] == [{
        "id": 3,
        "url": "http://s.test",
        "name": "S",
        "status": "INDEXED",
        "status_time": datetime(2024, 1, 1),
        "last_error": "crawl deadline exceeded",
        "pages": 12,
    }]
    pages_repo.count_for_site.assert_called_once_with(3)


def test_list_sites_500_without_leaking_exception():
    sites_repo = Mock(list_sites=Mock(side_effect=RuntimeError("database connection lost")))
    endpoint = _get_endpoint(create_sites_router(sites_repo, Mock(), Mock()), "/api/sites", "GET")

    with pytest.raises(HTTPException) as exc:
        endpoint()
    assert exc.value.status_code == 500
    assert exc.value.detail == "could not list sites"
