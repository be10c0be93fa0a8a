"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests
from sqlalchemy.orm import sessionmaker

from siteindexer import config as env
from siteindexer.db.engine import make_engine
from siteindexer.repository.pages import PagesRepository
from siteindexer.repository.sites import SitesRepository
from siteindexer.services.crawl_driver import CrawlDriver
from siteindexer.services.fetcher import RetryingFetcher
from siteindexer.services.http_service import HttpService
from siteindexer.services.indexing_coordinator import IndexingCoordinator
from siteindexer.services.link_extractor import LinkExtractor
from siteindexer.services.sites_config_service import SitesConfigService


# Environment variables used by the container (read via `siteindexer.config` helpers).
#
# DATABASE_URL (str | optional)
#   SQLAlchemy connection string. `make_engine()` raises when it is missing.
#
# USER_AGENT (str, default: "Mozilla/5.0 (compatible; IndexerBot/1.0)")
#   User-Agent header for outbound page requests.
#
# HTTP_CONNECT_TIMEOUT / HTTP_READ_TIMEOUT (float seconds, default: 10 / 15)
#   Passed to requests as a (connect, read) timeout tuple.
#
# FETCH_MAX_ATTEMPTS (int, default: 3)
#   Total attempts per URL on transport failures. No backoff between attempts.
#
# CRAWL_DELAY (float seconds, default: 0.5)
#   Fixed pause between successive fetch cycles within a site.
#
# CRAWL_DEADLINE_SECONDS (int seconds, default: 3600)
#   Wall-clock bound on one site's crawl.
#
# SITEINDEXER_SITES_FILE (str, default: "sites.yml")
#   YAML file listing the seed sites.
#
# SITEINDEXER_HOST / SITEINDEXER_PORT (default: "0.0.0.0" / 8000)
#   Bind address for the API server started by run.py.
ENV = {
    "DATABASE_URL": env.get_optional_str_env("DATABASE_URL"),
    "USER_AGENT": env.get_str_env("USER_AGENT", "Mozilla/5.0 (compatible; IndexerBot/1.0)"),
    "HTTP_CONNECT_TIMEOUT": env.get_float_env("HTTP_CONNECT_TIMEOUT", 10.0),
    "HTTP_READ_TIMEOUT": env.get_float_env("HTTP_READ_TIMEOUT", 15.0),
    "FETCH_MAX_ATTEMPTS": env.get_int_env("FETCH_MAX_ATTEMPTS", 3),
    "CRAWL_DELAY": env.get_float_env("CRAWL_DELAY", 0.5),
    "CRAWL_DEADLINE_SECONDS": env.get_int_env("CRAWL_DEADLINE_SECONDS", 3600),
    "SITEINDEXER_SITES_FILE": env.get_str_env("SITEINDEXER_SITES_FILE", "sites.yml"),
    "SITEINDEXER_HOST": env.get_str_env("SITEINDEXER_HOST", "0.0.0.0"),
    "SITEINDEXER_PORT": env.get_int_env("SITEINDEXER_PORT", 8000),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for SiteIndexer."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Database engine - Singleton to reuse connection pool
    db_engine = providers.Singleton(
        make_engine,
        database_url=config.DATABASE_URL
    )
    # Session factory bound to the engine
    session_factory = providers.Singleton(
        sessionmaker,
        bind=db_engine,
        future=True,
        expire_on_commit=False,
    )

    # Repositories - Singleton instances
    sites_repository = providers.Singleton(
        SitesRepository,
        session_factory=session_factory
    )

    pages_repository = providers.Singleton(
        PagesRepository,
        session_factory=session_factory
    )

    sites_config_service = providers.Singleton(
        SitesConfigService,
        sites_file=config.SITEINDEXER_SITES_FILE.as_(str),
    )

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        connect_timeout=config.HTTP_CONNECT_TIMEOUT.as_(float),
        read_timeout=config.HTTP_READ_TIMEOUT.as_(float),
    )

    fetcher = providers.Singleton(
        RetryingFetcher,
        http_service=http_service,
        max_attempts=config.FETCH_MAX_ATTEMPTS.as_(int),
    )

    link_extractor = providers.Singleton(
        LinkExtractor
    )

    # A fresh driver per site crawl
    crawl_driver = providers.Factory(
        CrawlDriver,
        fetcher=fetcher,
        link_extractor=link_extractor,
        page_sink=pages_repository,
        delay_seconds=config.CRAWL_DELAY.as_(float),
        deadline_seconds=config.CRAWL_DEADLINE_SECONDS.as_(float),
    )

    indexing_coordinator = providers.Singleton(
        IndexingCoordinator,
        site_config_source=sites_config_service,
        sites_repo=sites_repository,
        pages_repo=pages_repository,
        crawl_driver_factory=crawl_driver.provider,
    )
