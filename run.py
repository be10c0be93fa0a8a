import logging
from typing import Optional

import uvicorn

from siteindexer.api.server import create_app
from siteindexer.container import Container
from siteindexer.db.engine import init_db

logger = logging.getLogger(__name__)


def main(container: Optional[Container] = None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = container or Container()

    # Tables are created on startup; schema migrations are out of scope.
    try:
        init_db(container.db_engine())
    except Exception:
        logger.exception("Could not initialize database schema")
        raise

    app = create_app(container)
    host = container.config.SITEINDEXER_HOST()
    port = int(container.config.SITEINDEXER_PORT())
    logger.info("SiteIndexer API listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    main()
