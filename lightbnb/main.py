import logging

from .config import Settings, settings as default_settings
from .db import make_engine
from .services.gateway import QueryGateway

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings = default_settings) -> None:
    _level = logging.DEBUG if getattr(settings, "DEBUG", False) else logging.INFO
    logging.basicConfig(level=_level, format=LOG_FORMAT)
    # SQLAlchemy's own engine logging stays at WARNING unless debugging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)


def create_gateway(settings: Settings = default_settings) -> QueryGateway:
    """Build the connection pool from settings and hand it to a gateway.

    Call once at startup; call ``close()`` on the result at shutdown.
    """
    logger = logging.getLogger("lightbnb.startup")
    logger.info("Starting %s (DEBUG=%s)", settings.APP_NAME, getattr(settings, "DEBUG", False))
    engine = make_engine(settings.DATABASE_URL)
    return QueryGateway(engine, default_limit=settings.DEFAULT_LIMIT)
