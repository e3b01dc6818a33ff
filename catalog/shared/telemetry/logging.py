"""Process-wide logging setup (stdout, one format for every module)."""

import logging
import sys

from catalog.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at DEBUG; capped unless debug is on.
_CHATTY_LOGGERS = ("redis", "asyncio", "sqlalchemy.pool")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the root logger once at startup.

    DEBUG when settings.debug (cache HIT/MISS/SET lines become visible),
    INFO otherwise. SQL statements are logged only with database_echo.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not settings.debug:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
