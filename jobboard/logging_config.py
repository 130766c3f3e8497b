import logging
import sys


def setup_logging(level: int | str | None = None) -> None:
    """Configure root logger for the data-access layer."""
    if level is None:
        try:
            from jobboard.config import settings
            level = getattr(logging, settings.log_level.upper(), logging.INFO)
        except Exception:
            level = logging.INFO
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        root.handlers.clear()
    root.addHandler(handler)
    # Statement echo is controlled by settings.db_echo, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
