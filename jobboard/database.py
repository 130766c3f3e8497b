import logging

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker, declarative_base

from jobboard.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_pre_ping=True,
)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def ensure_tables_exist():
    """Create any missing tables without touching existing data."""
    from jobboard.models import JobRecord, ResumeRecord  # noqa: F401

    try:
        inspector = inspect(engine)
        existing_tables = set(inspector.get_table_names())

        Base.metadata.create_all(bind=engine)
        target_tables = set(Base.metadata.tables.keys())
        created_tables = sorted(target_tables - existing_tables)

        if created_tables:
            logger.info("Created missing DB tables: %s", ", ".join(created_tables))
        else:
            logger.info("All DB tables already exist; no schema changes applied.")
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
