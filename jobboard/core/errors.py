import logging
from contextlib import contextmanager

from sqlalchemy.exc import NoResultFound, SQLAlchemyError

UNKNOWN = "unknown"


class DatabaseQueryError(Exception):
    """A statement failed in the driver or returned the wrong number of rows."""

    def __init__(self, operation: str, error: Exception):
        super().__init__(f"{operation} failed: {error}")
        self.operation = operation
        self.error = error


class NotFoundError(DatabaseQueryError):
    """A single-row fetch or update matched no row."""


def extract_db_diagnostics(error: SQLAlchemyError) -> dict[str, str]:
    """
    Pull code, message and violated constraint out of a driver error.

    Works with psycopg (sqlstate), psycopg2 (pgcode) and sqlite3
    (sqlite_errorname). Any field the driver does not expose is reported as
    "unknown"; this never raises.
    """
    orig = getattr(error, "orig", None)
    if orig is None:
        return {"code": UNKNOWN, "db_message": str(error) or UNKNOWN, "constraint": UNKNOWN}

    code = (
        getattr(orig, "sqlstate", None)
        or getattr(orig, "pgcode", None)
        or getattr(orig, "sqlite_errorname", None)
    )
    diag = getattr(orig, "diag", None)
    message = getattr(diag, "message_primary", None) or str(orig)
    constraint = getattr(diag, "constraint_name", None)
    return {
        "code": str(code) if code else UNKNOWN,
        "db_message": message or UNKNOWN,
        "constraint": constraint or UNKNOWN,
    }


@contextmanager
def query_errors(logger: logging.Logger, operation: str, *, diagnostics: bool = False):
    """
    Log a failed statement once at ERROR and re-raise it as DatabaseQueryError.

    Set diagnostics for inserts/updates to also log the database error code,
    message and constraint name.
    """
    try:
        yield
    except NoResultFound as e:
        logger.error("%s: no matching row", operation, extra={"operation": operation})
        raise NotFoundError(operation, e) from e
    except SQLAlchemyError as e:
        if diagnostics:
            info = extract_db_diagnostics(e)
            logger.error(
                "%s failed: code=%s db_message=%s constraint=%s",
                operation,
                info["code"],
                info["db_message"],
                info["constraint"],
                extra={"operation": operation, **info},
            )
        else:
            logger.error("%s failed: %s", operation, e, extra={"operation": operation})
        raise DatabaseQueryError(operation, e) from e
