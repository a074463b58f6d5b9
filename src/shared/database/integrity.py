"""Translation of driver-level integrity errors into store-neutral violations."""
from sqlalchemy.exc import IntegrityError

from src.shared.exceptions import ForeignKeyViolation, IntegrityViolation, UniqueViolation

# SQLSTATE codes shared by PostgreSQL drivers (asyncpg, psycopg)
UNIQUE_VIOLATION_SQLSTATE = "23505"
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"


def _sqlstate(error: IntegrityError) -> str | None:
    original = error.orig
    for attribute in ("sqlstate", "pgcode"):
        code = getattr(original, attribute, None)
        if code:
            return str(code)
    return None


def _constraint_name(error: IntegrityError) -> str | None:
    original = error.orig
    name = getattr(original, "constraint_name", None)
    if name:
        return str(name)
    # SQLite reports the failed constraint in the message, e.g. "UNIQUE constraint failed: clients.email"
    message = str(original)
    if _sqlstate(error) is None and ":" in message:
        return message.split(":", 1)[1].strip() or None
    return None


def translate_integrity_error(error: IntegrityError) -> IntegrityViolation:
    """
    Classify an IntegrityError raised by the database driver.

    Args:
        error: The SQLAlchemy integrity error

    Returns:
        UniqueViolation or ForeignKeyViolation when the violated constraint can be
        identified, otherwise a plain IntegrityViolation.
    """
    sqlstate = _sqlstate(error)
    message = str(error.orig).lower()
    constraint = _constraint_name(error)

    if sqlstate == UNIQUE_VIOLATION_SQLSTATE or "unique constraint" in message:
        return UniqueViolation(constraint)
    if sqlstate == FOREIGN_KEY_VIOLATION_SQLSTATE or "foreign key constraint" in message:
        return ForeignKeyViolation(constraint)
    return IntegrityViolation(constraint)
