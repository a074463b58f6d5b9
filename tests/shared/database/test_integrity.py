"""Unit tests for integrity error classification."""
from sqlalchemy.exc import IntegrityError

from src.shared.database.integrity import translate_integrity_error
from src.shared.exceptions import ForeignKeyViolation, IntegrityViolation, UniqueViolation


class FakePostgresError(Exception):
    def __init__(self, message: str, sqlstate: str, constraint_name: str | None = None):
        super().__init__(message)
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


def integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


def test_postgres_unique_violation_is_classified_by_sqlstate():
    error = integrity_error(FakePostgresError("duplicate key", "23505", "clients_email_key"))

    violation = translate_integrity_error(error)

    assert isinstance(violation, UniqueViolation)
    assert violation.constraint == "clients_email_key"


def test_postgres_foreign_key_violation_is_classified_by_sqlstate():
    error = integrity_error(FakePostgresError("update or delete violates", "23503", "assets_client_id_fkey"))

    violation = translate_integrity_error(error)

    assert isinstance(violation, ForeignKeyViolation)
    assert violation.constraint == "assets_client_id_fkey"


def test_sqlite_messages_are_classified():
    unique = translate_integrity_error(integrity_error(Exception("UNIQUE constraint failed: clients.email")))
    foreign = translate_integrity_error(integrity_error(Exception("FOREIGN KEY constraint failed")))

    assert isinstance(unique, UniqueViolation)
    assert unique.constraint == "clients.email"
    assert isinstance(foreign, ForeignKeyViolation)


def test_other_violations_fall_back_to_base_class():
    violation = translate_integrity_error(integrity_error(Exception("NOT NULL constraint failed: assets.value")))

    assert type(violation) is IntegrityViolation
