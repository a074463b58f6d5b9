"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the database."""

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with ID {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class EntityInUse(Exception):
    """Raised when an entity cannot be removed because other entities reference it."""

    def __init__(self, entity_name: str, entity_id: Any, dependent_name: str):
        super().__init__(
            f"{entity_name} with ID {entity_id} cannot be deleted because it has associated {dependent_name}"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.dependent_name = dependent_name


class OperationNotAllowed(Exception):
    """Raised when the current state of an entity forbids the requested operation."""


class InvalidInput(Exception):
    """Raised when request input fails validation."""

    def __init__(self, message: str, details: dict[str, list[str]] | None = None):
        """
        Initialize the exception.

        Args:
            message: Human readable summary of the failure
            details: Per-field error messages, keyed by field name
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreError(Exception):
    """Raised when the data store fails for a reason that is not a constraint violation."""


class IntegrityViolation(Exception):
    """Base class for constraint violations reported by the data store."""

    def __init__(self, constraint: str | None = None):
        super().__init__(f"Integrity constraint violated: {constraint or 'unknown'}")
        self.constraint = constraint


class UniqueViolation(IntegrityViolation):
    """A unique constraint was violated."""


class ForeignKeyViolation(IntegrityViolation):
    """A foreign key constraint was violated."""
