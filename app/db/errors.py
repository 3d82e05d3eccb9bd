"""Errors raised by the in-memory store.

Lookups that miss never raise; they return ``None`` (or ``False`` for
deletes). Everything here is a rejected write or a broken relationship.
"""
from typing import Any, Iterable


class StoreError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FieldError(StoreError):
    """Unknown, missing or immutable field in a write."""

    def __init__(self, table: str, fields: Iterable[str], reason: str):
        self.table = table
        self.fields = sorted(fields)
        super().__init__(f"{table}: {reason} field(s): {', '.join(self.fields)}")


class DuplicateKeyError(StoreError):
    def __init__(self, table: str, field: str, value: Any):
        self.table = table
        self.field = field
        self.value = value
        super().__init__(f"{table} with {field} '{value}' already exists")


class ForeignKeyError(StoreError):
    def __init__(self, table: str, field: str, value: Any):
        self.table = table
        self.field = field
        self.value = value
        super().__init__(f"{table}.{field} references missing row {value}")


class AvailabilityError(StoreError):
    def __init__(self, class_id: int, available_spots: int, total_spots: int):
        self.class_id = class_id
        super().__init__(
            f"Available spots must be between 0 and {total_spots}, got {available_spots}"
        )


class IntegrityViolation(StoreError):
    """A stored row points at a row that no longer exists."""

    status_code = 500
