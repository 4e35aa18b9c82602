"""
🔍 Query utilities

Soft-delete aware select helpers
"""

from typing import Type, TypeVar

from sqlmodel import SQLModel, select

T = TypeVar("T", bound=SQLModel)


def filter_not_deleted(model_class: Type[T]):
    """Only rows that have not been soft-deleted"""
    return model_class.delete_at.is_(None)


def create_soft_delete_query_with_conditions(
    model_class: Type[T], include_deleted_records: bool = False, **conditions
):
    """
    Build a select honouring soft delete

    Args:
        model_class: model class
        include_deleted_records: include soft-deleted rows
        **conditions: equality filters by field name

    Returns:
        SQLModel select
    """
    stmt = select(model_class)

    if not include_deleted_records:
        stmt = stmt.where(filter_not_deleted(model_class))

    for field_name, value in conditions.items():
        if hasattr(model_class, field_name):
            field = getattr(model_class, field_name)
            stmt = stmt.where(field == value)

    return stmt
