from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import declared_attr
from sqlmodel import DateTime, Field, SQLModel, func

from hivechat.core.utill import table_name_for


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(SQLModel):
    """
    Base class for every table

    Table names are generated from the class name (plural, snake_case) unless
    the model sets ``__tablename__`` itself.
    """

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return table_name_for(cls.__name__)


class CreatedAtBase(Base):
    created_at: Optional[datetime] = Field(
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={
            "server_default": func.now(),
            "index": True,
        },
        default_factory=utcnow,
        description="creation time",
    )


class TimestampBase(CreatedAtBase):
    """
    Common fields:
    - created_at: set on insert
    - updated_at: bumped on every update (trigger on PostgreSQL, touch() elsewhere)
    """

    updated_at: Optional[datetime] = Field(
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"server_default": func.now()},
        default_factory=utcnow,
        description="last update time",
    )

    def touch(self) -> None:
        self.updated_at = utcnow()


class SoftDeleteMixin(SQLModel):
    """Rows are hidden by setting delete_at instead of being removed"""

    delete_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),  # type: ignore
        sa_column_kwargs={"index": True},
        description="soft delete time",
    )

    def soft_delete(self) -> None:
        self.delete_at = utcnow()

    def restore(self) -> None:
        self.delete_at = None

    @property
    def is_deleted(self) -> bool:
        return self.delete_at is not None
