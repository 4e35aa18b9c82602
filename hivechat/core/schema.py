from typing import Generic, Literal, TypeVar

from sqlmodel import SQLModel

from hivechat.core.utill import to_camel


class SchemaBase(SQLModel):
    class Config:
        populate_by_name = True
        alias_generator = to_camel
        extra = "forbid"


T = TypeVar("T")

ActionStatus = Literal["success", "fail", "error"]

LOGIN_REQUIRED_MESSAGE = "please login first."


class ActionResponse(SchemaBase, Generic[T]):
    """Envelope returned by every action"""

    status: ActionStatus
    data: T | None = None
    message: str | None = None


# helpers
def create_success_response(
    data: T | None = None, message: str | None = None
) -> ActionResponse[T]:
    return ActionResponse(status="success", data=data, message=message)


def create_fail_response(
    message: str | None = None, data: T | None = None
) -> ActionResponse[T]:
    return ActionResponse(status="fail", data=data, message=message)


def create_error_response(message: str, data: T | None = None) -> ActionResponse[T]:
    return ActionResponse(status="error", data=data, message=message)


def create_login_required_response(data: T | None = None) -> ActionResponse[T]:
    """Envelope for callers without a session"""
    return create_fail_response(message=LOGIN_REQUIRED_MESSAGE, data=data)
