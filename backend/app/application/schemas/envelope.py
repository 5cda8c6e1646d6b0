"""Response envelope shared by every endpoint: ``{msg, data}`` or ``{msg, err}``."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessEnvelope(BaseModel, Generic[T]):
    msg: Literal["success"] = "success"
    data: T


class ErrorEnvelope(BaseModel):
    msg: Literal["failed"] = "failed"
    err: str
