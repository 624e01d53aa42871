from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# JSON-RPC style numeric codes for the error envelope
RPC_CODES = {
    "BAD_REQUEST": -32600,
    "NOT_FOUND": -32004,
    "INTERNAL_SERVER_ERROR": -32603,
}


class RpcData(BaseModel, Generic[T]):
    data: T


class RpcResult(BaseModel, Generic[T]):
    """Success envelope: {"result": {"data": ...}}"""
    result: RpcData[T]


class RpcErrorData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    http_status: int = Field(alias="httpStatus")
    path: Optional[str] = None
    issues: Optional[list[str]] = None


class RpcErrorBody(BaseModel):
    message: str
    code: int
    data: RpcErrorData


class RpcError(BaseModel):
    error: RpcErrorBody


def ok(data: Any) -> Dict[str, Any]:
    return {"result": {"data": data}}
