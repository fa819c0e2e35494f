"""Uniform response envelope returned by every endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Transport envelope, never persisted."""

    success: bool = Field(description="Outcome of the request")
    data: Any | None = Field(default=None, description="Payload, if any")
    message: str = Field(default="", description="Human-readable status text")
    errors: list[str] = Field(default_factory=list, description="Error messages")

    @classmethod
    def ok(cls, message: str, data: Any | None = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(cls, message: str) -> "ApiResponse":
        return cls(success=False, data=None, message=message, errors=[message])
