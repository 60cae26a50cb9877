"""Pydantic value objects exchanged with the transport."""

from __future__ import annotations

from typing import Literal, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

HttpMethod = Literal["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


class HeaderParam(BaseModel):
    """Single request or response header."""

    key: str
    value: str

    @model_validator(mode="before")
    @classmethod
    def _coerce_pair(cls, value):
        """Allow ``(key, value)`` pairs alongside the dict form."""

        if isinstance(value, (str, bytes)):
            return value
        if isinstance(value, dict):
            return value
        if isinstance(value, Sequence):
            if len(value) != 2:
                raise ValueError("Header pair must contain exactly two values")
            key, header_value = value
            return {"key": key, "value": header_value}
        return value

    def as_tuple(self) -> tuple[str, str]:
        return (self.key, self.value)


class ApiClientRequest(BaseModel):
    """Request handed to the transport for one invocation."""

    url: str = Field(min_length=1)
    method: HttpMethod
    headers: list[HeaderParam] = Field(default_factory=list)
    body: str | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


class ApiClientResponse(BaseModel):
    """Raw response returned by the transport."""

    model_config = {"populate_by_name": True}

    status_code: int = Field(alias="statusCode")
    body: str | None = None
    headers: list[HeaderParam] = Field(default_factory=list)
