"""Schemas for the exported service interface."""

from typing import Literal

from pydantic import BaseModel, Field


class ServiceMethod(BaseModel):
    """One exported entry point. query = read-only, update = may perform outbound calls."""

    name: str
    kind: Literal["query", "update"]
    args: list[str] = Field(default_factory=list, description="Argument types, in order.")
    returns: str = "text"
    path: str = Field(..., description="HTTP route serving this method.")
