"""Base model shared by reelfeed value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReelFeedModel(BaseModel):
    """Base model with standard configuration.

    Value objects are read once and never mutated, so models are frozen.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
        extra="forbid",
    )
