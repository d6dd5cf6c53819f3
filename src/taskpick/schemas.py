"""Pydantic schemas for YAML task files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class TaskSchema(BaseModel):
    """Schema for one task entry.

    There is no ``id`` field: IDs come from the entry's position in the list.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    duration: int = Field(ge=0)
    priority: int = Field(ge=0)
    dependencies: list[PositiveInt] = Field(default_factory=list)

    @field_validator("dependencies", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> Any:
        """Allow a single ID or null in place of a list."""
        if v is None:
            return []
        if isinstance(v, list):
            return v  # type: ignore[reportUnknownVariableType]
        return [v]


class TaskFileSchema(BaseModel):
    """Schema for a complete task file."""

    max_time: int | None = Field(default=None, ge=0)  # Default budget for this task set
    tasks: list[TaskSchema] = Field(default_factory=list)
