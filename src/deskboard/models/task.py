"""Task API schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_serializer, field_validator

# Validation context for rows decoded from a GET /tasks body
WIRE_CONTEXT = {"wire": True}


def finished_to_wire(finished: bool) -> int:
    """Encode completion the way the backend stores it: 1 or 0."""
    return 1 if finished else 0


class Task(BaseModel):
    """Task record as listed by GET /tasks.

    `finished` is a bool in memory and 0/1 on the wire. Decoded under
    WIRE_CONTEXT, only a number equal to 1 counts as finished; a JSON
    `true` does not. A null or missing label renders as "".
    """

    id: int
    task: str = ""
    finished: bool = False

    @field_validator("task", mode="before")
    @classmethod
    def label_from_wire(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("finished", mode="before")
    @classmethod
    def finished_from_wire(cls, v: Any, info: ValidationInfo) -> bool:
        if info.context and info.context.get("wire"):
            return type(v) is not bool and isinstance(v, (int, float)) and v == 1
        if isinstance(v, bool):
            return v
        return isinstance(v, (int, float)) and v == 1

    @field_serializer("finished")
    def serialize_finished(self, v: bool) -> int:
        return finished_to_wire(v)


class TaskCreate(BaseModel):
    """Body for POST /tasks."""

    task: str

    @field_validator("task")
    @classmethod
    def task_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("task must not be empty")
        return v.strip()


class TaskFinishedUpdate(BaseModel):
    """Body for PATCH /tasks/{id}."""

    finished: int

    @field_validator("finished", mode="before")
    @classmethod
    def finished_zero_or_one(cls, v: Any) -> int:
        if isinstance(v, bool):
            return finished_to_wire(v)
        if v not in (0, 1):
            raise ValueError("finished must be 0 or 1")
        return v
