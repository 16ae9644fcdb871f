"""Notes API schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class NotesUpdate(BaseModel):
    """Body for PUT /notes."""

    notes: str


class NotesResponse(BaseModel):
    """GET /notes and PUT /notes echo; `notes` may be absent or null."""

    notes: Optional[str] = None
