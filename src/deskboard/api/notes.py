"""Notes API client."""

from typing import Any, Optional

from pydantic import TypeAdapter

from deskboard.api.base import BaseApiClient
from deskboard.models.notes import NotesResponse, NotesUpdate

_NOTES = TypeAdapter(NotesResponse)


class NotesClient(BaseApiClient):
    """Single shared notes blob on the local backend."""

    def _notes_field(self, data: Any) -> Optional[str]:
        # Empty or non-object bodies carry no `notes` field
        if not isinstance(data, dict):
            return None
        return self._parse(_NOTES, data).notes

    async def get_notes(self) -> str:
        """GET /notes; a missing or null `notes` field reads as ""."""
        notes = self._notes_field(await self._request("GET", "/notes"))
        return notes if notes is not None else ""

    async def put_notes(self, text: str) -> str:
        """PUT /notes and return the echoed value, or `text` if not echoed."""
        body = NotesUpdate(notes=text)
        data = await self._request("PUT", "/notes", json=body.model_dump())
        notes = self._notes_field(data)
        return notes if notes is not None else text
