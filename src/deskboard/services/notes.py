"""Notes editor: load, dirty-track and save the shared notes blob."""

import logging
from dataclasses import dataclass

from deskboard.api.errors import ApiError
from deskboard.api.notes import NotesClient
from deskboard.services.base import BaseService
from deskboard.ui.dom import Document, Event
from deskboard.ui.markup import NOTES_TEXTAREA_ID, SAVE_NOTES_BTN_ID

logger = logging.getLogger(__name__)


@dataclass
class NotesEditorState:
    """Baseline for the dirty flag: the last value the server confirmed."""

    last_saved: str = ""

    def is_dirty(self, value: str) -> bool:
        return value != self.last_saved


class NotesService(BaseService):
    def __init__(
        self,
        document: Document,
        client: NotesClient,
        state: NotesEditorState | None = None,
    ) -> None:
        super().__init__(document)
        self.client = client
        self.state = state if state is not None else NotesEditorState()

    async def fetch_notes(self) -> str:
        return await self.client.get_notes()

    async def put_notes(self, text: str) -> str:
        return await self.client.put_notes(text)

    def set_save_enabled(self, enabled: bool) -> None:
        save_btn = self.document.get_element_by_id(SAVE_NOTES_BTN_ID)
        if save_btn is not None:
            save_btn.disabled = not enabled

    def _mark_clean(self, state: NotesEditorState, saved: str) -> None:
        state.last_saved = saved
        textarea = self.document.get_element_by_id(NOTES_TEXTAREA_ID)
        if textarea is not None:
            textarea.value = saved
        self.set_save_enabled(False)

    async def load_notes(self) -> None:
        """Initial fetch; sets the textarea and baseline and forces Clean."""
        if self.document.get_element_by_id(NOTES_TEXTAREA_ID) is None:
            return
        try:
            notes = await self.fetch_notes()
        except ApiError:
            logger.exception("Could not load notes")
            return
        self._mark_clean(self.state, notes)

    def handle_input(self, state: NotesEditorState, value: str) -> None:
        self.set_save_enabled(state.is_dirty(value))

    async def save_notes(self) -> None:
        """Push the textarea value; the server echo becomes the new baseline.

        On failure nothing changes, so the editor stays Dirty and the
        save button stays enabled for a retry.
        """
        textarea = self.document.get_element_by_id(NOTES_TEXTAREA_ID)
        current = textarea.value if textarea is not None else ""
        try:
            saved = await self.put_notes(current)
        except ApiError:
            logger.exception("Could not save notes")
            return
        self._mark_clean(self.state, saved)

    def wire_events(self) -> None:
        textarea = self.document.get_element_by_id(NOTES_TEXTAREA_ID)
        save_btn = self.document.get_element_by_id(SAVE_NOTES_BTN_ID)

        if textarea is not None:

            def on_input(event: Event) -> None:
                self.handle_input(self.state, event.target.value)

            textarea.add_event_listener("input", on_input)

        if save_btn is not None:

            async def on_click(event: Event) -> None:
                await self.save_notes()

            save_btn.add_event_listener("click", on_click)
