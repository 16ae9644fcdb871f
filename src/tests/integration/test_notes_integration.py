"""Integration tests for the notes editor."""

import pytest
from fake_backend import FakeBackend
from fastapi.responses import JSONResponse

from deskboard.main import Dashboard
from deskboard.ui.dom import Document

pytestmark = pytest.mark.integration


def _save_enabled(document: Document) -> bool:
    return not document.require_element("save-notes-btn").disabled


async def test_load_notes_sets_value_and_baseline(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """Initial load fills the textarea, sets the baseline and is Clean."""
    backend.notes = "hello"
    document.require_element("save-notes-btn").disabled = False
    await dashboard.notes.load_notes()
    assert document.require_element("notes-text").value == "hello"
    assert dashboard.notes.state.last_saved == "hello"
    assert not _save_enabled(document)


async def test_load_notes_null_reads_as_empty(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """A null notes field reads as the empty string."""
    backend.notes = None
    await dashboard.notes.load_notes()
    assert document.require_element("notes-text").value == ""
    assert dashboard.notes.state.last_saved == ""


async def test_load_notes_failure_leaves_state(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """A failed load keeps the textarea and the baseline as they were."""
    backend.notes = "server"
    backend.fail.add("GET /notes")
    document.require_element("notes-text").value = "local draft"
    dashboard.notes.state.last_saved = "old"
    await dashboard.notes.load_notes()
    assert document.require_element("notes-text").value == "local draft"
    assert dashboard.notes.state.last_saved == "old"


async def test_input_tracks_dirty_against_baseline(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """Dirty iff the value differs from the last saved one."""
    backend.notes = "hello"
    dashboard.notes.wire_events()
    await dashboard.notes.load_notes()
    textarea = document.require_element("notes-text")

    await textarea.type_text("hello!")
    assert _save_enabled(document)

    await textarea.type_text("hello")
    assert not _save_enabled(document)


async def test_save_round_trip_returns_to_clean(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """Edit, save, echo: button disables and the baseline follows the echo."""
    backend.notes = "hello"
    dashboard.notes.wire_events()
    await dashboard.notes.load_notes()

    await document.require_element("notes-text").type_text("hello!")
    assert _save_enabled(document)
    await document.require_element("save-notes-btn").click()

    assert backend.calls("PUT") == [("PUT", "/notes", {"notes": "hello!"})]
    assert dashboard.notes.state.last_saved == "hello!"
    assert not _save_enabled(document)


async def test_save_adopts_normalized_echo(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """The echoed value, not the sent one, becomes textarea and baseline."""
    backend.normalize_notes = lambda s: s.strip().upper()
    dashboard.notes.wire_events()
    await dashboard.notes.load_notes()

    await document.require_element("notes-text").type_text("  shout  ")
    await document.require_element("save-notes-btn").click()

    assert document.require_element("notes-text").value == "SHOUT"
    assert dashboard.notes.state.last_saved == "SHOUT"
    assert not _save_enabled(document)


async def test_save_without_echo_keeps_sent_value(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """If PUT omits the echo, the sent text is the new baseline."""
    backend.echo_notes = False
    document.require_element("notes-text").value = "sent"
    await dashboard.notes.save_notes()
    assert dashboard.notes.state.last_saved == "sent"


async def test_save_failure_stays_dirty(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """A failed save leaves the editor Dirty so the user can retry."""
    backend.notes = "hello"
    dashboard.notes.wire_events()
    await dashboard.notes.load_notes()
    backend.fail.add("PUT /notes")

    await document.require_element("notes-text").type_text("unsaved")
    await document.require_element("save-notes-btn").click()

    assert dashboard.notes.state.last_saved == "hello"
    assert document.require_element("notes-text").value == "unsaved"
    assert _save_enabled(document)

    backend.fail.clear()
    await document.require_element("save-notes-btn").click()
    assert dashboard.notes.state.last_saved == "unsaved"
    assert not _save_enabled(document)


async def test_save_without_textarea_sends_empty(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """No textarea on the page: save sends the empty string."""
    textarea = document.require_element("notes-text")
    textarea.parent.children.remove(textarea)
    await dashboard.notes.save_notes()
    assert backend.calls("PUT") == [("PUT", "/notes", {"notes": ""})]


async def test_load_without_textarea_skips_request(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    textarea = document.require_element("notes-text")
    textarea.parent.children.remove(textarea)
    await dashboard.notes.load_notes()
    assert backend.calls("GET", "/notes") == []


@pytest.mark.parametrize("body", ["ok", [], 3])
async def test_save_with_non_object_echo_keeps_sent_value(
    dashboard: Dashboard, backend: FakeBackend, document: Document, body
) -> None:
    """A 2xx echo that is JSON but not an object means "no echo": go Clean."""
    backend.notes = ""
    dashboard.notes.wire_events()
    await dashboard.notes.load_notes()
    backend.overrides["PUT /notes"] = JSONResponse(body)

    await document.require_element("notes-text").type_text("hello!")
    await document.require_element("save-notes-btn").click()

    assert dashboard.notes.state.last_saved == "hello!"
    assert document.require_element("notes-text").value == "hello!"
    assert not _save_enabled(document)


async def test_load_with_non_object_body_reads_as_empty(
    dashboard: Dashboard, backend: FakeBackend, document: Document
) -> None:
    """GET /notes answering a JSON array yields the empty string."""
    backend.overrides["GET /notes"] = JSONResponse([])
    document.require_element("notes-text").value = "stale"
    await dashboard.notes.load_notes()
    assert document.require_element("notes-text").value == ""
    assert dashboard.notes.state.last_saved == ""
