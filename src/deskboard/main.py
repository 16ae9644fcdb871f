"""Dashboard entrypoint: wire the three page sections and load them."""

import asyncio
import logging

import httpx

from deskboard.core.config import Settings, settings
from deskboard.core.deps import (
    build_http_client,
    get_notes_service,
    get_quote_service,
    get_task_service,
)
from deskboard.core.logging_setup import setup_logging
from deskboard.ui.dom import Document
from deskboard.ui.markup import (
    NOTES_TEXTAREA_ID,
    QUOTE_AUTHOR_ID,
    QUOTE_TEXT_ID,
    TASK_LIST_SELECTOR,
    build_page,
)

logger = logging.getLogger(__name__)


class Dashboard:
    """Quote, tasks and notes sections bound to one document."""

    def __init__(
        self,
        document: Document,
        http: httpx.AsyncClient,
        settings: Settings = settings,
    ) -> None:
        self.document = document
        self.settings = settings
        self.quotes = get_quote_service(document, http, settings)
        self.tasks = get_task_service(document, http, settings)
        self.notes = get_notes_service(document, http, settings)

    async def init(self) -> None:
        """Wire listeners and run the initial loads, one section at a time."""
        self.quotes.wire_events()
        await self.quotes.load_quote(self.quotes.current_category())

        self.tasks.wire_events()
        self.notes.wire_events()

        await self.tasks.load_tasks()
        await self.notes.load_notes()


async def init(
    document: Document,
    http: httpx.AsyncClient,
    settings: Settings = settings,
) -> Dashboard:
    """Run the full startup sequence and return the wired dashboard."""
    dashboard = Dashboard(document, http, settings)
    await dashboard.init()
    return dashboard


def snapshot(document: Document) -> str:
    """Plain-text view of what the page currently shows."""
    lines: list[str] = []
    text_el = document.get_element_by_id(QUOTE_TEXT_ID)
    author_el = document.get_element_by_id(QUOTE_AUTHOR_ID)
    if text_el is not None:
        lines.append(text_el.text_content)
    if author_el is not None and author_el.text_content:
        lines.append(f"  - {author_el.text_content}")

    list_el = document.query_selector(TASK_LIST_SELECTOR)
    if list_el is not None:
        lines.append("")
        lines.append("Tasks:")
        for row in list_el.children:
            checkbox = row.find("input")
            label = row.find("label")
            mark = "x" if checkbox is not None and checkbox.checked else " "
            lines.append(f"  [{mark}] {label.text_content if label else ''}")

    textarea = document.get_element_by_id(NOTES_TEXTAREA_ID)
    if textarea is not None:
        lines.append("")
        lines.append("Notes:")
        lines.append(textarea.value)
    return "\n".join(lines)


async def _run(settings: Settings) -> str:
    document = build_page(selected_category=settings.default_category)
    async with build_http_client(settings) as http:
        await init(document, http, settings)
    return snapshot(document)


def main() -> None:
    setup_logging(settings.log_level if not settings.debug else "DEBUG")
    logger.info("Starting %s...", settings.app_name)
    print(asyncio.run(_run(settings)))


if __name__ == "__main__":
    main()
