"""Quote loader: fetch a quote for a category and show it."""

import logging

from deskboard.api.errors import ApiError
from deskboard.api.quotes import QuotesClient
from deskboard.services.base import BaseService
from deskboard.ui.dom import Document, ElementNotFoundError, Event
from deskboard.ui.markup import (
    NEW_QUOTE_BTN_ID,
    QUOTE_AUTHOR_ID,
    QUOTE_CATEGORY_SELECT_ID,
    QUOTE_TEXT_ID,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"
FALLBACK_QUOTE_TEXT = "Oops... could not load quote."


class QuoteService(BaseService):
    def __init__(
        self,
        document: Document,
        client: QuotesClient,
        default_category: str = DEFAULT_CATEGORY,
    ) -> None:
        super().__init__(document)
        self.client = client
        self.default_category = default_category or DEFAULT_CATEGORY

    def current_category(self) -> str:
        """Selector value, or the default when the selector is empty or absent."""
        select = self.document.get_element_by_id(QUOTE_CATEGORY_SELECT_ID)
        return (select.value if select is not None else "") or self.default_category

    async def load_quote(self, category: str | None = None) -> None:
        """Show a quote for `category`; on any failure show the fallback text.

        Never raises.
        """
        category = category or self.default_category
        try:
            quote = await self.client.get_quote(category)
            text_el = self.document.require_element(QUOTE_TEXT_ID)
            author_el = self.document.require_element(QUOTE_AUTHOR_ID)
            text_el.text_content = quote.display_text
            author_el.text_content = quote.author
            logger.debug("Loaded quote (category=%s)", category)
        except (ApiError, ElementNotFoundError):
            logger.exception("Could not load quote (category=%s)", category)
            text_el = self.document.get_element_by_id(QUOTE_TEXT_ID)
            author_el = self.document.get_element_by_id(QUOTE_AUTHOR_ID)
            if text_el is not None:
                text_el.text_content = FALLBACK_QUOTE_TEXT
            if author_el is not None:
                author_el.text_content = ""

    def wire_events(self) -> None:
        select = self.document.get_element_by_id(QUOTE_CATEGORY_SELECT_ID)
        button = self.document.get_element_by_id(NEW_QUOTE_BTN_ID)

        if select is not None:

            async def on_change(event: Event) -> None:
                await self.load_quote(event.target.value or self.default_category)

            select.add_event_listener("change", on_change)

        if button is not None:

            async def on_click(event: Event) -> None:
                await self.load_quote(self.current_category())

            button.add_event_listener("click", on_click)
