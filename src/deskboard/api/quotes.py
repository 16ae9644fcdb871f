"""Quotes API client."""

from pydantic import TypeAdapter

from deskboard.api.base import BaseApiClient
from deskboard.models.quote import Quote

_QUOTE = TypeAdapter(Quote)


class QuotesClient(BaseApiClient):
    """GET /quotes on the public quote service."""

    async def get_quote(self, category: str) -> Quote:
        data = await self._request("GET", "/quotes", params={"category": category})
        return self._parse(_QUOTE, data)
