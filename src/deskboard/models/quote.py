"""Quote API schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

# Field-name variants served by the quote API, in precedence order
TEXT_FIELDS = ("quote", "text")
AUTHOR_FIELDS = ("author", "name")


def _first_present(data: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return ""


class Quote(BaseModel):
    """A quote normalized from either wire variant.

    `quote` wins over `text` and `author` wins over `name`; a field missing
    under both names becomes an empty string.
    """

    text: str = ""
    author: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_variants(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("quote response must be a JSON object")
        return {
            "text": _first_present(data, TEXT_FIELDS),
            "author": _first_present(data, AUTHOR_FIELDS),
        }

    @property
    def display_text(self) -> str:
        return f'"{self.text}"'
