"""Headless document model: the page surface the services bind to.

Elements carry the handful of properties the page reads and writes
(text_content, value, checked, disabled) plus an event-listener registry.
Listeners may be plain callables or coroutine functions; dispatch awaits
them one at a time in registration order, which is the only ordering
guarantee handlers get.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

Listener = Callable[["Event"], Union[Awaitable[None], None]]


class ElementNotFoundError(LookupError):
    """Raised when a required page element is missing."""


@dataclass
class Event:
    """A dispatched page event."""

    type: str
    target: "Element"
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class Element:
    """A node in the page tree."""

    def __init__(
        self,
        tag: str,
        *,
        id: Optional[str] = None,
        class_name: str = "",
        type: Optional[str] = None,
        value: str = "",
        text_content: str = "",
        disabled: bool = False,
        checked: bool = False,
    ) -> None:
        self.tag = tag.lower()
        self.id = id
        self.class_name = class_name
        self.type = type
        self.value = value
        self.text_content = text_content
        self.disabled = disabled
        self.checked = checked
        self.parent: Optional[Element] = None
        self.children: list[Element] = []
        self._listeners: dict[str, list[Listener]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.class_list)
        return f"<{self.tag}{ident}{classes}>"

    @property
    def class_list(self) -> list[str]:
        return self.class_name.split()

    # -- tree -------------------------------------------------------------

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def replace_children(self, *children: Element) -> None:
        """Detach every current child and append `children` in its place."""
        for old in self.children:
            old.parent = None
        self.children = []
        for child in children:
            self.append_child(child)

    def iter(self) -> Iterator[Element]:
        """Depth-first walk of this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find(self, tag: str) -> Optional[Element]:
        """First descendant with the given tag."""
        tag = tag.lower()
        return next((el for el in self.iter() if el.tag == tag and el is not self), None)

    # -- events -----------------------------------------------------------

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))

    async def dispatch_event(self, event: Event) -> bool:
        """Run listeners for `event.type`; False if one prevented the default."""
        for listener in list(self._listeners.get(event.type, ())):
            result = listener(event)
            if inspect.isawaitable(result):
                await result
        return not event.default_prevented

    # -- user actions -----------------------------------------------------

    async def click(self) -> bool:
        """Click like a user would; disabled controls ignore it."""
        if self.disabled:
            return False
        return await self.dispatch_event(Event("click", self))

    async def toggle(self, checked: Optional[bool] = None) -> bool:
        """Flip (or set) a checkbox and fire `change`."""
        if self.disabled:
            return False
        self.checked = (not self.checked) if checked is None else checked
        return await self.dispatch_event(Event("change", self))

    async def type_text(self, value: str) -> bool:
        """Replace the control's value and fire `input`."""
        if self.disabled:
            return False
        self.value = value
        return await self.dispatch_event(Event("input", self))

    async def select_option(self, value: str) -> bool:
        if self.disabled:
            return False
        self.value = value
        return await self.dispatch_event(Event("change", self))

    async def submit(self) -> bool:
        return await self.dispatch_event(Event("submit", self))


class Document:
    """Root of the page tree with id/class lookups."""

    def __init__(self, body: Optional[Element] = None) -> None:
        self.body = body if body is not None else Element("body")

    @staticmethod
    def create_element(tag: str, **attrs) -> Element:
        return Element(tag, **attrs)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return next((el for el in self.body.iter() if el.id == element_id), None)

    def require_element(self, element_id: str) -> Element:
        el = self.get_element_by_id(element_id)
        if el is None:
            raise ElementNotFoundError(f"Element #{element_id} not found")
        return el

    def query_selector(self, selector: str) -> Optional[Element]:
        """Supports `#id`, `.class` and bare tag names."""
        selector = selector.strip()
        if selector.startswith("#"):
            return self.get_element_by_id(selector[1:])
        if selector.startswith("."):
            name = selector[1:]
            return next((el for el in self.body.iter() if name in el.class_list), None)
        tag = selector.lower()
        return next((el for el in self.body.iter() if el.tag == tag), None)
