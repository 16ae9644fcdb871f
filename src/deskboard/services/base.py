"""Shared service logic."""

from deskboard.ui.dom import Document


class BaseService:
    """Base service with document injection."""

    def __init__(self, document: Document) -> None:
        self.document = document
