"""Central place for building the HTTP client, API clients and services."""

import httpx

from deskboard.api.notes import NotesClient
from deskboard.api.quotes import QuotesClient
from deskboard.api.tasks import TasksClient
from deskboard.core.config import Settings
from deskboard.services.notes import NotesService
from deskboard.services.quotes import QuoteService
from deskboard.services.tasks import TaskService
from deskboard.ui.dom import Document


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared AsyncClient; `request_timeout=None` disables timeouts entirely."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        headers={"Accept": "application/json"},
    )


def get_quote_service(
    document: Document, http: httpx.AsyncClient, settings: Settings
) -> QuoteService:
    """Provide QuoteService against the public quote API."""
    return QuoteService(
        document,
        QuotesClient(http, settings.quote_api_base),
        default_category=settings.default_category,
    )


def get_task_service(
    document: Document, http: httpx.AsyncClient, settings: Settings
) -> TaskService:
    """Provide TaskService against the local backend."""
    return TaskService(document, TasksClient(http, settings.local_api_base))


def get_notes_service(
    document: Document, http: httpx.AsyncClient, settings: Settings
) -> NotesService:
    """Provide NotesService against the local backend."""
    return NotesService(document, NotesClient(http, settings.local_api_base))
