"""Shared HTTP plumbing for the API clients."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from deskboard.api.errors import ApiError

T = TypeVar("T")


class BaseApiClient:
    """Base client with a shared AsyncClient and a resolved base URL."""

    def __init__(self, http: httpx.AsyncClient, base_url: str) -> None:
        self.http = http
        self.base_url = base_url.rstrip("/")

    async def _request(
        self, method: str, path: str, *, decode: bool = True, **kwargs: Any
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Transport failures and non-2xx statuses surface as ApiError. With
        `decode=False` a 2xx body that is not JSON comes back as text
        instead of raising; writes whose response is not consumed use that.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(f"{method} {url} failed: {exc}") from exc

        if resp.status_code >= 400:
            raise ApiError(
                f"{method} {url} returned {resp.status_code}",
                status_code=resp.status_code,
                payload=_body_or_text(resp),
            )
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            if not decode:
                return resp.text
            raise ApiError(
                f"{method} {url} returned a non-JSON body",
                status_code=resp.status_code,
                payload=resp.text[:200],
            ) from exc

    @staticmethod
    def _parse(
        adapter: TypeAdapter[T], data: Any, context: Optional[dict[str, Any]] = None
    ) -> T:
        """Validate a decoded body; shape errors become ApiError."""
        try:
            return adapter.validate_python(data, context=context)
        except ValidationError as exc:
            raise ApiError(f"Unexpected response shape: {exc}", payload=data) from exc


def _body_or_text(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text[:200] if resp.text else None
