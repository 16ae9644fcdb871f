"""Errors raised by the remote API clients."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Raised when a remote call fails or returns an unexpected response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
