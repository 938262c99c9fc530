import json
from typing import Any, Dict, List, Optional, Sequence

from httpx import Response


class WhcsError(Exception):
    """Base class for errors raised by the SDK."""


class MissingParametersError(WhcsError, ValueError):
    """Raised before any request is built when required parameters are absent.

    All missing names are reported, not only the first one.
    """

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        self.message = f"Missing required parameters: {', '.join(self.missing)}"
        super().__init__(self.message)


class ApiError(WhcsError):
    """Raised for non-2xx responses returned by the remote service."""

    def __init__(
        self,
        status_code: int,
        *,
        message: Optional[str] = None,
        response_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        self.headers = headers or {}
        self.url = url
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"API error {self.status_code}"
        if self.message:
            text = f"{text}: {self.message}"
        if self.url:
            text = f"{text} ({self.url})"
        return text

    @classmethod
    def from_response(cls, response: Response) -> "ApiError":
        try:
            body: Any = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = response.text

        message: Optional[str] = None
        if isinstance(body, dict):
            for key in ("error", "message", "errorMessage", "description"):
                value = body.get(key)
                if isinstance(value, str) and value:
                    message = value
                    break
        elif isinstance(body, str) and body:
            message = body
        if message is None:
            message = response.reason_phrase or None

        try:
            url: Optional[str] = str(response.request.url)
        except RuntimeError:
            url = None

        return cls(
            response.status_code,
            message=message,
            response_body=body,
            headers=dict(response.headers),
            url=url,
        )
