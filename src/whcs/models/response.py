import json
from typing import Any, Dict, Optional, Type, TypeVar

from httpx import Response
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


def _looks_like_json(content_type: str) -> bool:
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json") or mime == "text/json"


class DetailedResponse(BaseModel):
    """Outcome of a successful call.

    ``result`` is the decoded body: parsed JSON for JSON responses, text for
    anything else (malformed JSON included) and ``None`` when the body is empty.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    result: Any = None
    status: int
    status_text: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, response: Response) -> "DetailedResponse":
        result: Optional[Any] = None
        if response.content:
            if _looks_like_json(response.headers.get("Content-Type", "")):
                try:
                    result = response.json()
                except (json.JSONDecodeError, UnicodeDecodeError):
                    result = response.text
            else:
                result = response.text

        return cls(
            result=result,
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
        )

    def parse(self, model: Type[T]) -> T:
        """Validate ``result`` into the given model."""
        return model.model_validate(self.result)
