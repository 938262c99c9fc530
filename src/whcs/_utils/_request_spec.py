from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote


@dataclass
class RequestSpec:
    """Encapsulates everything needed to send one HTTP request.

    Built from an operation description and the caller's arguments, it holds
    the HTTP method, the path template together with the values that fill it,
    the query parameters, the final header map and at most one form of body
    (JSON, raw content or multipart files). It performs no I/O and is consumed
    once by a request executor.
    """

    method: str
    url_template: str
    path_params: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None
    content: Optional[Any] = None
    files: Optional[Dict[str, Tuple[str, Any, str]]] = None
    operation_id: str = ""

    @property
    def url(self) -> str:
        url = self.url_template
        for name, value in self.path_params.items():
            url = url.replace("{" + name + "}", quote(value, safe=""))
        return url
