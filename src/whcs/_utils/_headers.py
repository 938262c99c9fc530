import platform
from typing import Dict, Mapping, Optional

from .._version import __version__
from .constants import HEADER_SDK_ANALYTICS, HEADER_USER_AGENT, SDK_NAME

HeaderMap = Mapping[str, Optional[str]]


def user_agent_value() -> str:
    return (
        f"{SDK_NAME}/{__version__} "
        f"(python {platform.python_version()}; {platform.system().lower()})"
    )


def sdk_headers(
    service_name: str, service_version: str, operation_id: str
) -> Dict[str, str]:
    """Identification headers sent with every request."""
    return {
        HEADER_USER_AGENT: user_agent_value(),
        HEADER_SDK_ANALYTICS: (
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
        ),
    }


def merge_headers(
    defaults: Optional[HeaderMap] = None,
    computed: Optional[HeaderMap] = None,
    user_supplied: Optional[HeaderMap] = None,
) -> Dict[str, str]:
    """Merge header maps with increasing precedence.

    ``defaults`` < ``computed`` < ``user_supplied``. Names are compared
    case-insensitively and the casing of the winning source is kept. A
    ``None`` value means the source has no opinion on that header: it neither
    overrides a lower source nor appears in the result.
    """
    merged: Dict[str, tuple[str, str]] = {}
    for source in (defaults, computed, user_supplied):
        if not source:
            continue
        for name, value in source.items():
            if value is None:
                continue
            merged[name.lower()] = (name, str(value))
    return dict(merged.values())


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None
