from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel

from ._headers import HeaderMap, merge_headers
from ._operation import ArrayFormat, OperationSpec, ParameterRole, ParameterSpec
from ._request_spec import RequestSpec
from .constants import CONTENT_TYPE_OCTET_STREAM, HEADER_ACCEPT, HEADER_CONTENT_TYPE


def serialize_value(value: Any) -> Any:
    """Turn enums and pydantic models into plain JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    return value


def _query_scalar(value: Any) -> Any:
    value = serialize_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _query_value(param: ParameterSpec, value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        items = [_query_scalar(item) for item in value if item is not None]
        if param.array_format is ArrayFormat.CSV:
            return ",".join(str(item) for item in items)
        return items
    return _query_scalar(value)


def _path_value(value: Any) -> str:
    value = serialize_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_request_spec(
    operation: OperationSpec,
    params: Optional[Mapping[str, Any]],
    *,
    version: Optional[str] = None,
    default_headers: Optional[HeaderMap] = None,
    user_headers: Optional[HeaderMap] = None,
) -> RequestSpec:
    """Resolve an operation and its call arguments into a :class:`RequestSpec`.

    The function is pure: the same operation, arguments and configuration
    always produce an equal request spec. Arguments bound to ``None`` are
    treated as not given and never reach the query, body or form data.

    Args:
        operation: The static description of the remote operation.
        params: Call arguments keyed by local parameter name.
        version: API version date added as the ``version`` query parameter.
        default_headers: Lowest precedence headers (SDK identification,
            client-wide headers).
        user_headers: Headers passed by the caller for this call; they win
            over everything else.

    Raises:
        ValueError: If a path parameter has no value. Callers are expected to
            validate required parameters first.
    """
    args: Mapping[str, Any] = params or {}

    path_params: Dict[str, str] = {}
    for param in operation.by_role(ParameterRole.PATH):
        value = args.get(param.name)
        if value is None:
            raise ValueError(
                f"Path parameter '{param.name}' of {operation.name} has no value"
            )
        path_params[param.key] = _path_value(value)

    query: Dict[str, Any] = {}
    if operation.versioned and version is not None:
        query["version"] = version
    for param in operation.by_role(ParameterRole.QUERY):
        value = args.get(param.name)
        if value is not None:
            query[param.key] = _query_value(param, value)

    json_body: Optional[Any] = None
    content: Optional[Any] = None

    body_fields = operation.by_role(ParameterRole.BODY_FIELD)
    if body_fields:
        json_body = {
            param.key: serialize_value(args[param.name])
            for param in body_fields
            if args.get(param.name) is not None
        }

    for param in operation.by_role(ParameterRole.BODY):
        value = args.get(param.name)
        if value is None:
            continue
        if param.raw_body and isinstance(value, (str, bytes)):
            content = value
        else:
            json_body = serialize_value(value)

    files: Optional[Dict[str, Tuple[str, Any, str]]] = None
    for param in operation.by_role(ParameterRole.FORM_FIELD):
        data = args.get(param.name)
        if data is None:
            continue
        content_type = None
        if param.content_type_param:
            content_type = args.get(param.content_type_param)
        if files is None:
            files = {}
        files[param.key] = (
            param.key,
            data,
            content_type or CONTENT_TYPE_OCTET_STREAM,
        )

    computed: Dict[str, Optional[str]] = {
        HEADER_ACCEPT: operation.accept,
        HEADER_CONTENT_TYPE: operation.content_type,
    }
    for param in operation.by_role(ParameterRole.HEADER):
        value = args.get(param.name)
        if value is not None:
            computed[param.key] = _path_value(value)

    return RequestSpec(
        method=operation.method,
        url_template=operation.path,
        path_params=path_params,
        params=query,
        headers=merge_headers(default_headers, computed, user_headers),
        json=json_body,
        content=content,
        files=files,
        operation_id=operation.operation_id,
    )
