from ._auth import (
    Authenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
    get_authenticator_from_environment,
)
from ._headers import merge_headers, sdk_headers
from ._operation import ArrayFormat, OperationSpec, ParameterRole, ParameterSpec
from ._request_builder import build_request_spec
from ._request_spec import RequestSpec
from ._validation import get_missing_params, validate_params

__all__ = [
    "ArrayFormat",
    "Authenticator",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "NoAuthAuthenticator",
    "OperationSpec",
    "ParameterRole",
    "ParameterSpec",
    "RequestSpec",
    "build_request_spec",
    "get_authenticator_from_environment",
    "get_missing_params",
    "merge_headers",
    "sdk_headers",
    "validate_params",
]
