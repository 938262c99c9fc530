"""Python client for the Annotator for Clinical Data and Insights for Medical
Literature services.

Examples:
    ```python
    from whcs import AnnotatorForClinicalDataAcdV1, BearerTokenAuthenticator

    acd = AnnotatorForClinicalDataAcdV1(
        "2023-01-01", authenticator=BearerTokenAuthenticator("token")
    )
    profiles = await acd.get_profiles()
    ```
"""

from ._config import Config, ServiceDefaults
from ._services import (
    ACD_DEFAULTS,
    IML_DEFAULTS,
    AnnotatorForClinicalDataAcdV1,
    HttpRequestExecutor,
    InsightsForMedicalLiteratureV1,
    RequestExecutor,
)
from ._utils import (
    Authenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
    RequestSpec,
    get_authenticator_from_environment,
)
from ._version import __version__
from .models import ApiError, DetailedResponse, MissingParametersError, WhcsError

__all__ = [
    "ACD_DEFAULTS",
    "IML_DEFAULTS",
    "AnnotatorForClinicalDataAcdV1",
    "ApiError",
    "Authenticator",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "Config",
    "DetailedResponse",
    "HttpRequestExecutor",
    "InsightsForMedicalLiteratureV1",
    "MissingParametersError",
    "NoAuthAuthenticator",
    "RequestExecutor",
    "RequestSpec",
    "ServiceDefaults",
    "WhcsError",
    "__version__",
    "get_authenticator_from_environment",
]
