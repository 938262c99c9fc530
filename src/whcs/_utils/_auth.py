import base64
import os
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

from dotenv import dotenv_values

from .constants import (
    DEFAULT_CREDENTIALS_FILE,
    ENV_CREDENTIALS_FILE,
    HEADER_AUTHORIZATION,
)


@runtime_checkable
class Authenticator(Protocol):
    """Anything able to decorate outgoing requests with credentials."""

    def authentication_headers(self) -> Dict[str, str]: ...


class NoAuthAuthenticator:
    def authentication_headers(self) -> Dict[str, str]:
        return {}


class BearerTokenAuthenticator:
    def __init__(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ValueError("bearer_token must not be empty")
        self.bearer_token = bearer_token

    def authentication_headers(self) -> Dict[str, str]:
        return {HEADER_AUTHORIZATION: f"Bearer {self.bearer_token}"}


class BasicAuthenticator:
    def __init__(self, username: str, password: str) -> None:
        if not username or not password:
            raise ValueError("username and password must not be empty")
        self.username = username
        self.password = password

    def authentication_headers(self) -> Dict[str, str]:
        token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode()
        return {HEADER_AUTHORIZATION: f"Basic {token}"}


def _credentials_file() -> Optional[Path]:
    configured = os.environ.get(ENV_CREDENTIALS_FILE)
    if configured:
        return Path(os.path.expanduser(os.path.expandvars(configured)))
    candidate = Path.cwd() / DEFAULT_CREDENTIALS_FILE
    return candidate if candidate.exists() else None


def read_external_config(service_name: str) -> Dict[str, str]:
    """Collect ``<SERVICE_NAME>_*`` settings for a service.

    Values come from the credentials file (``IBM_CREDENTIALS_FILE`` or
    ``./ibm-credentials.env``) and are overridden by environment variables.
    The returned keys have the prefix stripped, e.g. ``AUTH_TYPE`` or ``URL``.
    """
    prefix = service_name.upper().replace("-", "_") + "_"
    settings: Dict[str, str] = {}

    path = _credentials_file()
    if path is not None and path.exists():
        for key, value in dotenv_values(path).items():
            if key.startswith(prefix) and value is not None:
                settings[key[len(prefix) :]] = value

    for key, value in os.environ.items():
        if key.startswith(prefix):
            settings[key[len(prefix) :]] = value

    return settings


def get_authenticator_from_environment(service_name: str) -> Authenticator:
    """Build an authenticator from external configuration.

    Supported ``<SERVICE_NAME>_AUTH_TYPE`` values are ``bearertoken``,
    ``basic`` and ``noauth``. When no auth type is configured a bearer token
    or username/password pair is used if present.

    Raises:
        ValueError: If nothing usable is configured or the auth type is not
            supported.
    """
    settings = read_external_config(service_name)
    auth_type = settings.get("AUTH_TYPE", "").lower().replace("_", "")

    if not auth_type:
        if settings.get("BEARER_TOKEN"):
            auth_type = "bearertoken"
        elif settings.get("USERNAME"):
            auth_type = "basic"

    if auth_type == "bearertoken":
        return BearerTokenAuthenticator(settings.get("BEARER_TOKEN", ""))
    if auth_type == "basic":
        return BasicAuthenticator(
            settings.get("USERNAME", ""), settings.get("PASSWORD", "")
        )
    if auth_type == "noauth":
        return NoAuthAuthenticator()
    if not auth_type:
        raise ValueError(
            f"No authentication configured for service '{service_name}'. "
            f"Pass an authenticator or set {service_name.upper()}_AUTH_TYPE."
        )
    raise ValueError(
        f"Unsupported auth type '{auth_type}' for service '{service_name}'"
    )
