from dataclasses import dataclass
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ._utils._auth import read_external_config
from ._utils._validation import validate_params

DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3


@dataclass(frozen=True)
class ServiceDefaults:
    """Per-service constants: configuration name and public endpoint."""

    name: str
    url: str


class Config(BaseModel):
    service_name: str
    service_url: str
    version: str
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    disable_ssl_verification: bool = False

    @field_validator("service_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("service_url must not be empty")
        return value.rstrip("/")


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


def resolve_config(
    defaults: ServiceDefaults,
    *,
    version: Optional[str],
    service_url: Optional[str] = None,
    service_name: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    disable_ssl_verification: Optional[bool] = None,
) -> Config:
    """Build the client configuration.

    Explicit arguments win, then ``<SERVICE_NAME>_URL`` and
    ``<SERVICE_NAME>_DISABLE_SSL`` from the environment or credentials file,
    then the service defaults.

    Raises:
        MissingParametersError: If ``version`` is not given.
    """
    validate_params({"version": version}, ["version"])

    name = service_name or defaults.name
    external = read_external_config(name)

    if disable_ssl_verification is None:
        disable_ssl_verification = _as_bool(external.get("DISABLE_SSL"))

    return Config(
        service_name=name,
        service_url=service_url or external.get("URL") or defaults.url,
        version=version,  # type: ignore[arg-type]
        headers=dict(headers or {}),
        timeout=timeout,
        max_retries=max_retries,
        disable_ssl_verification=disable_ssl_verification,
    )
