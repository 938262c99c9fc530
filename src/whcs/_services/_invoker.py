from logging import getLogger
from typing import Any, Dict, Iterable, Mapping, Optional

from .._config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    Config,
    ServiceDefaults,
    resolve_config,
)
from .._utils._auth import Authenticator, get_authenticator_from_environment
from .._utils._headers import merge_headers, sdk_headers
from .._utils._operation import OperationSpec
from .._utils._request_builder import build_request_spec
from .._utils._request_spec import RequestSpec
from .._utils._validation import validate_params
from ..models.response import DetailedResponse
from ._executor import HttpRequestExecutor, RequestExecutor

SERVICE_VERSION = "v1"


class OperationInvoker:
    """Turns operation calls into requests and hands them to an executor.

    One invoker serves one service: it owns the client configuration, the
    service's operation table and the executor. Calls share no state, so
    concurrent invocations never interfere.
    """

    def __init__(
        self,
        config: Config,
        operations: Iterable[OperationSpec],
        executor: RequestExecutor,
    ) -> None:
        self._logger = getLogger("whcs.invoker")
        self._config = config
        self._operations: Dict[str, OperationSpec] = {op.name: op for op in operations}
        self._executor = executor

    @property
    def config(self) -> Config:
        return self._config

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def operations(self) -> Mapping[str, OperationSpec]:
        return dict(self._operations)

    def operation(self, name: str) -> OperationSpec:
        try:
            return self._operations[name]
        except KeyError:
            raise ValueError(
                f"Unknown operation '{name}' for service {self._config.service_name}"
            ) from None

    def _check_names(self, operation: OperationSpec, params: Mapping[str, Any]) -> None:
        known = {p.name for p in operation.parameters}
        known.update(
            p.content_type_param for p in operation.parameters if p.content_type_param
        )
        unknown = sorted(set(params) - known)
        if unknown:
            raise TypeError(
                f"{operation.name}() got unexpected parameters: {', '.join(unknown)}"
            )

    def build(
        self,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> RequestSpec:
        """Validate the arguments of an operation and resolve its request.

        Raises:
            MissingParametersError: If required parameters are absent.
        """
        operation = self.operation(name)
        args = dict(params or {})
        self._check_names(operation, args)
        validate_params(args, operation.required_names)

        defaults = merge_headers(
            sdk_headers(
                self._config.service_name, SERVICE_VERSION, operation.operation_id
            ),
            self._config.headers,
        )
        return build_request_spec(
            operation,
            args,
            version=self._config.version,
            default_headers=defaults,
            user_headers=headers,
        )

    async def invoke(
        self,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
    ) -> DetailedResponse:
        """Run one operation and return the executor's response unchanged.

        Validation failures surface when the call is awaited and the executor
        is never reached.
        """
        spec = self.build(name, params, headers)
        self._logger.debug(f"{spec.operation_id}: {spec.method} {spec.url}")
        return await self._executor.execute(spec)


def create_invoker(
    defaults: ServiceDefaults,
    operations: Iterable[OperationSpec],
    *,
    version: Optional[str],
    authenticator: Optional[Authenticator] = None,
    service_url: Optional[str] = None,
    service_name: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    disable_ssl_verification: Optional[bool] = None,
    executor: Optional[RequestExecutor] = None,
) -> OperationInvoker:
    """Wire configuration, authentication and executor for one service.

    Without an ``executor`` an :class:`HttpRequestExecutor` is created; it
    authenticates with ``authenticator`` or, when none is given, with the
    one configured for the service in the environment.

    Raises:
        MissingParametersError: If ``version`` is not given.
    """
    config = resolve_config(
        defaults,
        version=version,
        service_url=service_url,
        service_name=service_name,
        headers=headers,
        timeout=timeout,
        max_retries=max_retries,
        disable_ssl_verification=disable_ssl_verification,
    )
    if executor is None:
        if authenticator is None:
            authenticator = get_authenticator_from_environment(config.service_name)
        executor = HttpRequestExecutor(
            config.service_url,
            authenticator,
            timeout=config.timeout,
            max_retries=config.max_retries,
            disable_ssl_verification=config.disable_ssl_verification,
        )
    return OperationInvoker(config, operations, executor)
