from typing import Any, BinaryIO, Dict, List, Mapping, Optional, Union

from .._config import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ServiceDefaults
from .._utils._auth import Authenticator
from .._utils._logs import setup_logging
from .._utils._operation import OperationSpec
from ..models.annotator_for_clinical_data import (
    AnalyticFlowBeanInput,
    Annotator,
    AnnotatorFlow,
    HealthCheckAccept,
    HealthCheckFormat,
    RunPipelineContentType,
    UnstructuredContainer,
)
from ..models.response import DetailedResponse
from ._acd_operations import ACD_OPERATIONS
from ._executor import RequestExecutor
from ._invoker import OperationInvoker, create_invoker

ACD_DEFAULTS = ServiceDefaults(
    name="annotator_for_clinical_data_acd",
    url="https://annotator-for-clinical-data-acd.cloud.ibm.com/services/clinical_data_annotator/api",
)

Headers = Optional[Mapping[str, Optional[str]]]
ArchiveFile = Union[bytes, BinaryIO]


class AnnotatorForClinicalDataAcdV1:
    """Client for the Annotator for Clinical Data service.

    The service extracts medical concepts, attributes and relations from
    unstructured clinical text. Annotator flows can be sent with each request
    or persisted as profiles and flows, and domain content is deployed as
    cartridges.

    Every operation is a coroutine returning a :class:`DetailedResponse`.
    Missing required arguments raise :class:`MissingParametersError` when the
    call is awaited, before any request is sent.

    Examples:
        ```python
        from whcs import AnnotatorForClinicalDataAcdV1, BearerTokenAuthenticator

        async with AnnotatorForClinicalDataAcdV1(
            "2023-01-01", authenticator=BearerTokenAuthenticator("token")
        ) as acd:
            response = await acd.get_profiles()
            print(response.result)
        ```
    """

    def __init__(
        self,
        version: Optional[str] = None,
        *,
        authenticator: Optional[Authenticator] = None,
        service_url: Optional[str] = None,
        service_name: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        disable_ssl_verification: Optional[bool] = None,
        executor: Optional[RequestExecutor] = None,
        debug: bool = False,
    ) -> None:
        """Create a client.

        Args:
            version (str): API version date in ``YYYY-MM-DD`` format, sent with
                every request.
            authenticator (Optional[Authenticator]): Adds credentials to the
                requests. Read from the environment when not given.
            service_url (Optional[str]): Overrides the public endpoint.
            service_name (Optional[str]): Name used to look up external
                configuration, ``annotator_for_clinical_data_acd`` by default.
            headers (Optional[Dict[str, str]]): Headers sent with every request.
            timeout (float): Request timeout in seconds.
            max_retries (int): Retries for timeouts and gateway errors.
            disable_ssl_verification (Optional[bool]): Skip TLS verification.
            executor (Optional[RequestExecutor]): Sends the requests instead of
                the default ``httpx`` executor.
            debug (bool): Log requests to stderr.

        Raises:
            MissingParametersError: If ``version`` is not given.
        """
        if debug:
            setup_logging(debug=True)
        self._invoker = create_invoker(
            ACD_DEFAULTS,
            ACD_OPERATIONS,
            version=version,
            authenticator=authenticator,
            service_url=service_url,
            service_name=service_name,
            headers=headers,
            timeout=timeout,
            max_retries=max_retries,
            disable_ssl_verification=disable_ssl_verification,
            executor=executor,
        )

    @property
    def invoker(self) -> OperationInvoker:
        return self._invoker

    @property
    def operations(self) -> Mapping[str, OperationSpec]:
        return self._invoker.operations

    async def invoke(
        self, operation: str, *, headers: Headers = None, **params: Any
    ) -> DetailedResponse:
        """Call any operation of the service by name."""
        return await self._invoker.invoke(operation, params, headers)

    async def aclose(self) -> None:
        aclose = getattr(self._invoker.executor, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "AnnotatorForClinicalDataAcdV1":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # profiles

    async def get_profiles(self, *, headers: Headers = None) -> DetailedResponse:
        """Get the persisted profiles, keyed by profile ID."""
        return await self._invoker.invoke("get_profiles", {}, headers)

    async def create_profile(
        self,
        *,
        new_id: Optional[str] = None,
        new_name: Optional[str] = None,
        new_description: Optional[str] = None,
        new_published_date: Optional[str] = None,
        new_publish: Optional[bool] = None,
        new_version: Optional[str] = None,
        new_cartridge_id: Optional[str] = None,
        new_annotators: Optional[List[Annotator]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Persist a new profile.

        A profile holds annotator configurations that flows reference by ID.

        Args:
            new_id (Optional[str]): Unique ID of the profile.
            new_name (Optional[str]): Display name.
            new_description (Optional[str]): Free text description.
            new_published_date (Optional[str]): Publish date.
            new_publish (Optional[bool]): Whether the profile is published.
            new_version (Optional[str]): Profile version.
            new_cartridge_id (Optional[str]): Cartridge the profile belongs to.
            new_annotators (Optional[List[Annotator]]): Annotator configurations.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The service response, with no body on success.
        """
        return await self._invoker.invoke(
            "create_profile",
            {
                "new_id": new_id,
                "new_name": new_name,
                "new_description": new_description,
                "new_published_date": new_published_date,
                "new_publish": new_publish,
                "new_version": new_version,
                "new_cartridge_id": new_cartridge_id,
                "new_annotators": new_annotators,
            },
            headers,
        )

    async def get_profile(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        """Get a persisted profile.

        Args:
            id (str): Profile ID.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The profile as an ``AcdProfile`` document.
        """
        return await self._invoker.invoke("get_profile", {"id": id}, headers)

    async def update_profile(
        self,
        id: Optional[str] = None,
        *,
        new_id: Optional[str] = None,
        new_name: Optional[str] = None,
        new_description: Optional[str] = None,
        new_published_date: Optional[str] = None,
        new_publish: Optional[bool] = None,
        new_version: Optional[str] = None,
        new_cartridge_id: Optional[str] = None,
        new_annotators: Optional[List[Annotator]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Replace the definition of the persisted profile ``id``.

        Takes the same fields as :meth:`create_profile`.
        """
        return await self._invoker.invoke(
            "update_profile",
            {
                "id": id,
                "new_id": new_id,
                "new_name": new_name,
                "new_description": new_description,
                "new_published_date": new_published_date,
                "new_publish": new_publish,
                "new_version": new_version,
                "new_cartridge_id": new_cartridge_id,
                "new_annotators": new_annotators,
            },
            headers,
        )

    async def delete_profile(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke("delete_profile", {"id": id}, headers)

    # flows

    async def get_flows(self, *, headers: Headers = None) -> DetailedResponse:
        """Get the persisted flows, keyed by flow ID."""
        return await self._invoker.invoke("get_flows", {}, headers)

    async def create_flows(
        self,
        *,
        new_id: Optional[str] = None,
        new_name: Optional[str] = None,
        new_description: Optional[str] = None,
        new_published_date: Optional[str] = None,
        new_publish: Optional[bool] = None,
        new_version: Optional[str] = None,
        new_cartridge_id: Optional[str] = None,
        new_annotator_flows: Optional[List[AnnotatorFlow]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Persist a new flow definition.

        Args:
            new_id (Optional[str]): Unique ID of the flow.
            new_name (Optional[str]): Display name.
            new_description (Optional[str]): Free text description.
            new_published_date (Optional[str]): Publish date.
            new_publish (Optional[bool]): Whether the flow is published.
            new_version (Optional[str]): Flow version.
            new_cartridge_id (Optional[str]): Cartridge the flow belongs to.
            new_annotator_flows (Optional[List[AnnotatorFlow]]): The annotator
                flows to run.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The service response, with no body on success.

        Examples:
            ```python
            flow = AnnotatorFlow(
                flow=Flow(elements=[FlowEntry(annotator={"name": "concept_detection"})])
            )
            await acd.create_flows(new_id="my_flow", new_annotator_flows=[flow])
            ```
        """
        return await self._invoker.invoke(
            "create_flows",
            {
                "new_id": new_id,
                "new_name": new_name,
                "new_description": new_description,
                "new_published_date": new_published_date,
                "new_publish": new_publish,
                "new_version": new_version,
                "new_cartridge_id": new_cartridge_id,
                "new_annotator_flows": new_annotator_flows,
            },
            headers,
        )

    async def get_flows_by_id(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        """Get a persisted flow.

        Args:
            id (str): Flow ID.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The flow as an ``AcdFlow`` document.
        """
        return await self._invoker.invoke("get_flows_by_id", {"id": id}, headers)

    async def update_flows(
        self,
        id: Optional[str] = None,
        *,
        new_id: Optional[str] = None,
        new_name: Optional[str] = None,
        new_description: Optional[str] = None,
        new_published_date: Optional[str] = None,
        new_publish: Optional[bool] = None,
        new_version: Optional[str] = None,
        new_cartridge_id: Optional[str] = None,
        new_annotator_flows: Optional[List[AnnotatorFlow]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Replace the definition of the persisted flow ``id``."""
        return await self._invoker.invoke(
            "update_flows",
            {
                "id": id,
                "new_id": new_id,
                "new_name": new_name,
                "new_description": new_description,
                "new_published_date": new_published_date,
                "new_publish": new_publish,
                "new_version": new_version,
                "new_cartridge_id": new_cartridge_id,
                "new_annotator_flows": new_annotator_flows,
            },
            headers,
        )

    async def delete_flows(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke("delete_flows", {"id": id}, headers)

    # analyze

    async def run_pipeline(
        self,
        *,
        unstructured: Optional[List[UnstructuredContainer]] = None,
        annotator_flows: Optional[List[AnnotatorFlow]] = None,
        debug_text_restore: Optional[bool] = None,
        return_analyzed_text: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Annotate unstructured text with the given annotator flows.

        Args:
            unstructured (Optional[List[UnstructuredContainer]]): The text
                containers to analyze.
            annotator_flows (Optional[List[AnnotatorFlow]]): Flows to run on
                the containers.
            debug_text_restore (Optional[bool]): Keep ``ReplaceTextChange``
                annotations and the modified text in the response.
            return_analyzed_text (Optional[bool]): Include the analyzed text in
                the response.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The annotated containers.
        """
        return await self._invoker.invoke(
            "run_pipeline",
            {
                "unstructured": unstructured,
                "annotator_flows": annotator_flows,
                "debug_text_restore": debug_text_restore,
                "return_analyzed_text": return_analyzed_text,
            },
            headers,
        )

    async def run_pipeline_with_flow(
        self,
        flow_id: Optional[str] = None,
        return_analyzed_text: Optional[bool] = None,
        analytic_flow_bean_input: Optional[
            Union[AnalyticFlowBeanInput, Dict[str, Any], str, bytes]
        ] = None,
        *,
        content_type: Optional[Union[RunPipelineContentType, str]] = None,
        debug_text_restore: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Analyze input with the persisted flow ``flow_id``.

        The input is either plain text, sent unchanged, or a container
        document, sent as JSON. Set ``content_type`` to match, for example
        ``text/plain`` for raw text.

        Args:
            flow_id (str): ID of a persisted flow.
            return_analyzed_text (bool): Include the analyzed text in the
                response.
            analytic_flow_bean_input: Text or a container document.
            content_type (Optional[RunPipelineContentType]): Type of the input.
            debug_text_restore (Optional[bool]): Keep ``ReplaceTextChange``
                annotations and the modified text in the response.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The annotated containers.
        """
        return await self._invoker.invoke(
            "run_pipeline_with_flow",
            {
                "flow_id": flow_id,
                "return_analyzed_text": return_analyzed_text,
                "analytic_flow_bean_input": analytic_flow_bean_input,
                "content_type": content_type,
                "debug_text_restore": debug_text_restore,
            },
            headers,
        )

    # annotators

    async def get_annotators(self, *, headers: Headers = None) -> DetailedResponse:
        """Get the annotators offered by the service, keyed by name."""
        return await self._invoker.invoke("get_annotators", {}, headers)

    async def get_annotators_by_id(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        return await self._invoker.invoke("get_annotators_by_id", {"id": id}, headers)

    async def delete_user_specific_artifacts(
        self, *, headers: Headers = None
    ) -> DetailedResponse:
        """Delete every artifact stored for the tenant."""
        return await self._invoker.invoke("delete_user_specific_artifacts", {}, headers)

    # cartridges

    async def cartridges_get(self, *, headers: Headers = None) -> DetailedResponse:
        return await self._invoker.invoke("cartridges_get", {}, headers)

    async def cartridges_post_multipart(
        self,
        *,
        archive_file: Optional[ArchiveFile] = None,
        archive_file_content_type: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Deploy a new cartridge.

        Args:
            archive_file (Optional[Union[bytes, BinaryIO]]): The cartridge
                archive, usually a zip file.
            archive_file_content_type (Optional[str]): Content type of the
                archive, ``application/octet-stream`` when not given.
            headers: Extra request headers.

        Returns:
            DetailedResponse: The deployment status, an ``AcdCartridges``
            document.
        """
        return await self._invoker.invoke(
            "cartridges_post_multipart",
            {
                "archive_file": archive_file,
                "archive_file_content_type": archive_file_content_type,
            },
            headers,
        )

    async def cartridges_put_multipart(
        self,
        *,
        archive_file: Optional[ArchiveFile] = None,
        archive_file_content_type: Optional[str] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Redeploy an existing cartridge from a new archive."""
        return await self._invoker.invoke(
            "cartridges_put_multipart",
            {
                "archive_file": archive_file,
                "archive_file_content_type": archive_file_content_type,
            },
            headers,
        )

    async def cartridges_get_id(
        self, id: Optional[str] = None, *, headers: Headers = None
    ) -> DetailedResponse:
        """Get the deployment status of the cartridge ``id``."""
        return await self._invoker.invoke("cartridges_get_id", {"id": id}, headers)

    async def deploy_cartridge(
        self,
        *,
        archive_file: Optional[ArchiveFile] = None,
        archive_file_content_type: Optional[str] = None,
        update: Optional[bool] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Deploy a cartridge through the legacy ``/v1/deploy`` endpoint.

        Args:
            archive_file (Optional[Union[bytes, BinaryIO]]): The cartridge
                archive.
            archive_file_content_type (Optional[str]): Content type of the
                archive.
            update (Optional[bool]): Replace artifacts that already exist.
            headers: Extra request headers.

        Returns:
            DetailedResponse: A ``DeployCartridgeResponse`` document.
        """
        return await self._invoker.invoke(
            "deploy_cartridge",
            {
                "archive_file": archive_file,
                "archive_file_content_type": archive_file_content_type,
                "update": update,
            },
            headers,
        )

    # status

    async def get_health_check_status(
        self,
        *,
        accept: Optional[Union[HealthCheckAccept, str]] = None,
        format: Optional[Union[HealthCheckFormat, str]] = None,
        headers: Headers = None,
    ) -> DetailedResponse:
        """Check whether the service is up.

        Args:
            accept (Optional[HealthCheckAccept]): Response media type, JSON or
                XML.
            format (Optional[HealthCheckFormat]): Overrides the response
                format.
            headers: Extra request headers.

        Returns:
            DetailedResponse: A ``ServiceStatus`` document.
        """
        return await self._invoker.invoke(
            "get_health_check_status", {"accept": accept, "format": format}, headers
        )
