"""Operation table of the Annotator for Clinical Data service."""

from typing import Tuple

from .._utils._operation import (
    OperationSpec,
    body,
    body_field,
    form_field,
    header,
    path,
    query,
)
from .._utils.constants import CONTENT_TYPE_JSON, CONTENT_TYPE_MULTIPART

_ARTIFACT_FIELDS = (
    body_field("new_id", "id"),
    body_field("new_name", "name"),
    body_field("new_description", "description"),
    body_field("new_published_date", "publishedDate"),
    body_field("new_publish", "publish"),
    body_field("new_version", "version"),
    body_field("new_cartridge_id", "cartridgeId"),
)

_PROFILE_FIELDS = _ARTIFACT_FIELDS + (body_field("new_annotators", "annotators"),)
_FLOW_FIELDS = _ARTIFACT_FIELDS + (body_field("new_annotator_flows", "annotatorFlows"),)

_ARCHIVE = form_field(
    "archive_file", content_type_param="archive_file_content_type"
)

ACD_OPERATIONS: Tuple[OperationSpec, ...] = (
    # profiles
    OperationSpec(
        "get_profiles",
        "GET",
        "/v1/profiles",
        accept=CONTENT_TYPE_JSON,
        summary="Get list of available persisted profiles.",
    ),
    OperationSpec(
        "create_profile",
        "POST",
        "/v1/profiles",
        _PROFILE_FIELDS,
        content_type=CONTENT_TYPE_JSON,
        summary="Persist a new profile.",
    ),
    OperationSpec(
        "get_profile",
        "GET",
        "/v1/profiles/{id}",
        (path("id"),),
        accept=CONTENT_TYPE_JSON,
        summary="Get details of a specific profile.",
    ),
    OperationSpec(
        "update_profile",
        "PUT",
        "/v1/profiles/{id}",
        (path("id"),) + _PROFILE_FIELDS,
        content_type=CONTENT_TYPE_JSON,
        summary="Update a persisted profile definition.",
    ),
    OperationSpec(
        "delete_profile",
        "DELETE",
        "/v1/profiles/{id}",
        (path("id"),),
        summary="Delete a persisted profile.",
    ),
    # flows
    OperationSpec(
        "get_flows",
        "GET",
        "/v1/flows",
        accept=CONTENT_TYPE_JSON,
        summary="Get list of available persisted flows.",
    ),
    OperationSpec(
        "create_flows",
        "POST",
        "/v1/flows",
        _FLOW_FIELDS,
        content_type=CONTENT_TYPE_JSON,
        summary="Persist a new flow definition.",
    ),
    OperationSpec(
        "get_flows_by_id",
        "GET",
        "/v1/flows/{id}",
        (path("id"),),
        accept=CONTENT_TYPE_JSON,
        summary="Get details of a specific flow.",
    ),
    OperationSpec(
        "update_flows",
        "PUT",
        "/v1/flows/{id}",
        (path("id"),) + _FLOW_FIELDS,
        content_type=CONTENT_TYPE_JSON,
        summary="Update a persisted flow definition.",
    ),
    OperationSpec(
        "delete_flows",
        "DELETE",
        "/v1/flows/{id}",
        (path("id"),),
        summary="Delete a persisted flow.",
    ),
    # analyze
    OperationSpec(
        "run_pipeline",
        "POST",
        "/v1/analyze",
        (
            body_field("unstructured"),
            body_field("annotator_flows", "annotatorFlows"),
            query("debug_text_restore"),
            query("return_analyzed_text"),
        ),
        content_type=CONTENT_TYPE_JSON,
        summary="Detect entities and relations in unstructured data.",
    ),
    OperationSpec(
        "run_pipeline_with_flow",
        "POST",
        "/v1/analyze/{flow_id}",
        (
            path("flow_id"),
            query("return_analyzed_text", required=True),
            body("analytic_flow_bean_input", required=True),
            header("content_type", "Content-Type"),
            query("debug_text_restore"),
        ),
        summary="Analyze text or a container with a persisted flow.",
    ),
    # annotators
    OperationSpec(
        "get_annotators",
        "GET",
        "/v1/annotators",
        summary="Get list of available annotators.",
    ),
    OperationSpec(
        "get_annotators_by_id",
        "GET",
        "/v1/annotators/{id}",
        (path("id"),),
        summary="Get details of a specific annotator.",
    ),
    OperationSpec(
        "delete_user_specific_artifacts",
        "DELETE",
        "/v1/user_data",
        summary="Delete tenant specific artifacts.",
    ),
    # cartridges
    OperationSpec(
        "cartridges_get",
        "GET",
        "/v1/cartridges",
        accept=CONTENT_TYPE_JSON,
        summary="Get list of cartridges and their deployment status.",
    ),
    OperationSpec(
        "cartridges_post_multipart",
        "POST",
        "/v1/cartridges",
        (_ARCHIVE,),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_MULTIPART,
        summary="Create a cartridge deployment.",
    ),
    OperationSpec(
        "cartridges_put_multipart",
        "PUT",
        "/v1/cartridges",
        (_ARCHIVE,),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_MULTIPART,
        summary="Redeploy an existing cartridge.",
    ),
    OperationSpec(
        "cartridges_get_id",
        "GET",
        "/v1/cartridges/{id}",
        (path("id"),),
        accept=CONTENT_TYPE_JSON,
        summary="Get the deployment status of a cartridge.",
    ),
    OperationSpec(
        "deploy_cartridge",
        "POST",
        "/v1/deploy",
        (_ARCHIVE, query("update")),
        accept=CONTENT_TYPE_JSON,
        content_type=CONTENT_TYPE_MULTIPART,
        summary="Deploy a cartridge (legacy endpoint).",
    ),
    # status
    OperationSpec(
        "get_health_check_status",
        "GET",
        "/v1/status/health_check",
        (header("accept", "Accept"), query("format")),
        summary="Determine if the service is up and running.",
    ),
)
