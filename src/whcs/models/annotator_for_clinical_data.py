from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(
    validate_by_name=True,
    validate_by_alias=True,
    use_enum_values=True,
    extra="allow",
)


class HealthCheckAccept(str, Enum):
    APPLICATION_JSON = "application/json"
    APPLICATION_XML = "application/xml"


class HealthCheckFormat(str, Enum):
    JSON = "json"
    XML = "xml"


class RunPipelineContentType(str, Enum):
    APPLICATION_JSON = "application/json"
    TEXT_PLAIN = "text/plain"


class ConfigurationEntity(BaseModel):
    model_config = _MODEL_CONFIG

    id: Optional[str] = None
    type: Optional[str] = None
    uid: Optional[int] = None
    mergeid: Optional[int] = None


class Annotator(BaseModel):
    """An annotator reference with optional parameters and configurations."""

    model_config = _MODEL_CONFIG

    name: str
    parameters: Optional[Dict[str, Any]] = None
    configurations: Optional[List[ConfigurationEntity]] = None


class FlowEntry(BaseModel):
    model_config = _MODEL_CONFIG


class Flow(BaseModel):
    model_config = _MODEL_CONFIG

    elements: Optional[List[FlowEntry]] = None
    async_: Optional[bool] = Field(default=None, alias="async")


class AnnotatorFlow(BaseModel):
    model_config = _MODEL_CONFIG

    profile: Optional[str] = None
    flow: Flow
    id: Optional[str] = None
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    global_configurations: Optional[List[ConfigurationEntity]] = None
    uid: Optional[int] = None


class UnstructuredContainer(BaseModel):
    model_config = _MODEL_CONFIG

    text: Optional[str] = None
    id: Optional[str] = None
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    uid: Optional[int] = None


class AnalyticFlowBeanInput(BaseModel):
    """JSON input of ``run_pipeline_with_flow``."""

    model_config = _MODEL_CONFIG

    unstructured: Optional[List[UnstructuredContainer]] = None
    annotator_flows: Optional[List[AnnotatorFlow]] = Field(
        default=None, alias="annotatorFlows"
    )


class AcdProfile(BaseModel):
    model_config = _MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    published_date: Optional[str] = None
    publish: Optional[bool] = None
    version: Optional[str] = None
    cartridge_id: Optional[str] = None
    annotators: Optional[List[Annotator]] = None


class AcdFlow(BaseModel):
    model_config = _MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    published_date: Optional[str] = None
    publish: Optional[bool] = None
    version: Optional[str] = None
    cartridge_id: Optional[str] = None
    annotator_flows: Optional[List[AnnotatorFlow]] = None


class ServiceError(BaseModel):
    model_config = _MODEL_CONFIG

    code: Optional[int] = None
    message: Optional[str] = None
    level: Optional[str] = None
    description: Optional[str] = None
    more_info: Optional[str] = None
    correlation_id: Optional[str] = None
    artifact: Optional[str] = None
    href: Optional[str] = None


class AcdCartridges(BaseModel):
    model_config = _MODEL_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[int] = None
    status_location: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration: Optional[str] = None
    correlation_id: Optional[str] = None
    artifact_response_code: Optional[int] = None
    artifact_response: Optional[List[ServiceError]] = None


class DeployCartridgeResponse(BaseModel):
    model_config = _MODEL_CONFIG

    code: Optional[int] = None
    artifact_response: Optional[List[ServiceError]] = None


class ListStringWrapper(BaseModel):
    model_config = _MODEL_CONFIG

    data: Optional[List[str]] = None


class ServiceStatus(BaseModel):
    """Health of a service; ``service_state`` is ``OK`` when healthy."""

    model_config = _MODEL_CONFIG

    service_state: Optional[str] = None
    state_details: Optional[str] = None
