from .annotator_for_clinical_data import (
    AcdCartridges,
    AcdFlow,
    AcdProfile,
    AnalyticFlowBeanInput,
    Annotator,
    AnnotatorFlow,
    ConfigurationEntity,
    DeployCartridgeResponse,
    Flow,
    FlowEntry,
    HealthCheckAccept,
    HealthCheckFormat,
    ListStringWrapper,
    RunPipelineContentType,
    ServiceError,
    ServiceStatus,
    UnstructuredContainer,
)
from .errors import ApiError, MissingParametersError, WhcsError
from .insights_for_medical_literature import (
    AttributeEntry,
    Category,
    CorpusModel,
    DictionaryEntry,
    Ontologies,
    PossibleValues,
    Relationship,
)
from .response import DetailedResponse

__all__ = [
    "AcdCartridges",
    "AcdFlow",
    "AcdProfile",
    "AnalyticFlowBeanInput",
    "Annotator",
    "AnnotatorFlow",
    "ApiError",
    "AttributeEntry",
    "Category",
    "ConfigurationEntity",
    "CorpusModel",
    "DeployCartridgeResponse",
    "DetailedResponse",
    "DictionaryEntry",
    "Flow",
    "FlowEntry",
    "HealthCheckAccept",
    "HealthCheckFormat",
    "ListStringWrapper",
    "MissingParametersError",
    "Ontologies",
    "PossibleValues",
    "Relationship",
    "RunPipelineContentType",
    "ServiceError",
    "ServiceStatus",
    "UnstructuredContainer",
    "WhcsError",
]
