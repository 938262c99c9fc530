from ._executor import HttpRequestExecutor, RequestExecutor
from ._invoker import OperationInvoker, create_invoker
from .annotator_for_clinical_data_service import (
    ACD_DEFAULTS,
    AnnotatorForClinicalDataAcdV1,
)
from .insights_for_medical_literature_service import (
    IML_DEFAULTS,
    InsightsForMedicalLiteratureV1,
)

__all__ = [
    "ACD_DEFAULTS",
    "AnnotatorForClinicalDataAcdV1",
    "HttpRequestExecutor",
    "IML_DEFAULTS",
    "InsightsForMedicalLiteratureV1",
    "OperationInvoker",
    "RequestExecutor",
    "create_invoker",
]
