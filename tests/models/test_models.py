import httpx

from whcs.models import (
    AcdCartridges,
    AcdProfile,
    AnalyticFlowBeanInput,
    DetailedResponse,
    Flow,
    Relationship,
)


class TestAcdModels:
    def test_profile_from_service_payload(self):
        profile = AcdProfile.model_validate(
            {
                "id": "p1",
                "annotators": [
                    {"name": "concept_detection", "parameters": {"expanded": ["true"]}}
                ],
                "unknownField": 1,
            }
        )

        assert profile.annotators is not None
        assert profile.annotators[0].name == "concept_detection"
        assert profile.model_extra == {"unknownField": 1}

    def test_flow_async_alias(self):
        flow = Flow.model_validate({"elements": [], "async": True})
        assert flow.async_ is True
        assert flow.model_dump(by_alias=True, exclude_none=True) == {
            "elements": [],
            "async": True,
        }

    def test_analytic_flow_bean_input_by_name_or_alias(self):
        by_name = AnalyticFlowBeanInput(annotator_flows=[])
        by_alias = AnalyticFlowBeanInput.model_validate({"annotatorFlows": []})
        assert by_name == by_alias
        assert by_name.model_dump(by_alias=True, exclude_none=True) == {
            "annotatorFlows": []
        }

    def test_cartridge_status(self):
        cartridge = AcdCartridges.model_validate(
            {"id": "c1", "status": "completed", "artifact_response": [{"code": 200}]}
        )
        assert cartridge.artifact_response is not None
        assert cartridge.artifact_response[0].code == 200


class TestEnums:
    def test_relationship_values(self):
        assert len(Relationship) == 26
        assert Relationship.ALLOWED_QUALIFIER.value == "allowedQualifier"
        assert Relationship("xr") is Relationship.XR


class TestDetailedResponse:
    def test_json(self):
        response = httpx.Response(200, json={"a": 1})
        detailed = DetailedResponse.from_response(response)
        assert detailed.result == {"a": 1}
        assert detailed.status == 200
        assert detailed.headers["content-type"] == "application/json"

    def test_text(self):
        response = httpx.Response(
            200, text="<ok/>", headers={"Content-Type": "application/xml"}
        )
        assert DetailedResponse.from_response(response).result == "<ok/>"

    def test_empty(self):
        assert DetailedResponse.from_response(httpx.Response(204)).result is None

    def test_parse(self):
        detailed = DetailedResponse(result={"id": "p1"}, status=200)
        assert detailed.parse(AcdProfile).id == "p1"
