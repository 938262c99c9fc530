import pytest

from whcs._services._acd_operations import ACD_OPERATIONS
from whcs._services._iml_operations import IML_OPERATIONS
from whcs._utils._operation import (
    OperationSpec,
    ParameterRole,
    ParameterSpec,
    body,
    body_field,
    header,
    path,
    query,
)


class TestOperationSpec:
    def test_wire_name_defaults_to_name(self):
        assert query("verbose").wire_name == "verbose"
        assert query("limit", "_limit").wire_name == "_limit"

    def test_operation_id_defaults_to_camel_case(self):
        op = OperationSpec("get_flows_by_id", "GET", "/v1/flows/{id}", (path("id"),))
        assert op.operation_id == "getFlowsById"

    def test_required_names_in_declaration_order(self):
        op = OperationSpec(
            "op",
            "POST",
            "/v1/{b}/{a}",
            (path("b"), query("q", required=True), path("a"), query("x")),
        )
        assert op.required_names == ("b", "q", "a")

    def test_placeholder_without_path_parameter(self):
        with pytest.raises(ValueError):
            OperationSpec("op", "GET", "/v1/corpora/{corpus}")

    def test_path_parameter_without_placeholder(self):
        with pytest.raises(ValueError):
            OperationSpec("op", "GET", "/v1/corpora", (path("corpus"),))

    def test_duplicate_names(self):
        with pytest.raises(ValueError):
            OperationSpec("op", "GET", "/v1", (query("a"), body_field("a")))

    def test_body_with_body_fields(self):
        with pytest.raises(ValueError):
            OperationSpec("op", "POST", "/v1", (body("body"), body_field("a")))

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            OperationSpec("op", "PATCH", "/v1")

    def test_header_parameters_are_never_required(self):
        with pytest.raises(ValueError):
            ParameterSpec("accept", ParameterRole.HEADER, required=True)

    def test_header_shorthand(self):
        param = header("content_type", "Content-Type")
        assert param.role is ParameterRole.HEADER
        assert param.key == "Content-Type"
        assert not param.required


class TestOperationTables:
    @pytest.mark.parametrize(
        "table, count", [(ACD_OPERATIONS, 21), (IML_OPERATIONS, 24)]
    )
    def test_table_sizes_and_unique_names(self, table, count):
        names = [op.name for op in table]
        assert len(names) == count
        assert len(set(names)) == count

    @pytest.mark.parametrize("op", ACD_OPERATIONS + IML_OPERATIONS, ids=lambda op: op.name)
    def test_every_operation_is_versioned(self, op):
        assert op.versioned

    def test_acd_operation_ids(self):
        ids = {op.name: op.operation_id for op in ACD_OPERATIONS}
        assert ids["cartridges_post_multipart"] == "cartridgesPostMultipart"
        assert ids["delete_user_specific_artifacts"] == "deleteUserSpecificArtifacts"

    def test_run_pipeline_with_flow_requirements(self):
        op = next(op for op in ACD_OPERATIONS if op.name == "run_pipeline_with_flow")
        assert op.required_names == (
            "flow_id",
            "return_analyzed_text",
            "analytic_flow_bean_input",
        )

    def test_iml_required_parameters(self):
        required = {op.name: op.required_names for op in IML_OPERATIONS}
        assert required["get_search_matches"] == ("corpus", "document_id", "min_score")
        assert required["get_similar_concepts"] == (
            "corpus",
            "name_or_id",
            "return_ontologies",
        )
        assert required["search"] == ("corpus", "body")
        assert required["get_corpora_config"] == ()
