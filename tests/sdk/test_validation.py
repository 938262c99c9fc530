import pytest

from whcs._utils._validation import get_missing_params, validate_params
from whcs.models.errors import MissingParametersError


class TestGetMissingParams:
    def test_all_present(self):
        assert get_missing_params({"corpus": "medline", "id": "1"}, ["corpus", "id"]) == []

    def test_absent_and_none_are_missing(self):
        missing = get_missing_params({"corpus": None}, ["corpus", "document_id"])
        assert missing == ["corpus", "document_id"]

    def test_falsy_values_are_present(self):
        params = {"return_analyzed_text": False, "min_score": 0, "query": ""}
        assert get_missing_params(params, list(params)) == []

    def test_none_params_reports_everything(self):
        assert get_missing_params(None, ["a", "b"]) == ["a", "b"]

    def test_no_required_names(self):
        assert get_missing_params(None, []) == []

    def test_order_follows_required_list(self):
        assert get_missing_params({}, ["z", "a", "m"]) == ["z", "a", "m"]


class TestValidateParams:
    def test_passes_silently(self):
        validate_params({"id": "x"}, ["id"])

    def test_reports_every_missing_name(self):
        with pytest.raises(MissingParametersError) as exc_info:
            validate_params({"flow_id": "f"}, ["flow_id", "return_analyzed_text", "body"])

        assert exc_info.value.missing == ["return_analyzed_text", "body"]
        assert (
            str(exc_info.value)
            == "Missing required parameters: return_analyzed_text, body"
        )

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_params(None, ["version"])
