import platform

from whcs._utils._headers import get_header, merge_headers, sdk_headers
from whcs._utils.constants import HEADER_SDK_ANALYTICS, HEADER_USER_AGENT
from whcs._version import __version__


class TestMergeHeaders:
    def test_precedence(self):
        merged = merge_headers(
            {"Accept": "text/plain", "X-A": "default"},
            {"Accept": "application/json", "X-B": "computed"},
            {"X-B": "user"},
        )
        assert merged == {"Accept": "application/json", "X-A": "default", "X-B": "user"}

    def test_case_insensitive_winner_casing_kept(self):
        merged = merge_headers({"content-type": "a"}, None, {"Content-Type": "b"})
        assert merged == {"Content-Type": "b"}

    def test_none_means_no_opinion(self):
        merged = merge_headers({"Accept": "application/json"}, {"Accept": None}, None)
        assert merged == {"Accept": "application/json"}

    def test_undefined_header_stays_undefined(self):
        merged = merge_headers(None, {"Accept": None}, {})
        assert "Accept" not in merged
        assert merged == {}

    def test_values_are_strings(self):
        assert merge_headers({"X-Count": 3}) == {"X-Count": "3"}  # type: ignore[dict-item]

    def test_get_header(self):
        headers = {"Content-Type": "text/plain"}
        assert get_header(headers, "content-type") == "text/plain"
        assert get_header(headers, "accept") is None


class TestSdkHeaders:
    def test_identification_headers(self):
        headers = sdk_headers("insights_for_medical_literature", "v1", "getConcepts")

        assert headers[HEADER_SDK_ANALYTICS] == (
            "service_name=insights_for_medical_literature;"
            "service_version=v1;operation_id=getConcepts"
        )
        assert headers[HEADER_USER_AGENT].startswith(f"whcs-python-sdk/{__version__} ")
        assert platform.python_version() in headers[HEADER_USER_AGENT]
