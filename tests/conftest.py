import os
import sys
from pathlib import Path
from typing import Any, List

import pytest
from click.testing import CliRunner

# Ensure local source package (src/whcs) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from whcs._utils._request_spec import RequestSpec  # noqa: E402
from whcs.models.response import DetailedResponse  # noqa: E402

_ENV_PREFIXES = (
    "ANNOTATOR_FOR_CLINICAL_DATA_ACD_",
    "INSIGHTS_FOR_MEDICAL_LITERATURE_",
    "IBM_CREDENTIALS_FILE",
    "WHCS_",
)


class RecordingExecutor:
    """Executor double recording every request spec it receives."""

    def __init__(self, result: Any = None, status: int = 200) -> None:
        self.requests: List[RequestSpec] = []
        self.result = result
        self.status = status

    async def execute(self, spec: RequestSpec) -> DetailedResponse:
        self.requests.append(spec)
        return DetailedResponse(result=self.result, status=self.status)

    @property
    def last(self) -> RequestSpec:
        assert self.requests, "No request was executed"
        return self.requests[-1]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean service environment variables and keep credentials files out."""
    for key in list(os.environ):
        if key.startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def version() -> str:
    return "2023-01-01"


@pytest.fixture
def service_url() -> str:
    return "https://test.example.com/api"


@pytest.fixture
def secret() -> str:
    return "secret_access_token"


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor(result={"ok": True})


@pytest.fixture
def executor_factory():
    return RecordingExecutor
