import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from newsapi_kit import NetworkConfig

# Ensure local source package (src/newsapi_kit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean environment variables and keep stray .env files out of reach."""
    monkeypatch.delenv("NEWSAPI_URL", raising=False)
    monkeypatch.delenv("NEWSAPI_KEY", raising=False)
    monkeypatch.delenv("NEWSAPI_AUTH_MODE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_url() -> str:
    return "https://newsapi.org/v2/"


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def config(base_url: str, api_key: str) -> NetworkConfig:
    return NetworkConfig.for_news_api(api_key, base_url=base_url)
