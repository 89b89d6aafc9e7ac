"""Pytest configuration and fixtures."""
import sys
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import MagicMock

import pytest

# Make the src/ layout importable without an install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from citebib.models import BibliographicRecord  # noqa: E402


# Sample test data
@pytest.fixture
def sample_item() -> Dict[str, Any]:
    """Return one result item as Better BibTeX sends it."""
    return {
        "page": "1-10",
        "title": "A Study",
        "container-title": "Journal X",
        "author": [{"family": "Smith", "given": "J"}],
        "issued": {"date-parts": [[2020, 5, 1]]},
        "DOI": "10.1/xyz",
    }


@pytest.fixture
def sample_record(sample_item) -> BibliographicRecord:
    return BibliographicRecord.from_dict(sample_item)


def _make_response(payload: Any = None, text: str = None, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        response.json.return_value = payload
        response.text = repr(payload)
    else:
        response.json.side_effect = ValueError("Expecting value")
        response.text = text
    return response


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    return _make_response


@pytest.fixture
def mock_session() -> Generator[MagicMock, None, None]:
    """A session whose post() the test configures."""
    session = MagicMock()
    session.headers = {}
    yield session


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    """Keep local .env or shell settings out of the tests."""
    for name in ("CITEBIB_DOCUMENT", "CITEBIB_RPC_URL", "CITEBIB_LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
