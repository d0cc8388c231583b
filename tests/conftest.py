"""
pytest configuration and fixtures for the client test suite
HTTP traffic is intercepted with pytest-httpx; no backend is needed.
"""

import pytest
import pytest_asyncio

from services.api_service import ApiService, set_api_service
from utils import auth
from utils.auth import AuthSession

BASE_URL = "http://test/api"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch, tmp_path):
    """Fresh global API client and session per test, token file in tmp_path"""
    set_api_service(None)
    monkeypatch.setattr(auth, "_auth_session", AuthSession(token_file=tmp_path / "stored-token"))
    yield
    set_api_service(None)


@pytest.fixture
def session(tmp_path):
    return AuthSession(token="test-token", token_file=tmp_path / "token")


@pytest_asyncio.fixture
async def api(session):
    service = ApiService(base_url=BASE_URL, session=session)
    yield service
    await service.close()
