"""
Pytest configuration and shared fixtures for string renderer tests.
"""
import pytest
from fastapi.testclient import TestClient

from string_renderer import config
from string_renderer.formatting import StringRenderer, parse_locale


@pytest.fixture(autouse=True)
def default_locale_en(monkeypatch):
    """Pin the default locale so tests do not depend on the environment"""
    monkeypatch.setattr(config, "DEFAULT_LOCALE", "en")


@pytest.fixture
def renderer():
    """Shared stateless renderer"""
    return StringRenderer()


@pytest.fixture
def en():
    """English locale"""
    return parse_locale("en")


@pytest.fixture
def tr():
    """Turkish locale"""
    return parse_locale("tr_TR")


@pytest.fixture
def client():
    """API test client with lifespan startup run"""
    from string_renderer.api.main import app

    with TestClient(app) as test_client:
        yield test_client
