import pytest
from fastapi.testclient import TestClient

from services.echo.main import app


@pytest.fixture
def client():
    """
    TestClient with the lifespan running, so app.state is populated.
    """
    with TestClient(app) as test_client:
        yield test_client
