import pytest
from fastapi.testclient import TestClient

from apps.backend.main import app
from apps.backend.services.shopify_session import get_shopify_client


class FakeShopifyClient:
    """Records Admin API calls and replays canned responses in order."""

    def __init__(self, responses=None, rest=None):
        self.responses = list(responses or [])
        self.rest = rest or {}
        self.calls = []

    def graphql(self, query, variables=None):
        self.calls.append((query, variables))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, path, *, params=None):
        self.calls.append((path, params))
        return self.rest[path]


@pytest.fixture
def fake_client():
    return FakeShopifyClient()


@pytest.fixture
def api(fake_client):
    app.dependency_overrides[get_shopify_client] = lambda: fake_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
