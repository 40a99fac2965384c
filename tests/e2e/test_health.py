"""End-to-end test for the health endpoint."""

from tests.harness import create_client_fixture

api = create_client_fixture()


def test_health(api):
    client, _ = api

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["git_sha"] == "unknown"
