"""API tests: app startup/shutdown between clients leaves the test database usable."""
import pytest

pytestmark = pytest.mark.api


def test_first_client_creates_location(client):
    """First client: create works after startup."""
    r = client.post("/api/locations", json={"name": "Lifecycle One", "latitude": 1, "longitude": 1})
    assert r.status_code == 201


def test_second_client_still_has_database(client):
    """Second client after the first one's shutdown: the database and table still exist."""
    r = client.post("/api/locations", json={"name": "Lifecycle Two", "latitude": 2, "longitude": 2})
    assert r.status_code == 201
    names = [loc["name"] for loc in client.get("/api/locations").json()]
    assert "lifecycle two" in names
