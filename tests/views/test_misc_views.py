from aiohttp.test_utils import TestClient


class TestIndex:

    async def test_index(self, client: TestClient):
        response = await client.get("/")

        assert response.status == 200
        assert await response.text() == "GPS Tracker Server is Online!"

    async def test_index_database_down(self, unreachable_client: TestClient):
        response = await unreachable_client.get("/")

        assert response.status == 200
        assert await response.text() == "GPS Tracker Server is Online!"

    async def test_index_credentials_rejected(self, rejecting_client: TestClient):
        """Assert that a database refusing the server at startup does not stop it."""
        response = await rejecting_client.get("/")

        assert response.status == 200
        assert await response.text() == "GPS Tracker Server is Online!"


class TestMonitor:

    async def test_monitor(self, client: TestClient):
        response = await client.get("/monitor")
        page = await response.text()

        assert response.status == 200
        assert response.content_type == "text/html"
        assert "leaflet.js" in page
        assert "/api/history" in page
        assert "5000" in page


class TestUnknownRoute:

    async def test_not_found(self, client: TestClient):
        response = await client.get("/api/nothing")
        assert response.status == 404
