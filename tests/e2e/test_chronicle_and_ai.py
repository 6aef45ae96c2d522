"""End-to-end tests for the chronicle and AI drafting routes."""

from uuid import uuid4

from dishka import AsyncContainer
from fastapi.testclient import TestClient
import httpx
import pytest
import pytest_asyncio

from nexus.adapter.error import LanguageModelError
from nexus.domain.service import JWTService, LanguageModelClient
from nexus.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over the mock container."""
    return TestClient(create_app(build_test_container()))


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def async_client(container: AsyncContainer):
    """Async client over the ASGI app, sharing the fixture's container."""
    transport = httpx.ASGITransport(app=create_app(container))
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client


def _login(client: TestClient, code: str = "ada") -> dict[str, str]:
    response = client.get(
        "/auth/callback", params={"code": code}, follow_redirects=False
    )
    for header in response.headers.get_list("set-cookie"):
        if header.startswith("auth_token="):
            return {"Cookie": header.split(";", 1)[0]}
    raise AssertionError("login did not set the auth cookie")


class TestChronicleRoutes:
    """End-to-end tests for /chronicle."""

    def test_requires_authentication(self, client):
        assert client.get("/chronicle").status_code == 401
        assert (
            client.get("/chronicle", headers={"Cookie": "auth_token=garbage"}).status_code
            == 401
        )

    def test_entry_lifecycle(self, client):
        """Create, move and delete an entry."""
        # Arrange
        auth = _login(client)

        # Act
        created = client.post(
            "/chronicle/entries",
            json={
                "type": "project",
                "title": "Analytical engine notes",
                "start_date": "1842-10",
                "canvas_col": "work",
            },
            headers=auth,
        )
        entry_id = created.json()["entry"]["id"]
        moved = client.patch(
            f"/chronicle/entries/{entry_id}/dates",
            json={"start_date": "1843-01", "end_date": "1843-09"},
            headers=auth,
        )
        loaded = client.get("/chronicle", headers=auth).json()
        deleted = client.delete(f"/chronicle/entries/{entry_id}", headers=auth)
        after = client.get("/chronicle", headers=auth).json()

        # Assert
        assert created.status_code == 200
        assert created.json()["entry"]["color"] == "#888888"
        assert moved.status_code == 204
        assert loaded["entries"][0]["start_date"] == "1843-01"
        assert loaded["entries"][0]["end_date"] == "1843-09"
        assert deleted.status_code == 204
        assert after["entries"] == []

    def test_malformed_dates_are_rejected(self, client):
        auth = _login(client)

        response = client.patch(
            f"/chronicle/entries/{uuid4()}/dates",
            json={"start_date": "1843"},
            headers=auth,
        )

        assert response.status_code == 422

    def test_invalid_entry_is_400(self, client):
        auth = _login(client)

        response = client.post(
            "/chronicle/entries",
            json={
                "type": "project",
                "title": "Bad month",
                "start_date": "1842-13",
                "canvas_col": "work",
            },
            headers=auth,
        )

        assert response.status_code == 400

    def test_other_users_entry_is_404(self, client):
        owner = _login(client, "ada")
        stranger = _login(client, "grace")
        created = client.post(
            "/chronicle/entries",
            json={
                "type": "project",
                "title": "Private",
                "start_date": "1842-10",
                "canvas_col": "work",
            },
            headers=owner,
        )

        response = client.delete(
            f"/chronicle/entries/{created.json()['entry']['id']}", headers=stranger
        )

        assert response.status_code == 404

    def test_place_partial_update(self, client):
        auth = _login(client)
        created = client.post(
            "/chronicle/places",
            json={"title": "London", "start_date": "1835-07"},
            headers=auth,
        ).json()["place"]

        updated = client.post(
            "/chronicle/places",
            json={"id": created["id"], "end_date": "1852-11"},
            headers=auth,
        )

        assert updated.status_code == 200
        assert updated.json()["place"]["title"] == "London"
        assert updated.json()["place"]["end_date"] == "1852-11"

    def test_annotating_unknown_contact_is_404(self, client):
        auth = _login(client)

        response = client.patch(
            f"/chronicle/contacts/{uuid4()}",
            json={"show_on_chronicle": True, "met_date": "1833-06"},
            headers=auth,
        )

        assert response.status_code == 404


class TestAIRoutes:
    """End-to-end tests for /api/ai."""

    def test_synergy_requires_authentication(self, client):
        response = client.post(
            "/api/ai/synergy", json={"myProfile": "Ada", "contactInfo": "Grace"}
        )

        assert response.status_code == 401

    def test_synergy_returns_camel_case_sections(self, client):
        auth = _login(client)

        response = client.post(
            "/api/ai/synergy",
            json={"myProfile": "Ada", "contactInfo": "Grace"},
            headers=auth,
        )

        assert response.status_code == 200
        assert response.json() == {
            "helpThem": "A",
            "helpMe": "B",
            "commonGround": "C",
        }

    def test_summarize_returns_summary_fields(self, client):
        auth = _login(client)

        response = client.post(
            "/api/ai/summarize",
            json={"contactInfo": "Grace Hopper", "urls": []},
            headers=auth,
        )

        assert response.status_code == 200
        assert set(response.json()) == {"summary", "oneliner"}


class TestAIRouteFailures:
    """Language model failures surface as 500 with a JSON error body."""

    @staticmethod
    async def _failing_model(container: AsyncContainer, message: str):
        async with container() as request_container:
            language_model = await request_container.get(LanguageModelClient)
            language_model.error = LanguageModelError(message)
            jwt_service = await request_container.get(JWTService)
            token = jwt_service.create_token(str(uuid4()), "ada@example.com")
        return {"Cookie": f"auth_token={token}"}

    @pytest.mark.asyncio
    async def test_synergy_upstream_error_returns_500(self, async_client, container):
        # Arrange
        auth = await self._failing_model(container, "Anthropic API error 500: boom")

        # Act
        response = await async_client.post(
            "/api/ai/synergy",
            json={"myProfile": "Ada", "contactInfo": "Grace"},
            headers=auth,
        )

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "Anthropic API error 500: boom"}

    @pytest.mark.asyncio
    async def test_synergy_without_api_key_returns_500(self, async_client, container):
        auth = await self._failing_model(container, "ANTHROPIC_API_KEY not configured")

        response = await async_client.post(
            "/api/ai/synergy",
            json={"myProfile": "Ada", "contactInfo": "Grace"},
            headers=auth,
        )

        assert response.status_code == 500
        assert response.json() == {"error": "ANTHROPIC_API_KEY not configured"}

    @pytest.mark.asyncio
    async def test_summarize_upstream_error_returns_500(self, async_client, container):
        auth = await self._failing_model(container, "Anthropic API error 529: overloaded")

        response = await async_client.post(
            "/api/ai/summarize",
            json={"contactInfo": "Grace Hopper", "urls": []},
            headers=auth,
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Anthropic API error 529: overloaded"}
