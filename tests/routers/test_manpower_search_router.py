from fastapi import FastAPI
from fastapi.testclient import TestClient

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.routers import manpower_search
from marketplace.security import API_KEY_NAME, get_settings
from marketplace.settings import Settings
from tests.conftest import FakeService


def make_app(fake_service: FakeService, api_key: str = "secret"):
    app = FastAPI()
    app.dependency_overrides[deps.get_manpower_search_service] = lambda: fake_service
    app.dependency_overrides[get_settings] = lambda: Settings(MARKETPLACE_API_KEY=api_key)
    app.include_router(manpower_search.router)
    return app


def test_search_maps_body_to_service_arguments():
    service = FakeService(returns={"search": {"success": True, "manpower": [], "count": 0}})
    client = TestClient(make_app(service))

    res = client.get(
        "/manpower-search/search",
        json={"jobTitle": "Welder", "location": "Riyadh", "availabilityStatus": "all"},
    )

    assert res.status_code == 200
    assert res.json()["count"] == 0
    name, _args, kwargs = service.calls[0]
    assert name == "search"
    assert kwargs == {
        "job_title": "Welder",
        "location": "Riyadh",
        "availability_status": "all",
    }


def test_search_accepts_empty_body_fields():
    service = FakeService(returns={"search": {"success": True, "manpower": [], "count": 0}})
    client = TestClient(make_app(service))

    res = client.post("/manpower-search/search", json={})

    assert res.status_code == 200
    assert service.calls[0][2]["job_title"] is None


def test_store_outage_returns_503():
    client = TestClient(make_app(FakeService(error=SearchUnavailableError("down"))))

    res = client.post("/manpower-search/search", json={"jobTitle": "welder"})

    assert res.status_code == 503


def test_unexpected_error_returns_500():
    client = TestClient(make_app(FakeService(error=RuntimeError("boom"))))

    res = client.get("/manpower-search/stats")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve statistics"


def test_profile_not_found_returns_404():
    client = TestClient(make_app(FakeService(returns={"get_details": None})))

    res = client.get("/manpower-search/details/42")

    assert res.status_code == 404


def test_profile_found():
    profile = {"id": 42, "job_title": "Welder", "certificates": []}
    client = TestClient(make_app(FakeService(returns={"get_details": profile})))

    res = client.get("/manpower-search/details/42")

    assert res.status_code == 200
    assert res.json() == {"success": True, "profile": profile}


def test_categories_response():
    categories = {
        "success": True,
        "categories": [{"name": "Welder", "count": 2}],
        "totalCategories": 1,
        "totalProfessionals": 2,
        "timestamp": "2024-01-01T00:00:00+00:00",
        "cached": True,
        "cacheAge": "12s",
    }
    client = TestClient(make_app(FakeService(returns={"get_categories": categories})))

    res = client.get("/manpower-search/categories")

    assert res.status_code == 200
    assert res.json() == categories


def test_refresh_requires_api_key():
    service = FakeService()
    client = TestClient(make_app(service))

    res = client.get("/manpower-search/categories/refresh")
    assert res.status_code == 403
    assert service.calls == []

    res = client.get(
        "/manpower-search/categories/refresh", headers={API_KEY_NAME: "secret"}
    )
    assert res.status_code == 200
    assert service.calls[0][0] == "refresh_categories"


def test_refresh_refused_when_no_key_configured():
    client = TestClient(make_app(FakeService(), api_key=""))

    res = client.get("/manpower-search/categories/refresh", headers={API_KEY_NAME: ""})

    assert res.status_code == 403
