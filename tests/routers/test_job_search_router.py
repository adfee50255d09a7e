from fastapi import FastAPI
from fastapi.testclient import TestClient

from marketplace import dependencies as deps
from marketplace.exceptions import SearchUnavailableError
from marketplace.routers import job_search
from tests.conftest import FakeService


def make_app(fake_service: FakeService):
    app = FastAPI()
    app.dependency_overrides[deps.get_job_search_service] = lambda: fake_service
    app.include_router(job_search.router)
    return app


def test_search_passes_camel_case_query_params():
    service = FakeService(returns={"search": {"success": True, "jobs": [], "count": 0}})
    client = TestClient(make_app(service))

    res = client.get(
        "/job-search/search",
        params={
            "query": "developer",
            "location": "chennai",
            "industry": "IT",
            "jobType": "full-time",
            "experienceLevel": "mid",
        },
    )

    assert res.status_code == 200
    assert service.calls[0][2] == {
        "query": "developer",
        "location": "chennai",
        "industry": "IT",
        "job_type": "full-time",
        "experience_level": "mid",
    }


def test_static_routes_win_over_job_id():
    service = FakeService(
        returns={
            "get_featured": {"success": True, "jobs": [], "count": 0},
            "get_categories": {
                "success": True,
                "categories": [{"industry": "IT", "count": 3}],
                "totalJobs": 3,
                "timestamp": "2024-01-01T00:00:00+00:00",
            },
        }
    )
    client = TestClient(make_app(service))

    assert client.get("/job-search/featured/all").status_code == 200
    res = client.get("/job-search/categories/all")
    assert res.status_code == 200
    assert res.json()["totalJobs"] == 3
    assert [call[0] for call in service.calls] == ["get_featured", "get_categories"]


def test_job_details():
    job = {"id": 7, "job_title": "Driver", "views_count": 3}
    client = TestClient(make_app(FakeService(returns={"get_details": job})))

    res = client.get("/job-search/7")

    assert res.status_code == 200
    assert res.json() == {"success": True, "job": job}


def test_job_details_not_found():
    client = TestClient(make_app(FakeService(returns={"get_details": None})))
    assert client.get("/job-search/7").status_code == 404


def test_non_numeric_job_id_is_rejected():
    client = TestClient(make_app(FakeService()))
    assert client.get("/job-search/abc").status_code == 422


def test_store_outage_returns_503():
    client = TestClient(make_app(FakeService(error=SearchUnavailableError("down"))))
    assert client.get("/job-search/search").status_code == 503
    assert client.get("/job-search/7").status_code == 503


def test_recommendations_for_profile():
    recommendations = {
        "success": True,
        "jobs": [{"id": 6, "match_score": 90}],
        "count": 1,
        "profileData": {"job_title": "Site Engineer", "location": "Riyadh"},
    }
    service = FakeService(returns={"get_recommendations": recommendations})
    client = TestClient(make_app(service))

    res = client.get("/job-search/recommendations/8")

    assert res.status_code == 200
    assert res.json() == recommendations
    assert service.calls == [("get_recommendations", (8,), {})]


def test_recommendations_for_unknown_profile_returns_404():
    client = TestClient(make_app(FakeService(returns={"get_recommendations": None})))

    res = client.get("/job-search/recommendations/999")

    assert res.status_code == 404
    assert res.json()["detail"] == "Manpower profile not found"


def test_recommendations_store_outage_returns_503():
    client = TestClient(make_app(FakeService(error=SearchUnavailableError("down"))))
    assert client.get("/job-search/recommendations/8").status_code == 503
