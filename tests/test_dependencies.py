from marketplace.dependencies import (
    get_equipment_repo,
    get_equipment_search_service,
    get_job_repo,
    get_job_search_service,
    get_manpower_repo,
    get_manpower_search_service,
    get_universal_search_service,
)
from marketplace.repos.equipment_repo import EquipmentRepo
from marketplace.repos.job_repo import JobRepo
from marketplace.repos.manpower_repo import ManpowerRepo
from marketplace.services.equipment_search_service import EquipmentSearchService
from marketplace.services.job_search_service import JobSearchService
from marketplace.services.manpower_search_service import ManpowerSearchService
from marketplace.services.universal_search_service import UniversalSearchService


class FakeDB:
    pass


def test_repos_wrap_the_request_session():
    db = FakeDB()

    for factory, repo_cls in (
        (get_manpower_repo, ManpowerRepo),
        (get_job_repo, JobRepo),
        (get_equipment_repo, EquipmentRepo),
    ):
        repo = factory(db=db)
        assert isinstance(repo, repo_cls)
        assert repo.db is db


def test_search_services_get_their_repo():
    repo = object()

    assert isinstance(get_manpower_search_service(repo=repo), ManpowerSearchService)
    assert isinstance(get_equipment_search_service(repo=repo), EquipmentSearchService)


def test_job_search_service_gets_job_and_manpower_repos():
    jobs, manpower = object(), object()

    svc = get_job_search_service(repo=jobs, manpower_repo=manpower)

    assert isinstance(svc, JobSearchService)
    assert svc.repo is jobs
    assert svc.manpower_repo is manpower


def test_universal_search_service_gets_every_repo():
    manpower, equipment, jobs = object(), object(), object()

    svc = get_universal_search_service(
        manpower_repo=manpower, equipment_repo=equipment, job_repo=jobs
    )

    assert isinstance(svc, UniversalSearchService)
    assert svc.manpower_repo is manpower
    assert svc.equipment_repo is equipment
    assert svc.job_repo is jobs
