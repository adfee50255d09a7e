from fastapi import Depends

from marketplace.db.postgres.base import get_db
from marketplace.repos.equipment_repo import EquipmentRepo
from marketplace.repos.job_repo import JobRepo
from marketplace.repos.manpower_repo import ManpowerRepo
from marketplace.services.equipment_search_service import EquipmentSearchService
from marketplace.services.job_search_service import JobSearchService
from marketplace.services.manpower_search_service import ManpowerSearchService
from marketplace.services.universal_search_service import UniversalSearchService


def get_manpower_repo(db=Depends(get_db)):
    return ManpowerRepo(db)


def get_job_repo(db=Depends(get_db)):
    return JobRepo(db)


def get_equipment_repo(db=Depends(get_db)):
    return EquipmentRepo(db)


def get_manpower_search_service(repo=Depends(get_manpower_repo)):
    return ManpowerSearchService(repo=repo)


def get_job_search_service(
    repo=Depends(get_job_repo),
    manpower_repo=Depends(get_manpower_repo),
):
    return JobSearchService(repo=repo, manpower_repo=manpower_repo)


def get_equipment_search_service(repo=Depends(get_equipment_repo)):
    return EquipmentSearchService(repo=repo)


def get_universal_search_service(
    manpower_repo=Depends(get_manpower_repo),
    equipment_repo=Depends(get_equipment_repo),
    job_repo=Depends(get_job_repo),
):
    return UniversalSearchService(
        manpower_repo=manpower_repo,
        equipment_repo=equipment_repo,
        job_repo=job_repo,
    )
