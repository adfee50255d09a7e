from typing import Any, Dict, List, Optional

from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session, aliased

from marketplace.models.account import ConsultantProfile, User
from marketplace.models.manpower_profile import ManpowerProfile
from marketplace.services.query_builder import FilterPlan

# Field name -> column, as understood by the query builder
MANPOWER_COLUMNS = {
    "id": ManpowerProfile.id,
    "first_name": ManpowerProfile.first_name,
    "last_name": ManpowerProfile.last_name,
    "full_name": ManpowerProfile.first_name + " " + ManpowerProfile.last_name,
    "email": ManpowerProfile.email,
    "mobile_number": ManpowerProfile.mobile_number,
    "whatsapp_number": ManpowerProfile.whatsapp_number,
    "national_id": ManpowerProfile.national_id,
    "location": ManpowerProfile.location,
    "job_title": ManpowerProfile.job_title,
    "profile_description": ManpowerProfile.profile_description,
    "rate": ManpowerProfile.rate,
    "availability_status": ManpowerProfile.availability_status,
}

SEARCH_COLUMNS = [
    ManpowerProfile.id,
    ManpowerProfile.user_id,
    ManpowerProfile.profile_type,
    ManpowerProfile.first_name,
    ManpowerProfile.last_name,
    ManpowerProfile.email,
    ManpowerProfile.mobile_number,
    ManpowerProfile.whatsapp_number,
    ManpowerProfile.location,
    ManpowerProfile.job_title,
    ManpowerProfile.availability_status,
    ManpowerProfile.available_from,
    ManpowerProfile.rate,
    ManpowerProfile.profile_description,
    ManpowerProfile.profile_photo,
    ManpowerProfile.cv_path,
    ManpowerProfile.certificates,
    ManpowerProfile.created_at,
    ManpowerProfile.last_modified,
    User.user_type,
    ConsultantProfile.name.label("consultant_name"),
    ConsultantProfile.company_name.label("consultant_company"),
]


def active_account_filter():
    """Profiles without an account, or whose account is active."""
    return or_(User.id.is_(None), User.is_active.is_(True))


class ManpowerRepo:
    def __init__(self, db: Session):
        self.db = db

    def _base_query(self, *columns):
        return (
            self.db.query(*columns)
            .select_from(ManpowerProfile)
            .outerjoin(User, ManpowerProfile.user_id == User.id)
            .outerjoin(ConsultantProfile, ManpowerProfile.user_id == ConsultantProfile.user_id)
        )

    def search(self, plan: FilterPlan, limit: int) -> List[Dict[str, Any]]:
        rows = (
            self._base_query(*SEARCH_COLUMNS)
            .filter(plan.where_clause())
            .order_by(ManpowerProfile.created_at.desc(), ManpowerProfile.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def get_details(self, profile_id: int) -> Optional[Dict[str, Any]]:
        modifier = aliased(User)
        row = (
            self.db.query(
                *ManpowerProfile.__table__.columns,
                User.is_active,
                User.user_type,
                modifier.first_name.label("modifier_first_name"),
                modifier.last_name.label("modifier_last_name"),
                modifier.user_type.label("modifier_type"),
                ConsultantProfile.name.label("consultant_name"),
                ConsultantProfile.company_name.label("consultant_company"),
                ConsultantProfile.email.label("consultant_email"),
                ConsultantProfile.mobile_number.label("consultant_mobile"),
                ConsultantProfile.whatsapp_number.label("consultant_whatsapp"),
            )
            .select_from(ManpowerProfile)
            .outerjoin(User, ManpowerProfile.user_id == User.id)
            .outerjoin(modifier, ManpowerProfile.modified_by == modifier.id)
            .outerjoin(ConsultantProfile, ManpowerProfile.user_id == ConsultantProfile.user_id)
            .filter(ManpowerProfile.id == profile_id)
            .first()
        )
        return dict(row._mapping) if row else None

    def job_title_counts(self, limit: int) -> List[Dict[str, Any]]:
        title = func.trim(ManpowerProfile.job_title)
        count = func.count().label("count")
        rows = (
            self.db.query(title.label("job_title"), count)
            .filter(ManpowerProfile.job_title.isnot(None))
            .filter(title != "")
            .group_by(title)
            .order_by(count.desc(), title)
            .limit(limit)
            .all()
        )
        return [{"name": job_title, "count": n} for job_title, n in rows]

    def stats(self) -> Dict[str, int]:
        row = self.db.query(
            func.count(ManpowerProfile.id),
            func.count(ManpowerProfile.cv_path),
            func.sum(case((ManpowerProfile.availability_status == "available", 1), else_=0)),
            func.count(func.distinct(ManpowerProfile.job_title)),
        ).one()
        total, with_cv, available, unique_titles = row
        return {
            "totalManpower": total or 0,
            "manpowerWithCV": with_cv or 0,
            "availableManpower": available or 0,
            "uniqueJobTitles": unique_titles or 0,
        }

    def featured(self, limit: int) -> List[Dict[str, Any]]:
        rows = (
            self._base_query(*SEARCH_COLUMNS)
            .filter(ManpowerProfile.job_title.isnot(None))
            .filter(ManpowerProfile.job_title != "")
            .filter(ManpowerProfile.availability_status == "available")
            .order_by(ManpowerProfile.created_at.desc(), ManpowerProfile.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def get_match_terms(self, profile_id: int) -> Optional[Dict[str, Any]]:
        """Job title and location used to recommend jobs to a profile."""
        row = (
            self.db.query(ManpowerProfile.job_title, ManpowerProfile.location)
            .filter(ManpowerProfile.id == profile_id)
            .first()
        )
        return dict(row._mapping) if row else None
