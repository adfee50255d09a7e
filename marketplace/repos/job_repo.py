from typing import Any, Dict, List, Optional

from sqlalchemy import and_, case, false, func, or_
from sqlalchemy.orm import Session

from marketplace.models.account import JobPosterProfile
from marketplace.models.job import Job
from marketplace.services.query_builder import LIKE_ESCAPE, FilterPlan, escape_like

JOB_COLUMNS = {
    "id": Job.id,
    "job_title": Job.job_title,
    "company_name": Job.company_name,
    "location": Job.location,
    "description": Job.description,
    "requirements": Job.requirements,
    "industry": Job.industry,
    "job_type": Job.job_type,
    "experience_level": Job.experience_level,
    "salary_range": Job.salary_range,
    "company_email": JobPosterProfile.email,
    "company_mobile": JobPosterProfile.mobile_number,
}

SEARCH_COLUMNS = [
    *Job.__table__.columns,
    JobPosterProfile.company_logo,
    JobPosterProfile.company_size,
    JobPosterProfile.email.label("company_email"),
    JobPosterProfile.mobile_number.label("company_mobile"),
]


def contains_term(column, term: Optional[str]):
    if not term:
        return false()
    return func.lower(column).like(f"%{escape_like(term)}%", escape=LIKE_ESCAPE)


def open_job_filters():
    """Open jobs that have not passed their expiry date."""
    return [
        Job.status == "open",
        or_(Job.expiry_date.is_(None), Job.expiry_date >= func.current_date()),
    ]


class JobRepo:
    def __init__(self, db: Session):
        self.db = db

    def _base_query(self, *columns):
        return (
            self.db.query(*columns)
            .select_from(Job)
            .outerjoin(JobPosterProfile, Job.user_id == JobPosterProfile.user_id)
        )

    def search(self, plan: FilterPlan, limit: int) -> List[Dict[str, Any]]:
        rows = (
            self._base_query(*SEARCH_COLUMNS)
            .filter(plan.where_clause())
            .order_by(Job.posted_date.desc(), Job.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def get_details(self, job_id: int) -> Optional[Dict[str, Any]]:
        row = (
            self._base_query(
                *Job.__table__.columns,
                JobPosterProfile.company_name.label("poster_company_name"),
                JobPosterProfile.company_logo,
                JobPosterProfile.company_size,
                JobPosterProfile.location.label("company_location"),
                JobPosterProfile.email.label("company_email"),
                JobPosterProfile.mobile_number.label("company_mobile"),
            )
            .filter(Job.id == job_id)
            .first()
        )
        return dict(row._mapping) if row else None

    def increment_views(self, job_id: int) -> None:
        self.db.query(Job).filter(Job.id == job_id).update(
            {Job.views_count: Job.views_count + 1}, synchronize_session=False
        )
        self.db.commit()

    def featured(self, limit: int) -> List[Dict[str, Any]]:
        rows = (
            self._base_query(*SEARCH_COLUMNS)
            .filter(*open_job_filters())
            .order_by(Job.posted_date.desc(), Job.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def industry_counts(self) -> List[Dict[str, Any]]:
        count = func.count().label("count")
        rows = (
            self.db.query(Job.industry, count)
            .filter(*open_job_filters())
            .filter(Job.industry.isnot(None))
            .group_by(Job.industry)
            .order_by(count.desc(), Job.industry)
            .all()
        )
        return [{"industry": industry, "count": n} for industry, n in rows]

    def count_open(self) -> int:
        return self.db.query(func.count(Job.id)).filter(*open_job_filters()).scalar() or 0

    def recommendations(
        self, job_title: Optional[str], location: Optional[str], limit: int
    ) -> List[Dict[str, Any]]:
        """
        Open jobs whose title or location contains the given terms,
        scored 90 (both), 70 (title), 50 (location), 30 (neither).
        """
        title_match = contains_term(Job.job_title, job_title)
        location_match = contains_term(Job.location, location)
        match_score = case(
            (and_(title_match, location_match), 90),
            (title_match, 70),
            (location_match, 50),
            else_=30,
        ).label("match_score")

        rows = (
            self._base_query(*SEARCH_COLUMNS, match_score)
            .filter(*open_job_filters())
            .filter(or_(title_match, location_match))
            .order_by(match_score.desc(), Job.posted_date.desc(), Job.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]
