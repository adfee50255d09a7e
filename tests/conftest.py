import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.db.postgres.base import Base
from marketplace.models.account import (
    ConsultantProfile,
    EquipmentOwnerProfile,
    JobPosterProfile,
    User,
)
from marketplace.models.equipment import Equipment
from marketplace.models.job import Job
from marketplace.models.manpower_profile import ManpowerProfile


@pytest.fixture
def db_session():
    """
    In-memory SQLite session with the marketplace schema.
    One shared connection so every session sees the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def marketplace_db(db_session):
    seed_marketplace(db_session)
    return db_session


def at(day: int, month: int = 1) -> datetime.datetime:
    return datetime.datetime(2024, month, day, 9, 0, 0)


def seed_marketplace(session):
    """
    Small marketplace shared by repo, service and end-to-end tests.

    Manpower 4 belongs to a deactivated account, job 3 is closed, job 4 has
    expired and equipment 3 is inactive: none of them may ever be searched.
    """
    session.add_all(
        [
            User(id=1, email="arun@example.com", first_name="Arun", last_name="K", user_type="job_seeker"),
            User(id=2, email="gone@example.com", first_name="Gone", last_name="User", user_type="job_seeker", is_active=False),
            User(id=3, email="consult@example.com", first_name="Cora", last_name="Lee", user_type="consultant"),
            User(id=4, email="hr@acme.example", first_name="Hana", last_name="R", user_type="job_poster"),
            User(id=5, email="owner@example.com", first_name="Omar", last_name="S", user_type="equipment_owner"),
        ]
    )
    session.flush()
    session.add_all(
        [
            ConsultantProfile(user_id=3, name="Cora Lee", company_name="Lee Staffing", email="consult@example.com", mobile_number="+971 222", whatsapp_number="+971 222"),
            JobPosterProfile(user_id=4, company_name="Acme Corp", company_logo="logo.png", company_size="50-200", location="Riyadh", email="hr@acme.example", mobile_number="+966 111"),
            EquipmentOwnerProfile(user_id=5, name="Omar S", company_name="Acme Rentals", email="owner@example.com", mobile_number="+966 777", whatsapp_number="+966 777"),
        ]
    )
    session.add_all(
        [
            ManpowerProfile(
                id=1, user_id=1, first_name="Arun", last_name="Kumar",
                job_title="Backend Engineer", location="Chennai, India",
                availability_status="available", profile_description="Builds APIs",
                cv_path="cv/1.pdf", certificates='["aws", "pmp"]', created_at=at(1),
            ),
            ManpowerProfile(
                id=2, first_name="Bela", last_name="Nair",
                job_title="Senior Consultant", location="Bangalore",
                availability_status="available",
                profile_description="Former developer turned consultant",
                created_at=at(2),
            ),
            ManpowerProfile(
                id=3, first_name="Carl", last_name="Diaz", job_title="Welder",
                location="Riyadh, Saudi Arabia", availability_status="busy",
                certificates="not json", created_at=at(3),
            ),
            ManpowerProfile(
                id=4, user_id=2, first_name="Dev", last_name="Gone",
                job_title="Frontend Developer", location="Olaya, Riyadh",
                availability_status="available", created_at=at(4),
            ),
            ManpowerProfile(
                id=5, user_id=3, profile_type="consultant_managed",
                first_name="Eli", last_name="Park", job_title="Crane Operator",
                location="Al Khobar", availability_status="available",
                modified_by=3, created_at=at(5),
            ),
            ManpowerProfile(
                id=6, first_name="Faye", last_name="Ito", job_title="Site Engineer",
                location="Dubai Marina", availability_status="available",
                profile_description="Tower cranes", created_at=at(6),
            ),
            ManpowerProfile(
                id=7, first_name="Gus", last_name="Roy", job_title="Welder",
                location="Jubail", availability_status="available",
                certificates='["coded welder"]', created_at=at(7),
            ),
        ]
    )
    session.add_all(
        [
            Job(
                id=1, user_id=4, job_title="Backend Developer", company_name="Acme Corp",
                location="Riyadh", job_type="full-time", experience_level="mid",
                description="Python services", industry="IT", posted_date=at(1, 2),
            ),
            Job(
                id=2, job_title="Site Engineer", company_name="BuildCo",
                location="Olaya District", job_type="contract", experience_level="senior",
                description="High rise projects", industry="Construction",
                posted_date=at(3, 2), expiry_date=datetime.date(2099, 1, 1),
            ),
            Job(
                id=3, job_title="Welder", company_name="BuildCo", location="Riyadh",
                status="closed", industry="Construction", posted_date=at(5, 2),
            ),
            Job(
                id=4, job_title="Driver", company_name="MoveIt", location="Al Riyadh",
                industry="Logistics", posted_date=at(2, 2),
                expiry_date=datetime.date(2000, 1, 1),
            ),
            Job(
                id=5, job_title="Quantity Surveyor", company_name="BuildCo",
                location="Jeddah", job_type="full-time", experience_level="senior",
                industry="Construction", posted_date=at(4, 2),
            ),
        ]
    )
    session.add_all(
        [
            Equipment(
                id=1, user_id=5, equipment_name="Mobile Crane", equipment_type="Crane",
                availability="available", location="Dammam", contact_person="Omar",
                contact_number="+966 777", description="Telescopic boom",
                equipment_images='["crane.jpg"]',
                equipment_documents='["reg.pdf", "insurance.pdf"]',
                created_at=at(1, 3),
            ),
            Equipment(
                id=2, equipment_name="Forklift", equipment_type="Forklift",
                availability="on-hire", location="Al Khobar",
                equipment_documents="{bad", created_at=at(2, 3),
            ),
            Equipment(
                id=3, equipment_name="Excavator", equipment_type="Earthmoving",
                availability="available", location="Dammam", is_active=False,
                created_at=at(3, 3),
            ),
        ]
    )
    session.commit()


class FakeSearchRepo:
    """
    Repo stand-in that records the filter plan it was asked to run.
    """

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.plans = []
        self.limits = []

    def search(self, plan, limit):
        self.plans.append(plan)
        self.limits.append(limit)
        if self.error:
            raise self.error
        return [dict(row) for row in self.rows]


def store_down():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


class FakeService:
    """
    Minimal service stand-in for router tests. Every method returns the
    configured value, or raises the configured error.
    """

    def __init__(self, returns=None, error=None):
        self.returns = returns or {}
        self.error = error
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            if self.error:
                raise self.error
            return self.returns.get(name)

        return method
