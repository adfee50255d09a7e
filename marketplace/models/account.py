from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func, true

from marketplace.db.postgres.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    user_type = Column(String(50), nullable=False)
    is_active = Column(Boolean, nullable=False, server_default=true())
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class ConsultantProfile(Base):
    __tablename__ = "consultant_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(200))
    company_name = Column(String(200))
    email = Column(String(255))
    mobile_number = Column(String(50))
    whatsapp_number = Column(String(50))


class JobPosterProfile(Base):
    __tablename__ = "job_poster_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    company_name = Column(String(200))
    company_logo = Column(String(512))
    company_size = Column(String(50))
    location = Column(String(255))
    email = Column(String(255))
    mobile_number = Column(String(50))


class EquipmentOwnerProfile(Base):
    __tablename__ = "equipment_owner_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(200))
    company_name = Column(String(200))
    email = Column(String(255))
    mobile_number = Column(String(50))
    whatsapp_number = Column(String(50))
