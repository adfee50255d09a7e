from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, func

from marketplace.db.postgres.base import Base


class ManpowerProfile(Base):
    __tablename__ = "manpower_profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    # "self" or "consultant_managed"
    profile_type = Column(String(50), nullable=False, server_default="self")
    first_name = Column(String(100))
    last_name = Column(String(100))
    email = Column(String(255))
    mobile_number = Column(String(50))
    whatsapp_number = Column(String(50))
    national_id = Column(String(100))
    location = Column(String(255))
    job_title = Column(String(255))
    availability_status = Column(String(50))
    available_from = Column(Date)
    rate = Column(String(100))
    profile_description = Column(Text)
    profile_photo = Column(String(512))
    cv_path = Column(String(512))
    # JSON-encoded list, written by the profile editor
    certificates = Column(Text)
    modified_by = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_modified = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
