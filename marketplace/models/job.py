from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, func

from marketplace.db.postgres.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    job_title = Column(String(255), nullable=False)
    company_name = Column(String(200))
    location = Column(String(255))
    job_type = Column(String(50))
    experience_level = Column(String(50))
    salary_range = Column(String(100))
    description = Column(Text)
    requirements = Column(Text)
    industry = Column(String(100))
    status = Column(String(20), nullable=False, server_default="open")
    posted_date = Column(DateTime(timezone=True), server_default=func.now())
    expiry_date = Column(Date)
    views_count = Column(Integer, nullable=False, server_default="0")
