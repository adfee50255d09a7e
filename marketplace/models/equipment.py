from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
    true,
)

from marketplace.db.postgres.base import Base


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    equipment_name = Column(String(255), nullable=False)
    equipment_type = Column(String(100))
    # "available" or "on-hire"
    availability = Column(String(50))
    location = Column(String(255))
    contact_person = Column(String(200))
    contact_number = Column(String(50))
    contact_email = Column(String(255))
    description = Column(Text)
    # JSON-encoded lists of stored file references
    equipment_images = Column(Text)
    equipment_documents = Column(Text)
    is_active = Column(Boolean, nullable=False, server_default=true())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
