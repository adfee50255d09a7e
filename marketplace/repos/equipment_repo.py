from typing import Any, Dict, List

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from marketplace.models.account import EquipmentOwnerProfile
from marketplace.models.equipment import Equipment
from marketplace.services.query_builder import FilterPlan

EQUIPMENT_COLUMNS = {
    "id": Equipment.id,
    "equipment_name": Equipment.equipment_name,
    "equipment_type": Equipment.equipment_type,
    "availability": Equipment.availability,
    "location": Equipment.location,
    "contact_person": Equipment.contact_person,
    "contact_number": Equipment.contact_number,
    "contact_email": Equipment.contact_email,
    "description": Equipment.description,
    "owner_name": EquipmentOwnerProfile.name,
    "owner_email": EquipmentOwnerProfile.email,
    "owner_mobile": EquipmentOwnerProfile.mobile_number,
    "owner_company": EquipmentOwnerProfile.company_name,
}

SEARCH_COLUMNS = [
    Equipment.id,
    Equipment.user_id,
    Equipment.equipment_name,
    Equipment.equipment_type,
    Equipment.availability,
    Equipment.location,
    Equipment.contact_person,
    Equipment.contact_number,
    Equipment.contact_email,
    Equipment.description,
    Equipment.equipment_images,
    Equipment.equipment_documents,
    Equipment.created_at,
    EquipmentOwnerProfile.name.label("owner_name"),
    EquipmentOwnerProfile.email.label("owner_email"),
    EquipmentOwnerProfile.mobile_number.label("owner_mobile"),
    EquipmentOwnerProfile.whatsapp_number.label("owner_whatsapp"),
    EquipmentOwnerProfile.company_name.label("owner_company"),
]


def active_equipment_filter():
    return Equipment.is_active.is_(True)


class EquipmentRepo:
    def __init__(self, db: Session):
        self.db = db

    def search(self, plan: FilterPlan, limit: int) -> List[Dict[str, Any]]:
        rows = (
            self.db.query(*SEARCH_COLUMNS)
            .select_from(Equipment)
            .outerjoin(
                EquipmentOwnerProfile, Equipment.user_id == EquipmentOwnerProfile.user_id
            )
            .filter(plan.where_clause())
            .order_by(Equipment.created_at.desc(), Equipment.id.desc())
            .limit(limit)
            .all()
        )
        return [dict(row._mapping) for row in rows]

    def locations(self) -> List[str]:
        rows = (
            self.db.query(Equipment.location)
            .filter(active_equipment_filter())
            .filter(Equipment.location.isnot(None))
            .filter(Equipment.location != "")
            .distinct()
            .order_by(Equipment.location.asc())
            .all()
        )
        return [location for (location,) in rows]

    def stats(self) -> Dict[str, int]:
        row = (
            self.db.query(
                func.count(Equipment.id),
                func.sum(case((Equipment.availability == "available", 1), else_=0)),
                func.sum(case((Equipment.availability == "on-hire", 1), else_=0)),
                func.count(func.distinct(Equipment.location)),
                func.count(func.distinct(Equipment.equipment_type)),
            )
            .filter(active_equipment_filter())
            .one()
        )
        total, available, on_hire, locations, types = row
        return {
            "total": total or 0,
            "available": available or 0,
            "onHire": on_hire or 0,
            "locations": locations or 0,
            "types": types or 0,
        }
