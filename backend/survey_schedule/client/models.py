"""Client-side project representation"""

from typing import Any, Dict, List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field

from survey_schedule.config import settings
from survey_schedule.models.project import ProjectStatus
from survey_schedule.schemas.common import (
    CAMEL_CASE_CONFIG,
    decode_equipment,
    encode_equipment,
)


class Project(BaseModel):
    """
    A project as the views see it.

    Identical to the API payload except that equipment is a list of names
    instead of its JSON-encoded wire string.
    """

    model_config = CAMEL_CASE_CONFIG

    id: int
    status: ProjectStatus
    company_name: str
    site_name: str
    equipment: List[str] = Field(default_factory=list)
    client_contact: Optional[str] = None
    photographer: Optional[str] = None
    shoot_period: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    drawing_model: Optional[str] = None
    remarks: Optional[str] = None
    site_address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Project":
        """Build from a wire payload, decoding the equipment string"""
        values = dict(data)
        values["equipment"] = decode_equipment(values.get("equipment"))
        return cls.model_validate(values)


class ProjectInput(BaseModel):
    """Editable fields sent on create and full update"""

    model_config = CAMEL_CASE_CONFIG

    status: ProjectStatus = ProjectStatus.NOT_QUOTED
    company_name: str
    site_name: str
    equipment: List[str] = Field(default_factory=list)
    client_contact: Optional[str] = None
    photographer: Optional[str] = None
    shoot_period: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    drawing_model: Optional[str] = None
    remarks: Optional[str] = None
    site_address: Optional[str] = None
    created_by: str = Field(default_factory=lambda: settings.default_user)
    updated_by: Optional[str] = None

    def to_api(self) -> Dict[str, Any]:
        """Wire payload with equipment encoded as a JSON string"""
        payload = self.model_dump(mode="json", by_alias=True)
        payload["equipment"] = encode_equipment(self.equipment)
        if payload["updatedBy"] is None:
            del payload["updatedBy"]
        return payload
