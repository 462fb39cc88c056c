"""Project schemas"""

from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from survey_schedule.config import settings
from survey_schedule.models.project import ProjectStatus
from survey_schedule.schemas.common import (
    CAMEL_CASE_CONFIG,
    normalize_equipment,
    parse_optional_date,
)


class ProjectBase(BaseModel):
    """Editable project fields shared by create and full update"""

    model_config = CAMEL_CASE_CONFIG

    status: ProjectStatus = Field(default=ProjectStatus.NOT_QUOTED, description="Project status")
    company_name: str = Field(..., min_length=1, max_length=255, description="Client company name")
    site_name: str = Field(..., min_length=1, max_length=255, description="Survey site name")
    equipment: str = Field(default="[]", description="JSON-encoded list of equipment names")
    client_contact: Optional[str] = Field(None, max_length=255)
    photographer: Optional[str] = Field(None, max_length=255)
    shoot_period: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = Field(None, description="Shoot start date")
    end_date: Optional[date] = Field(None, description="Shoot end date")
    drawing_model: Optional[str] = Field(None, max_length=255)
    remarks: Optional[str] = None
    site_address: Optional[str] = Field(None, max_length=500)

    @field_validator("equipment", mode="before")
    @classmethod
    def validate_equipment(cls, v):
        return normalize_equipment(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_optional_date(v)


class ProjectCreate(ProjectBase):
    """Project creation schema"""

    created_by: str = Field(default_factory=lambda: settings.default_user, max_length=100)
    updated_by: Optional[str] = Field(None, max_length=100, description="Defaults to created_by")


class ProjectUpdate(ProjectBase):
    """
    Full replacement schema (PUT).

    Every editable field is written: optional fields the caller leaves out
    are cleared and a missing equipment list becomes empty.
    """

    status: ProjectStatus = Field(..., description="Project status")
    updated_by: str = Field(default_factory=lambda: settings.default_user, max_length=100)


class ProjectPatch(BaseModel):
    """Partial update schema (PATCH) - only the supplied fields are written"""

    model_config = CAMEL_CASE_CONFIG

    status: Optional[ProjectStatus] = None
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    site_name: Optional[str] = Field(None, min_length=1, max_length=255)
    equipment: Optional[str] = None
    client_contact: Optional[str] = Field(None, max_length=255)
    photographer: Optional[str] = Field(None, max_length=255)
    shoot_period: Optional[str] = Field(None, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    drawing_model: Optional[str] = Field(None, max_length=255)
    remarks: Optional[str] = None
    site_address: Optional[str] = Field(None, max_length=500)
    updated_by: Optional[str] = Field(None, max_length=100)

    @field_validator("status", "company_name", "site_name", "updated_by")
    @classmethod
    def reject_null(cls, v):
        """Required columns may be changed but not cleared"""
        if v is None:
            raise ValueError("field may not be null")
        return v

    @field_validator("equipment", mode="before")
    @classmethod
    def validate_equipment(cls, v):
        return normalize_equipment(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_optional_date(v)


class ProjectResponse(BaseModel):
    """Project response schema"""

    model_config = CAMEL_CASE_CONFIG

    id: int
    status: ProjectStatus
    company_name: str
    site_name: str
    equipment: str
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
