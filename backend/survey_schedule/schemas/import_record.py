"""Schemas for the spreadsheet-style bulk import"""

from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict, Field, field_validator

from survey_schedule.models.project import ProjectStatus
from survey_schedule.schemas.common import normalize_equipment, parse_optional_date
from survey_schedule.schemas.project import ProjectCreate


class ImportRecord(BaseModel):
    """
    One row of an import batch, keyed by the spreadsheet's Japanese column
    headers. Blank optional cells are stored as null.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: ProjectStatus = Field(default=ProjectStatus.NOT_QUOTED, alias="進捗状況")
    company_name: str = Field(..., min_length=1, max_length=255, alias="会社名")
    site_name: str = Field(..., min_length=1, max_length=255, alias="現場名")
    equipment: str = Field(default="[]", alias="機材")
    photographer: Optional[str] = Field(None, max_length=255, alias="撮影担当")
    shoot_period: Optional[str] = Field(None, max_length=255, alias="撮影期間")
    start_date: Optional[date] = Field(None, alias="撮影開始日")
    end_date: Optional[date] = Field(None, alias="撮影終了日")
    remarks: Optional[str] = Field(None, alias="備考")
    site_address: Optional[str] = Field(None, max_length=500, alias="現場住所")
    client_contact: Optional[str] = Field(None, max_length=255, alias="先方担当")
    drawing_model: Optional[str] = Field(None, max_length=255, alias="図面化モデル")

    @field_validator("status", mode="before")
    @classmethod
    def default_blank_status(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return ProjectStatus.NOT_QUOTED
        return v

    @field_validator(
        "photographer",
        "shoot_period",
        "remarks",
        "site_address",
        "client_contact",
        "drawing_model",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("equipment", mode="before")
    @classmethod
    def validate_equipment(cls, v):
        return normalize_equipment(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_optional_date(v)

    def to_project_create(self, imported_by: str) -> ProjectCreate:
        """Build the create payload attributed to the importing user"""
        return ProjectCreate(
            status=self.status,
            company_name=self.company_name,
            site_name=self.site_name,
            equipment=self.equipment,
            client_contact=self.client_contact,
            photographer=self.photographer,
            shoot_period=self.shoot_period,
            start_date=self.start_date,
            end_date=self.end_date,
            drawing_model=self.drawing_model,
            remarks=self.remarks,
            site_address=self.site_address,
            created_by=imported_by,
            updated_by=imported_by,
        )


class ImportResponse(BaseModel):
    """Result of a bulk import"""

    message: str = Field(..., description="Localized summary")
    count: int = Field(..., description="Number of projects created")
