"""State of the create/edit project form"""

from typing import List, Optional
from pydantic import BaseModel, Field

from survey_schedule.client.models import Project, ProjectInput
from survey_schedule.config import settings
from survey_schedule.models.project import ProjectStatus
from survey_schedule.schemas.common import parse_optional_date


class ProjectFormData(BaseModel):
    """
    Values bound to the project form.

    Text inputs hold empty strings rather than None, matching what an
    HTML form submits.
    """

    status: ProjectStatus = ProjectStatus.NOT_QUOTED
    company_name: str = ""
    site_name: str = ""
    equipment: List[str] = Field(default_factory=list)
    client_contact: str = ""
    photographer: str = ""
    shoot_period: str = ""
    start_date: str = ""
    end_date: str = ""
    drawing_model: str = ""
    remarks: str = ""
    site_address: str = ""
    created_by: str = Field(default_factory=lambda: settings.default_user)
    updated_by: str = Field(default_factory=lambda: settings.default_user)

    @classmethod
    def from_project(cls, project: Project, editor: Optional[str] = None) -> "ProjectFormData":
        """Prefill the form for editing; the editor becomes updated_by"""
        return cls(
            status=project.status,
            company_name=project.company_name,
            site_name=project.site_name,
            equipment=list(project.equipment),
            client_contact=project.client_contact or "",
            photographer=project.photographer or "",
            shoot_period=project.shoot_period or "",
            start_date=project.start_date.isoformat() if project.start_date else "",
            end_date=project.end_date.isoformat() if project.end_date else "",
            drawing_model=project.drawing_model or "",
            remarks=project.remarks or "",
            site_address=project.site_address or "",
            created_by=project.created_by,
            updated_by=editor or settings.default_user,
        )

    def toggle_equipment(self, name: str, checked: bool) -> None:
        """Checkbox handler: add on check, remove every occurrence on uncheck"""
        if checked:
            self.equipment = [*self.equipment, name]
        else:
            self.equipment = [item for item in self.equipment if item != name]

    def to_input(self) -> ProjectInput:
        return ProjectInput(
            status=self.status,
            company_name=self.company_name,
            site_name=self.site_name,
            equipment=self.equipment,
            client_contact=self.client_contact,
            photographer=self.photographer,
            shoot_period=self.shoot_period,
            start_date=parse_optional_date(self.start_date),
            end_date=parse_optional_date(self.end_date),
            drawing_model=self.drawing_model,
            remarks=self.remarks,
            site_address=self.site_address,
            created_by=self.created_by,
            updated_by=self.updated_by,
        )
