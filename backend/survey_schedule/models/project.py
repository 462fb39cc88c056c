"""Project model"""

import enum
from sqlalchemy import Column, String, Text, Date
from survey_schedule.models.base import BaseModel


class ProjectStatus(str, enum.Enum):
    """Commercial/scheduling stage of a survey project"""
    NOT_QUOTED = "未見積"
    QUOTED = "見積済"
    SCHEDULED = "日程決"
    COMPLETED = "完了"
    CANCELLED = "ボツ"


class Project(BaseModel):
    """
    Project model representing a single survey/photography engagement.

    Equipment is stored as a JSON-encoded list of names. created_by and
    updated_by are free text and do not reference the users table.
    """

    __tablename__ = "projects"

    status = Column(
        String(20), nullable=False, default=ProjectStatus.NOT_QUOTED.value, index=True
    )
    company_name = Column(String(255), nullable=False)
    site_name = Column(String(255), nullable=False)
    equipment = Column(Text, nullable=False, default="[]")
    client_contact = Column(String(255), nullable=True)
    photographer = Column(String(255), nullable=True)
    shoot_period = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    drawing_model = Column(String(255), nullable=True)
    remarks = Column(Text, nullable=True)
    site_address = Column(String(500), nullable=True)
    created_by = Column(String(100), nullable=False)
    updated_by = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Project(id={self.id}, company_name={self.company_name}, site_name={self.site_name}, status={self.status})>"
