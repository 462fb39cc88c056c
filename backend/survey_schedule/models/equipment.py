"""Equipment master model"""

from sqlalchemy import Column, String
from survey_schedule.models.base import BaseModel


class Equipment(BaseModel):
    """Survey hardware available for selection on a project"""

    __tablename__ = "equipment"

    name = Column(String(100), nullable=False, unique=True)

    def __repr__(self):
        return f"<Equipment(id={self.id}, name={self.name})>"
