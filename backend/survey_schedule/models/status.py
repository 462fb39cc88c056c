"""Status master model"""

from sqlalchemy import Column, String, Integer
from survey_schedule.models.base import BaseModel


class Status(BaseModel):
    """Project status label with its display position"""

    __tablename__ = "statuses"

    name = Column(String(20), nullable=False, unique=True)
    sort_order = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Status(id={self.id}, name={self.name}, sort_order={self.sort_order})>"
