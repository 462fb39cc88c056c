"""User master model"""

from sqlalchemy import Column, String
from survey_schedule.models.base import BaseModel


class User(BaseModel):
    """Staff member name offered in attribution and photographer choices"""

    __tablename__ = "users"

    name = Column(String(100), nullable=False, unique=True)

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name})>"
