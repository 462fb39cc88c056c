"""Master data schemas"""

from pydantic import BaseModel

from survey_schedule.schemas.common import CAMEL_CASE_CONFIG


class EquipmentResponse(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: int
    name: str


class StatusResponse(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: int
    name: str
    sort_order: int


class UserResponse(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: int
    name: str
