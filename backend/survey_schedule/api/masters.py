"""Master data endpoints (form choices)"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status

from survey_schedule.api.dependencies import get_master_data_service
from survey_schedule.api.errors import internal_server_error
from survey_schedule.schemas.master import EquipmentResponse, StatusResponse, UserResponse
from survey_schedule.services.master_data_service import MasterDataService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/masters", tags=["Masters"])

FETCH_FAILED_MESSAGE = "マスタデータの取得に失敗しました"


@router.get("/equipment", response_model=List[EquipmentResponse], status_code=status.HTTP_200_OK)
async def list_equipment(
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    """Equipment names offered on the project form"""
    try:
        rows = await service.list_equipment()
    except Exception:
        logger.exception("Error fetching equipment master")
        return internal_server_error(FETCH_FAILED_MESSAGE, instance=request.url.path)
    return [EquipmentResponse.model_validate(row) for row in rows]


@router.get("/statuses", response_model=List[StatusResponse], status_code=status.HTTP_200_OK)
async def list_statuses(
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    """Status labels in display order"""
    try:
        rows = await service.list_statuses()
    except Exception:
        logger.exception("Error fetching status master")
        return internal_server_error(FETCH_FAILED_MESSAGE, instance=request.url.path)
    return [StatusResponse.model_validate(row) for row in rows]


@router.get("/users", response_model=List[UserResponse], status_code=status.HTTP_200_OK)
async def list_users(
    request: Request,
    service: MasterDataService = Depends(get_master_data_service),
):
    try:
        rows = await service.list_users()
    except Exception:
        logger.exception("Error fetching user master")
        return internal_server_error(FETCH_FAILED_MESSAGE, instance=request.url.path)
    return [UserResponse.model_validate(row) for row in rows]
