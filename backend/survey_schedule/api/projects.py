"""Project management endpoints"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from survey_schedule.api.dependencies import get_import_service, get_project_repository
from survey_schedule.api.errors import internal_server_error, not_found_error, validation_error
from survey_schedule.schemas.import_record import ImportResponse
from survey_schedule.schemas.project import (
    ProjectCreate,
    ProjectPatch,
    ProjectResponse,
    ProjectUpdate,
)
from survey_schedule.services.project_import_service import ProjectImportService
from survey_schedule.services.project_repository import ProjectNotFoundError, ProjectRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["Projects"])

NOT_FOUND_MESSAGE = "プロジェクトが見つかりません"
FETCH_FAILED_MESSAGE = "プロジェクトの取得に失敗しました"
CREATE_FAILED_MESSAGE = "プロジェクトの作成に失敗しました"
UPDATE_FAILED_MESSAGE = "プロジェクトの更新に失敗しました"
DELETE_FAILED_MESSAGE = "プロジェクトの削除に失敗しました"
INVALID_IMPORT_MESSAGE = "プロジェクトデータが無効です"
IMPORT_FAILED_MESSAGE = "インポートに失敗しました"


@router.get("", response_model=List[ProjectResponse], status_code=status.HTTP_200_OK)
async def list_projects(
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """
    Get all projects

    Most recently updated first; no pagination or filtering
    """
    try:
        projects = await repository.list_projects()
    except Exception:
        logger.exception("Error fetching projects")
        return internal_server_error(FETCH_FAILED_MESSAGE, instance=request.url.path)

    return [ProjectResponse.model_validate(p) for p in projects]


@router.post("/import", response_model=ImportResponse, status_code=status.HTTP_200_OK)
async def import_projects(
    request: Request,
    payload: Any = Body(None),
    import_service: ProjectImportService = Depends(get_import_service),
):
    """
    Bulk import projects from spreadsheet rows

    Expects {"projects": [...]}. Rows that fail are skipped; only the
    number of created projects is reported.
    """
    records = payload.get("projects") if isinstance(payload, dict) else None
    if not isinstance(records, list):
        return validation_error(INVALID_IMPORT_MESSAGE, instance=request.url.path)

    try:
        created = await import_service.import_records(records)
    except Exception:
        logger.exception("Error importing projects")
        return internal_server_error(IMPORT_FAILED_MESSAGE, instance=request.url.path)

    return ImportResponse(
        message=f"{len(created)}件のプロジェクトをインポートしました",
        count=len(created),
    )


@router.get("/{project_id}", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def get_project(
    project_id: int,
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """Get a single project by id"""
    try:
        project = await repository.get_project(project_id)
    except ProjectNotFoundError:
        return not_found_error(NOT_FOUND_MESSAGE, instance=request.url.path)
    except Exception:
        logger.exception(f"Error fetching project {project_id}")
        return internal_server_error(FETCH_FAILED_MESSAGE, instance=request.url.path)

    return ProjectResponse.model_validate(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_create: ProjectCreate,
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """
    Create a project

    updatedBy defaults to createdBy; blank dates are stored as null
    """
    try:
        project = await repository.create_project(project_create)
    except Exception:
        logger.exception("Error creating project")
        return internal_server_error(CREATE_FAILED_MESSAGE, instance=request.url.path)

    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def replace_project(
    project_id: int,
    project_update: ProjectUpdate,
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """
    Replace every editable field of a project

    Optional fields left out of the body are cleared
    """
    try:
        project = await repository.replace_project(project_id, project_update)
    except ProjectNotFoundError:
        return not_found_error(NOT_FOUND_MESSAGE, instance=request.url.path)
    except Exception:
        logger.exception(f"Error updating project {project_id}")
        return internal_server_error(UPDATE_FAILED_MESSAGE, instance=request.url.path)

    return ProjectResponse.model_validate(project)


@router.patch("/{project_id}", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def patch_project(
    project_id: int,
    project_patch: ProjectPatch,
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """Update only the fields present in the body"""
    try:
        project = await repository.patch_project(project_id, project_patch)
    except ProjectNotFoundError:
        return not_found_error(NOT_FOUND_MESSAGE, instance=request.url.path)
    except Exception:
        logger.exception(f"Error updating project {project_id}")
        return internal_server_error(UPDATE_FAILED_MESSAGE, instance=request.url.path)

    return ProjectResponse.model_validate(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    request: Request,
    repository: ProjectRepository = Depends(get_project_repository),
):
    """Delete a project"""
    try:
        await repository.delete_project(project_id)
    except ProjectNotFoundError:
        return not_found_error(NOT_FOUND_MESSAGE, instance=request.url.path)
    except Exception:
        logger.exception(f"Error deleting project {project_id}")
        return internal_server_error(DELETE_FAILED_MESSAGE, instance=request.url.path)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
