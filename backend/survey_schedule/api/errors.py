"""Problem-details (RFC 7807) error bodies for the project API"""

from typing import Optional, Dict, List
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

ERROR_TYPE_BASE = "/errors"

INVALID_REQUEST_MESSAGE = "リクエストの内容が不正です"


def create_error_response(
    status_code: int,
    title: str,
    detail: str,
    error_type: Optional[str] = None,
    instance: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None
) -> JSONResponse:
    """
    Build a problem-details body for a failed project or master request

    Args:
        status_code: HTTP status code (400, 404 or 500 in this API)
        title: English summary of the status ("Not Found", ...)
        detail: Localized message shown to the user, e.g. "プロジェクトが見つかりません"
        error_type: Slug under /errors; derived from the status code when omitted
        instance: Path of the request that failed, e.g. /api/projects/12
        errors: Per-field problems as {"field": "companyName", "message": ...}

    Returns:
        JSONResponse with the problem details
    """
    error_type_map = {
        400: "validation_error",
        404: "not_found",
        500: "internal_server_error",
    }

    if not error_type:
        error_type = error_type_map.get(status_code, "error")

    problem = {
        "type": f"{ERROR_TYPE_BASE}/{error_type}",
        "title": title,
        "status": status_code,
        "detail": detail
    }

    if instance:
        problem["instance"] = instance

    if errors:
        problem["errors"] = errors

    return JSONResponse(
        status_code=status_code,
        content=problem
    )


def not_found_error(detail: str, instance: Optional[str] = None) -> JSONResponse:
    """Unknown project id"""
    return create_error_response(
        status_code=status.HTTP_404_NOT_FOUND,
        title="Not Found",
        detail=detail,
        instance=instance
    )


def validation_error(
    detail: str,
    errors: Optional[List[Dict[str, str]]] = None,
    instance: Optional[str] = None
) -> JSONResponse:
    """Malformed project body or import batch"""
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        title="Validation Error",
        detail=detail,
        errors=errors,
        instance=instance
    )


def internal_server_error(detail: str, instance: Optional[str] = None) -> JSONResponse:
    """Storage failure while reading or writing projects"""
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        detail=detail,
        instance=instance
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report body and path parameter errors as 400 with camelCase field names"""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return validation_error(
        detail=INVALID_REQUEST_MESSAGE,
        errors=errors,
        instance=request.url.path,
    )
