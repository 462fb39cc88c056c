"""Async HTTP client for the projects API"""

import logging
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx
from pydantic.alias_generators import to_camel

from survey_schedule.client.models import Project, ProjectInput
from survey_schedule.config import settings
from survey_schedule.schemas.common import encode_equipment

logger = logging.getLogger(__name__)


class ProjectApiClient:
    """
    Typed wrapper around /api/projects.

    Converts equipment between the wire string and a list on every call.
    HTTP and transport errors are raised to the caller unchanged
    (httpx.HTTPStatusError, httpx.TransportError); nothing is retried.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: API root, defaults to settings.api_base_url
            client: Pre-configured httpx client (takes precedence over base_url)
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "ProjectApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_all(self) -> List[Project]:
        response = await self._request("GET", "/api/projects")
        return [Project.from_api(item) for item in response.json()]

    async def get_by_id(self, project_id: int) -> Project:
        response = await self._request("GET", f"/api/projects/{project_id}")
        return Project.from_api(response.json())

    async def create(self, data: ProjectInput) -> Project:
        response = await self._request("POST", "/api/projects", json=data.to_api())
        return Project.from_api(response.json())

    async def update(self, project_id: int, data: ProjectInput) -> Project:
        """Replace the whole project (PUT)"""
        payload = data.to_api()
        payload.pop("createdBy", None)
        response = await self._request("PUT", f"/api/projects/{project_id}", json=payload)
        return Project.from_api(response.json())

    async def patch(self, project_id: int, **fields: Any) -> Project:
        """
        Update only the given fields (PATCH).

        Field names may be snake_case; equipment may be passed as a list.
        """
        payload: Dict[str, Any] = {}
        for name, value in fields.items():
            if name == "equipment" and isinstance(value, (list, tuple)):
                value = encode_equipment(list(value))
            elif isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, Enum):
                value = value.value
            payload[to_camel(name)] = value
        response = await self._request("PATCH", f"/api/projects/{project_id}", json=payload)
        return Project.from_api(response.json())

    async def delete(self, project_id: int) -> None:
        await self._request("DELETE", f"/api/projects/{project_id}")

    async def import_projects(self, records: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Post a batch of import records; returns {"message", "count"}"""
        response = await self._request(
            "POST", "/api/projects/import", json={"projects": records}
        )
        return response.json()

    async def health(self) -> Dict[str, Any]:
        response = await self._request("GET", "/health")
        return response.json()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {url}")
        response = await self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response
