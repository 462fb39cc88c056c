"""Best-effort bulk import of projects"""

import logging
from typing import Any, List

from pydantic import ValidationError

from survey_schedule.models.project import Project
from survey_schedule.schemas.import_record import ImportRecord
from survey_schedule.services.project_repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectImportService:
    """
    Creates one project per import record.

    Every record is validated and inserted independently. A record that
    fails validation or storage is logged and skipped; the rest of the
    batch still goes through and only the number of created projects is
    reported back.
    """

    def __init__(self, repository: ProjectRepository, imported_by: str):
        self.repository = repository
        self.imported_by = imported_by

    async def import_records(self, records: List[Any]) -> List[Project]:
        """
        Import a batch of raw records.

        Args:
            records: Loosely-typed rows keyed by spreadsheet column names

        Returns:
            The projects that were created, in input order
        """
        created: List[Project] = []

        for index, raw in enumerate(records):
            try:
                record = ImportRecord.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Skipping import record {index}: {e.error_count()} validation error(s): {e.errors()}")
                continue

            try:
                project = await self.repository.create_project(
                    record.to_project_create(self.imported_by)
                )
            except Exception as e:
                # Continue with the remaining records
                logger.error(f"Failed to create project from import record {index}: {str(e)}")
                continue

            created.append(project)

        logger.info(f"Imported {len(created)} of {len(records)} project record(s)")
        return created
