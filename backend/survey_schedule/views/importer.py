"""Import dialog: sends a batch of spreadsheet rows to the API"""

import logging
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.query_cache import PROJECTS_KEY, QueryCache

logger = logging.getLogger(__name__)

# Batch sent by the dialog's test import
SAMPLE_IMPORT_RECORDS: List[Dict[str, Any]] = [
    {
        "進捗状況": "完了",
        "会社名": "テスト会社1",
        "現場名": "テスト現場1",
        "機材": '["FARO"]',
        "撮影担当": "テスト担当者",
        "撮影期間": "2025-01-01 - 2025-01-05",
        "撮影開始日": "2025-01-01",
        "撮影終了日": "2025-01-05",
        "備考": "インポートテスト",
        "現場住所": "東京都",
    }
]


class ImportResult(BaseModel):
    message: str
    count: int


class ImportView:
    """Runs one import at a time and refreshes the shared cache on success"""

    def __init__(self, client: ProjectApiClient, cache: QueryCache):
        self.client = client
        self.cache = cache
        self.is_processing = False

    async def run(self, records: Optional[List[Dict[str, Any]]] = None) -> ImportResult:
        """
        Import records (the sample batch when none are given).

        Raises:
            RuntimeError: If an import is already running
            httpx.HTTPStatusError: If the server rejects the batch
        """
        if self.is_processing:
            raise RuntimeError("An import is already in progress")

        batch = SAMPLE_IMPORT_RECORDS if records is None else records
        self.is_processing = True
        try:
            data = await self.client.import_projects(batch)
        finally:
            self.is_processing = False

        self.cache.invalidate(PROJECTS_KEY)
        result = ImportResult.model_validate(data)
        logger.info(f"インポートが完了しました: {result.count}件")
        return result
