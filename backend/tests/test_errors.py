"""Tests for problem-details error bodies"""

import json

from fastapi import status

from survey_schedule.api.errors import (
    create_error_response,
    internal_server_error,
    not_found_error,
    validation_error,
)


class TestErrorResponses:
    """Test the problem-details helpers"""

    def test_not_found_body(self):
        response = not_found_error("プロジェクトが見つかりません", instance="/api/projects/12")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert json.loads(response.body) == {
            "type": "/errors/not_found",
            "title": "Not Found",
            "status": 404,
            "detail": "プロジェクトが見つかりません",
            "instance": "/api/projects/12",
        }

    def test_validation_error_lists_fields(self):
        response = validation_error(
            "リクエストの内容が不正です",
            errors=[{"field": "companyName", "message": "Field required"}],
        )

        body = json.loads(response.body)
        assert body["type"] == "/errors/validation_error"
        assert body["errors"] == [{"field": "companyName", "message": "Field required"}]
        assert "instance" not in body

    def test_internal_server_error(self):
        response = internal_server_error("プロジェクトの取得に失敗しました")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert json.loads(response.body)["type"] == "/errors/internal_server_error"

    def test_unmapped_status_uses_generic_type(self):
        response = create_error_response(409, "Conflict", "競合しています")

        assert json.loads(response.body)["type"] == "/errors/error"
