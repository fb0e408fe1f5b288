"""
Tests for ApiResponse and body parsing.
"""

import pytest

from swapped_commerce.core.exceptions import INVALID_RESPONSE, SwappedError
from swapped_commerce.core.models import ApiResponse
from swapped_commerce.core.request import parse_api_response


class TestApiResponse:
    """Test ApiResponse."""

    def test_from_dict(self):
        response = ApiResponse.from_dict({"success": True, "message": "ok", "data": {"id": "o_1"}})
        assert response.success is True
        assert response.message == "ok"
        assert response.data == {"id": "o_1"}

    def test_missing_fields_default(self):
        response = ApiResponse.from_dict({})
        assert response == ApiResponse(success=False, message="", data=None)

    def test_to_dict(self):
        response = ApiResponse(success=True, message="", data=[1])
        assert response.to_dict() == {"success": True, "message": "", "data": [1]}


class TestParseApiResponse:
    """Test parse_api_response."""

    def test_json_object(self):
        response = parse_api_response(200, '{"success": true, "data": []}')
        assert response.success is True
        assert response.data == []

    def test_invalid_json(self):
        with pytest.raises(SwappedError) as exc_info:
            parse_api_response(200, "<html>")
        assert exc_info.value.code == INVALID_RESPONSE
        assert exc_info.value.status_code == 200

    def test_non_object(self):
        with pytest.raises(SwappedError) as exc_info:
            parse_api_response(201, "[1, 2]")
        assert exc_info.value.code == INVALID_RESPONSE
        assert exc_info.value.status_code == 201
