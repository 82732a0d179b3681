import json
from typing import Any

import pytest

from testcase_capture.core.models import HttpResponse
from testcase_capture.synthesis.expectation import generate_expectation


class TestGenerateExpectation:
    """Test suite for expectation synthesis."""

    @pytest.mark.unit
    def test_json_response(self, sample_response: HttpResponse) -> None:
        expectation = generate_expectation(sample_response)

        assert expectation.status_code.is_equal_to == 200
        assert expectation.headers.has_total == 1
        assert [(h.name, h.is_equal_to) for h in expectation.headers.items] == [
            ("Content-Type", "application/json")
        ]
        assert expectation.body.has_format == "json"
        assert expectation.body.includes == json.dumps({"a": 1}, indent=2)

    @pytest.mark.unit
    def test_empty_not_found_response(self, http_mock_helpers: Any) -> None:
        response = http_mock_helpers.create_captured_response(status_code=404)

        expectation = generate_expectation(response)

        assert expectation.status_code.is_equal_to == 404
        assert expectation.headers is None
        assert expectation.body.has_format == "flat"
        assert expectation.body.is_equal_to == ""
        assert expectation.body.match_with == ".*"

    @pytest.mark.unit
    def test_multi_value_headers_counted_but_not_itemized(
        self, http_mock_helpers: Any
    ) -> None:
        response = http_mock_helpers.create_captured_response(
            header={
                "Set-Cookie": ["a=1", "b=2"],
                "Server": ["nginx"],
                "Vary": ["Accept", "Origin", "Cookie"],
            },
        )

        headers = generate_expectation(response).headers

        assert headers.has_total == 3
        assert [h.name for h in headers.items] == ["Server"]

    @pytest.mark.unit
    def test_deterministic(self, sample_response: HttpResponse) -> None:
        assert generate_expectation(sample_response) == generate_expectation(
            sample_response
        )

    @pytest.mark.unit
    def test_deeply_nested_body_does_not_escape(self, http_mock_helpers: Any) -> None:
        response = http_mock_helpers.create_captured_response(
            header={"Content-Type": ["application/json"]}, body=b"[" * 100000
        )

        body = generate_expectation(response).body

        assert body.has_format == "flat"
        assert body.match_with == ".*"
