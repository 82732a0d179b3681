import io
from typing import Any

import pytest

from testcase_capture.core.models import HttpHeader, HttpRequest
from testcase_capture.core.request_builder import build_request
from testcase_capture.interceptors.rendering import render_request, render_response


class TestRenderRequest:
    """Test suite for request transcripts."""

    @pytest.mark.unit
    def test_request_transcript(self, default_pdp: str) -> None:
        request = build_request(
            HttpRequest(
                path="/orders?status=open",
                headers=[HttpHeader(name="Accept", value="application/json")],
            ),
            default_pdp,
        )
        out = io.StringIO()

        render_request(out, request, user_agent="probe/1.0")

        assert out.getvalue().splitlines() == [
            "> GET /orders?status=open HTTP/1.1",
            "> Host: localhost:17779",
            "> User-Agent: probe/1.0",
            "> Accept: application/json",
            ">",
        ]

    @pytest.mark.unit
    def test_explicit_user_agent_rendered_once(self, default_pdp: str) -> None:
        request = build_request(
            HttpRequest(headers=[HttpHeader(name="User-Agent", value="curl/8.0")]),
            default_pdp,
        )
        out = io.StringIO()

        render_request(out, request)

        lines = out.getvalue().splitlines()
        assert lines[0] == "> GET /$ HTTP/1.1"
        assert [line for line in lines if "User-Agent" in line] == [
            "> User-Agent: curl/8.0"
        ]


class TestRenderResponse:
    """Test suite for response transcripts."""

    @pytest.mark.unit
    def test_response_transcript(self, http_mock_helpers: Any) -> None:
        response = http_mock_helpers.create_captured_response(
            status_code=404,
            status="404 Not Found",
            header={"Content-Type": ["text/plain"], "Set-Cookie": ["a=1", "b=2"]},
            body=b"missing",
        )
        out = io.StringIO()

        render_response(out, response)

        assert out.getvalue() == (
            "< HTTP/1.1 404 Not Found\n"
            "< Content-Type: text/plain\n"
            "< Set-Cookie: a=1\n"
            "< Set-Cookie: b=2\n"
            "<\n"
            "missing\n"
        )

    @pytest.mark.unit
    def test_status_code_used_without_status_line(self, http_mock_helpers: Any) -> None:
        out = io.StringIO()

        render_response(out, http_mock_helpers.create_captured_response(status_code=599))

        assert out.getvalue().splitlines()[0] == "< HTTP/1.1 599"
