"""Generated test-case documents."""

import logging
from typing import Any, TextIO

import yaml

from testcase_capture.core.errors import SerializationError
from testcase_capture.core.models import (
    GeneratedSnapshot,
    HttpRequest,
    HttpResponse,
    TestCase,
)
from testcase_capture.synthesis.expectation import generate_expectation
from testcase_capture.utils.constants import GENERATED_TITLE


class _SnapshotDumper(yaml.SafeDumper):
    """Safe dumper writing multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> Any:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_SnapshotDumper.add_representer(str, _represent_str)


class TestGenerator:
    """Synthesizes a test case from one request/response pair and renders it."""

    __test__ = False

    def __init__(self, version: str | None = None) -> None:
        self.version = version
        self.logger = logging.getLogger(__name__)

    def generate_test_case(
        self, request: HttpRequest, response: HttpResponse
    ) -> TestCase:
        return TestCase(
            title=GENERATED_TITLE,
            version=self.version,
            request=request.model_copy(deep=True),
            expectation=generate_expectation(response),
        )

    def render_snapshot(self, test_case: TestCase) -> str:
        """Wrap ``test_case`` into a single-element snapshot and dump it as YAML.

        Raises:
            SerializationError: If the document cannot be converted to text
        """
        snapshot = GeneratedSnapshot(testcases=[test_case])
        try:
            data = snapshot.model_dump(mode="json", by_alias=True, exclude_none=True)
            return yaml.dump(
                data,
                Dumper=_SnapshotDumper,
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            )
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise SerializationError(str(e)) from e

    def write_test_case(
        self, w: TextIO, request: HttpRequest, response: HttpResponse
    ) -> str:
        """Generate, render and write one snapshot document to ``w``.

        On failure a diagnostic line is written to ``w`` before the error is
        raised.

        Returns:
            The rendered document

        Raises:
            SerializationError: If the test case cannot be rendered
        """
        test_case = self.generate_test_case(request, response)
        try:
            script = self.render_snapshot(test_case)
        except SerializationError as e:
            print(f"Cannot marshal generated testcase, error: {e}", file=w)
            raise
        print(file=w)
        print(script, file=w)
        return script
