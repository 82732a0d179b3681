"""Pydantic models for request descriptors, captured responses and test cases."""

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from testcase_capture.utils.constants import (
    DEFAULT_PATH,
    DEFAULT_PDP,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from testcase_capture.utils.strings import standardize_version


class DocumentModel(BaseModel):
    """Base for models written to generated documents under their dashed names."""

    model_config = ConfigDict(populate_by_name=True)


class HttpHeader(DocumentModel):
    """One request header as declared in a descriptor."""

    name: str = ""
    value: str = ""


class HttpRequest(DocumentModel):
    """Declarative request descriptor.

    Either ``url`` is set, or ``pdp`` (or the invoker default) joined with
    ``path`` must resolve to a valid URL.
    """

    method: str | None = None
    url: str | None = None
    pdp: str | None = Field(None, description="Endpoint root override")
    path: str | None = None
    headers: list[HttpHeader] | None = None
    body: str | None = None


class HttpResponse(BaseModel):
    """Response captured by the transport executor."""

    model_config = ConfigDict(frozen=True)

    version: str = ""
    status: str = ""
    status_code: int
    header: dict[str, list[str]] = Field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class MeasureStatusCode(DocumentModel):
    is_equal_to: int | None = Field(None, alias="is-equal-to")


class MeasureHeader(DocumentModel):
    name: str
    is_equal_to: str | None = Field(None, alias="is-equal-to")


class MeasureHeaders(DocumentModel):
    has_total: int | None = Field(None, alias="has-total")
    items: list[MeasureHeader] = Field(default_factory=list)


class MeasureBody(DocumentModel):
    has_format: str | None = Field(None, alias="has-format")
    includes: str | None = None
    is_equal_to: str | None = Field(None, alias="is-equal-to")
    match_with: str | None = Field(None, alias="match-with")


class Expectation(DocumentModel):
    """Assertions synthesized from one captured response."""

    status_code: MeasureStatusCode | None = Field(None, alias="status-code")
    headers: MeasureHeaders | None = None
    body: MeasureBody | None = None


class TestCase(DocumentModel):
    """A declarative test case: request plus expected-response assertions."""

    __test__ = False

    title: str
    version: str | None = None
    request: HttpRequest
    expectation: Expectation | None = None


class GeneratedSnapshot(DocumentModel):
    """Serialization root of a generated snapshot document."""

    testcases: list[TestCase] = Field(default_factory=list, alias="testcase-snapshot")


class InvokerOptions(BaseModel):
    """Configuration for an ``HttpInvoker``."""

    pdp: str = Field(DEFAULT_PDP, description="Default endpoint root")
    version: str | None = Field(None, description="Version copied into test cases")
    default_path: str = DEFAULT_PATH
    timeout: float = Field(REQUEST_TIMEOUT, gt=0)
    user_agent: str = USER_AGENT

    @field_validator("pdp", "default_path", mode="before")
    @classmethod
    def _empty_to_default(cls, value: str | None, info: ValidationInfo) -> str:
        if value:
            return value
        return DEFAULT_PDP if info.field_name == "pdp" else DEFAULT_PATH

    @field_validator("version")
    @classmethod
    def _normalize_version(cls, value: str | None) -> str | None:
        return standardize_version(value) if value else value

    @classmethod
    def from_env(cls) -> "InvokerOptions":
        """Build options from ``TESTCASE_CAPTURE_*`` environment variables."""
        values: dict[str, object] = {}
        if pdp := os.getenv("TESTCASE_CAPTURE_PDP"):
            values["pdp"] = pdp
        if version := os.getenv("TESTCASE_CAPTURE_VERSION"):
            values["version"] = version
        if timeout := os.getenv("TESTCASE_CAPTURE_TIMEOUT"):
            values["timeout"] = float(timeout)
        return cls(**values)
