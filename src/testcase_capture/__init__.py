"""Capture HTTP traffic as declarative test cases.

A single request is built from an ``HttpRequest`` descriptor, sent once, and
observed by interceptors. Snapshot interceptors receive a YAML document with
the request and assertions synthesized from the response.

Usage:
    from testcase_capture import HttpInvoker, HttpRequest, SnapshotCollector

    collector = SnapshotCollector()
    HttpInvoker().do(HttpRequest(path="/health"), collector)
    print(collector.getvalue())
"""

from .core.errors import (
    CaptureError,
    InvalidTagOrVersionLabel,
    MalformedRequest,
    SerializationError,
    TransportError,
)
from .core.models import (
    Expectation,
    GeneratedSnapshot,
    HttpHeader,
    HttpRequest,
    HttpResponse,
    InvokerOptions,
    TestCase,
)
from .interceptors import (
    ConsoleExplainer,
    ExplanationWriter,
    InterceptorDispatcher,
    SnapshotCollector,
    SnapshotGenerator,
)
from .invoker import HttpInvoker

__version__ = "1.0.0"
__all__ = [
    "CaptureError",
    "ConsoleExplainer",
    "Expectation",
    "ExplanationWriter",
    "GeneratedSnapshot",
    "HttpHeader",
    "HttpInvoker",
    "HttpRequest",
    "HttpResponse",
    "InterceptorDispatcher",
    "InvalidTagOrVersionLabel",
    "InvokerOptions",
    "MalformedRequest",
    "SerializationError",
    "SnapshotCollector",
    "SnapshotGenerator",
    "TestCase",
    "TransportError",
]
