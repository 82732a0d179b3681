"""Observers attached to an invocation.

An interceptor is any object. It takes part in a dispatch point only when it
implements one of the capability protocols:

- ``ExplanationWriter``: renders the request/response transcript
- ``SnapshotGenerator``: receives a generated test-case document

Objects implementing neither are ignored.
"""

from .base import (
    ConsoleExplainer,
    ExplanationWriter,
    SnapshotCollector,
    SnapshotGenerator,
)
from .dispatcher import InterceptorDispatcher

__all__ = [
    "ConsoleExplainer",
    "ExplanationWriter",
    "InterceptorDispatcher",
    "SnapshotCollector",
    "SnapshotGenerator",
]
