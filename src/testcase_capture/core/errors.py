"""Errors raised by the invocation-and-capture pipeline."""


class CaptureError(Exception):
    """Base class for every failure surfaced by the pipeline."""


class MalformedRequest(CaptureError, ValueError):
    """The request descriptor cannot be turned into a sendable request."""


class TransportError(CaptureError):
    """The network call failed, timed out, or its body could not be read."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class SerializationError(CaptureError):
    """A synthesized test case could not be rendered to text."""


class InvalidTagOrVersionLabel(CaptureError, ValueError):
    """A tag or version label does not survive normalization."""

    def __init__(self, message: str, label: str) -> None:
        super().__init__(message)
        self.label = label
