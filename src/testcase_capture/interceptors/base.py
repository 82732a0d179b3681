"""Capability protocols and ready-made interceptors."""

import io
import sys
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class ExplanationWriter(Protocol):
    """Interceptor that renders a human-readable transcript."""

    def get_console_out(self) -> TextIO | None:
        """Sink for transcript lines."""
        ...

    def get_console_err(self) -> TextIO | None:
        """Sink for diagnostics."""
        ...


@runtime_checkable
class SnapshotGenerator(Protocol):
    """Interceptor that receives generated test-case documents."""

    def get_target_writer(self) -> TextIO | None:
        """Sink for generated documents."""
        ...


class ConsoleExplainer:
    """Writes the request/response transcript to the console."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def get_console_out(self) -> TextIO | None:
        return self.out

    def get_console_err(self) -> TextIO | None:
        return self.err


class SnapshotCollector:
    """Keeps generated test-case documents in memory."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()

    def get_target_writer(self) -> TextIO | None:
        return self.buffer

    def getvalue(self) -> str:
        return self.buffer.getvalue()

    def save(self, path: str | Path) -> Path:
        """Write the collected documents to ``path``.

        Args:
            path: Destination file; parent directories are created

        Returns:
            The resolved destination path
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.getvalue(), encoding="utf-8")
        return target
