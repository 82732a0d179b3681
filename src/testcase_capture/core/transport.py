"""Single-shot HTTP transport executor."""

import logging
import time

import httpx

from testcase_capture.core.errors import TransportError
from testcase_capture.core.models import HttpResponse
from testcase_capture.utils.constants import REQUEST_TIMEOUT, USER_AGENT


class TransportExecutor:
    """Executes exactly one HTTP call and captures the drained response.

    A new client is created for every call; nothing is pooled or retried.
    ``timeout`` bounds each network phase and also the whole call, body
    drain included.
    """

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport
        self.logger = logging.getLogger(__name__)

    def execute(self, request: httpx.Request) -> HttpResponse:
        """Send ``request`` and return the fully read response.

        Raises:
            TransportError: On connection failure, timeout, or body-read error
        """
        url = str(request.url)
        deadline = time.monotonic() + self.timeout
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                with client.stream(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.content or None,
                ) as response:
                    body = self._drain(response, deadline, url)
                    capture = capture_response(response, body)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request to {url} timed out after {self.timeout}s", url=url
            ) from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        self.logger.info(
            f"{request.method} {url} -> {capture.status_code} ({len(body)} bytes)"
        )
        return capture

    def _drain(self, response: httpx.Response, deadline: float, url: str) -> bytes:
        """Read the whole body, failing once ``deadline`` has passed."""
        chunks: list[bytes] = []
        for chunk in response.iter_bytes():
            self._check_deadline(deadline, url)
            chunks.append(chunk)
        self._check_deadline(deadline, url)
        return b"".join(chunks)

    def _check_deadline(self, deadline: float, url: str) -> None:
        if time.monotonic() > deadline:
            raise TransportError(
                f"Request to {url} timed out after {self.timeout}s", url=url
            )


def capture_response(response: httpx.Response, body: bytes) -> HttpResponse:
    """Convert a drained ``httpx.Response`` into an immutable capture."""
    header: dict[str, list[str]] = {}
    names: dict[str, str] = {}
    for raw_name, raw_value in response.headers.raw:
        name = raw_name.decode("latin-1")
        key = names.setdefault(name.lower(), name)
        header.setdefault(key, []).append(raw_value.decode("latin-1"))

    reason = response.reason_phrase
    status = f"{response.status_code} {reason}" if reason else ""

    return HttpResponse(
        version=response.http_version,
        status=status,
        status_code=response.status_code,
        header=header,
        body=body,
    )
