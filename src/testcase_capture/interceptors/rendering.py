"""Line-oriented transcript rendering for requests and responses."""

from typing import TextIO

import httpx

from testcase_capture.core.models import HttpResponse
from testcase_capture.utils.constants import (
    HTTP_PROTOCOL,
    REQUEST_PREFIX,
    RESPONSE_PREFIX,
    USER_AGENT,
)

_RENDERED_SEPARATELY = ("host", "user-agent")


def render_request(
    w: TextIO, request: httpx.Request, user_agent: str = USER_AGENT
) -> None:
    """Render the outgoing request, each line prefixed with ``>``."""
    line = [REQUEST_PREFIX, request.method]
    target = request.url.raw_path.decode("ascii") or request.url.path
    if target:
        line.append(target)
    line.append(HTTP_PROTOCOL)
    print(" ".join(line), file=w)

    host = request.url.netloc.decode("ascii")
    if host:
        print(f"{REQUEST_PREFIX} Host: {host}", file=w)

    agent = request.headers.get("User-Agent") or user_agent
    if agent:
        print(f"{REQUEST_PREFIX} User-Agent: {agent}", file=w)

    for raw_name, raw_value in request.headers.raw:
        name = raw_name.decode("latin-1")
        if name.lower() in _RENDERED_SEPARATELY:
            continue
        print(f"{REQUEST_PREFIX} {name}: {raw_value.decode('latin-1')}", file=w)
    print(REQUEST_PREFIX, file=w)


def render_response(w: TextIO, response: HttpResponse) -> None:
    """Render the captured response, each header line prefixed with ``<``."""
    line = [RESPONSE_PREFIX]
    if response.version:
        line.append(response.version)
    line.append(response.status or str(response.status_code))
    print(" ".join(line), file=w)

    for name, values in response.header.items():
        for value in values:
            print(f"{RESPONSE_PREFIX} {name}: {value}", file=w)
    print(RESPONSE_PREFIX, file=w)
    print(response.text, file=w)
