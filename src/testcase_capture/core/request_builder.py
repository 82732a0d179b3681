"""Builds transport-level requests from declarative descriptors."""

import logging
import re

import httpx

from testcase_capture.core.errors import MalformedRequest
from testcase_capture.core.models import HttpRequest
from testcase_capture.utils.constants import DEFAULT_METHOD, DEFAULT_PATH
from testcase_capture.utils.strings import url_join

logger = logging.getLogger(__name__)

# RFC 7230 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def resolve_url(
    descriptor: HttpRequest, default_pdp: str, default_path: str = DEFAULT_PATH
) -> str:
    """Resolve the target URL of a descriptor.

    ``url`` is used verbatim when set, otherwise the descriptor's ``pdp``
    (or ``default_pdp``) is joined with its ``path`` (or ``default_path``).
    """
    if descriptor.url:
        return descriptor.url
    pdp = descriptor.pdp or default_pdp
    path = descriptor.path or default_path
    return url_join(pdp, path)


def build_request(
    descriptor: HttpRequest, default_pdp: str, default_path: str = DEFAULT_PATH
) -> httpx.Request:
    """Assemble an ``httpx.Request`` from a descriptor.

    Headers with an empty name or value are dropped and the body is attached
    only when non-empty.

    Raises:
        MalformedRequest: If the method or URL cannot form a valid request
    """
    method = descriptor.method or DEFAULT_METHOD
    if not _METHOD_RE.fullmatch(method):
        raise MalformedRequest(f"Invalid HTTP method: {method!r}")

    url = resolve_url(descriptor, default_pdp, default_path)
    try:
        target = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedRequest(f"Invalid URL {url!r}: {e}") from e
    if target.scheme not in ("http", "https") or not target.host:
        raise MalformedRequest(f"Invalid URL {url!r}: expected an absolute http(s) URL")

    headers: list[tuple[str, str]] = []
    for header in descriptor.headers or []:
        if header.name and header.value:
            headers.append((header.name, header.value))
        else:
            logger.debug(f"Dropping incomplete header {header.name!r}")

    content = descriptor.body.encode("utf-8") if descriptor.body else None

    try:
        request = httpx.Request(method, target, headers=headers, content=content)
    except (httpx.InvalidURL, ValueError) as e:
        raise MalformedRequest(f"Cannot build {method} {url}: {e}") from e

    logger.debug(f"Resolved request {method} {request.url}")
    return request
