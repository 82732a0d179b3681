"""Response body format sniffing.

Classifiers are tried in ``BODY_CLASSIFIERS`` order and the first one that
accepts the body decides its format. Bodies no classifier accepts are
``flat``.
"""

import json
from collections.abc import Callable

import yaml

from testcase_capture.core.models import MeasureBody
from testcase_capture.utils.constants import DEFAULT_MATCH_PATTERN

Classifier = Callable[[bytes], str | None]


def sniff_json(body: bytes) -> str | None:
    """Return the pretty-printed object if ``body`` is a JSON object."""
    try:
        obj = json.loads(body)
        if not isinstance(obj, dict):
            return None
        return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False)
    except (ValueError, RecursionError):
        return None


def sniff_yaml(body: bytes) -> str | None:
    """Return the canonical YAML dump if ``body`` starts with a YAML mapping.

    Only the first document of a multi-document stream is considered.
    """
    try:
        obj = next(yaml.safe_load_all(body), None)
    except (yaml.YAMLError, RecursionError):
        return None
    if not isinstance(obj, dict):
        return None
    try:
        return yaml.safe_dump(
            obj, default_flow_style=False, sort_keys=True, allow_unicode=True
        )
    except (yaml.YAMLError, RecursionError):
        return body.decode("utf-8", errors="replace")


BODY_CLASSIFIERS: tuple[tuple[str, Classifier], ...] = (
    ("json", sniff_json),
    ("yaml", sniff_yaml),
)

FLAT_FORMAT = "flat"


def sniff_body(body: bytes) -> MeasureBody:
    """Build the body assertion for a raw response body."""
    for fmt, classify in BODY_CLASSIFIERS:
        snippet = classify(body)
        if snippet is not None:
            return MeasureBody(has_format=fmt, includes=snippet)

    # bytes that are not UTF-8 become U+FFFD; the document holds text only
    return MeasureBody(
        has_format=FLAT_FORMAT,
        is_equal_to=body.decode("utf-8", errors="replace"),
        match_with=DEFAULT_MATCH_PATTERN,
    )
