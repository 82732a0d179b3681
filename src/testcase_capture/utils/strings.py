"""String and label normalization helpers."""

import re

from testcase_capture.core.errors import InvalidTagOrVersionLabel

VERSION_PATTERN = r"[v]?((\d+\.)?(\d+\.)?(\*|\d+))"
TAG_PATTERN = r"[a-zA-Z][a-zA-Z0-9_\-]*"
TAG_CHAR_PATTERN = r"[^a-zA-Z0-9_\-]"

_version_re = re.compile(VERSION_PATTERN)
_tag_re = re.compile(f"^{TAG_PATTERN}$")
_tag_char_re = re.compile(TAG_CHAR_PATTERN)


def url_join(root: str, path: str) -> str:
    """Join an endpoint root and a path with exactly one slash between them."""
    if not path:
        return root
    if not root:
        return path
    return root.rstrip("/") + "/" + path.lstrip("/")


def standardize_version(version: str) -> str:
    """Strip the optional ``v`` prefix from version labels (``v1.2`` -> ``1.2``)."""
    return _version_re.sub(r"\1", version)


def standardize_tag_label(tag: str) -> str:
    """Replace unsupported characters with ``_`` and validate the result.

    Raises:
        InvalidTagOrVersionLabel: If the normalized label is still invalid
    """
    tag = _tag_char_re.sub("_", tag)
    if not _tag_re.match(tag):
        raise InvalidTagOrVersionLabel(f"Tag label [{tag}] is invalid", label=tag)
    return tag


def convert_tab_to_spaces(block: str, dedent: int = 0) -> str:
    """Remove the common leading-tab indent and expand remaining tabs.

    Args:
        block: Multi-line text block
        dedent: Maximum number of leading tabs to strip; 0 strips the
            whole common indent

    Returns:
        The de-indented block with each remaining tab turned into two spaces
    """
    lines = block.split("\n")

    indent = -1
    for line in lines:
        tabs = len(line) - len(line.lstrip("\t"))
        if indent < 0 or indent > tabs:
            indent = tabs
    if indent < 0:
        indent = 0

    if dedent == 0 or dedent > indent:
        dedent = indent

    return "\n".join(line[dedent:].replace("\t", "  ") for line in lines)
