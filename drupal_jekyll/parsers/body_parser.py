from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

_BARE_BR_RE = re.compile(r"<br>", re.IGNORECASE)
LINE_BREAK = "<br/>"


class ContentFormat(NamedTuple):
    extension: str
    add_line_breaks: bool


MARKDOWN = ContentFormat("md", False)
HTML = ContentFormat("html", False)
HTML_WITH_BREAKS = ContentFormat("html", True)

# Drupal input format names (case-folded) with a non-default output
FORMATS: Mapping[str, ContentFormat] = MappingProxyType(
    {
        "markdown": MARKDOWN,
        "filtered html": HTML_WITH_BREAKS,
        "full html": HTML_WITH_BREAKS,
    }
)


def normalize_body(body: Optional[str]) -> str:
    """Convert CRLF/CR line endings to LF and self-close bare ``<br>`` tags."""
    if not body:
        return ""
    text = body.replace("\r\n", "\n").replace("\r", "\n")
    return _BARE_BR_RE.sub(LINE_BREAK, text)


def content_format(format_name: Optional[str], formats: Mapping[str, ContentFormat] = FORMATS) -> ContentFormat:
    """Look up the output format for a Drupal input format name."""
    key = (format_name or "").strip().casefold()
    return formats.get(key, HTML)


def add_line_breaks(body: str) -> str:
    """Insert a break tag after every line terminator."""
    return body.replace("\n", "\n" + LINE_BREAK)


def render_body(
    body: Optional[str], format_name: Optional[str], formats: Mapping[str, ContentFormat] = FORMATS
) -> Tuple[str, str]:
    """Return ``(extension, body)`` ready to be written under the front matter."""
    fmt = content_format(format_name, formats)
    text = normalize_body(body)
    if fmt.add_line_breaks:
        text = add_line_breaks(text)
    return fmt.extension, text
