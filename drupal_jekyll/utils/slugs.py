from __future__ import annotations

import re

_AMPERSAND_RE = re.compile(r"&amp;|&")
# Periods are dropped rather than dashed: "Friends.txt" -> "friendstxt"
_SEPARATOR_RE = re.compile(r"[\s/\\]+")
_DISALLOWED_RE = re.compile(r"[^\w-]")
_REPEAT_RE = re.compile(r"[-_]{2,}")


def slugify(title: str) -> str:
    """
    Derive a URL-safe slug from a node title.

    - Trims and lowercases the title
    - Replaces ``&`` and ``&amp;`` with the word "and"
    - Turns runs of whitespace and slashes into a single dash
    - Drops every character outside word characters and ``-`` (periods
      included, so ``friends.txt`` becomes ``friendstxt``)
    - Collapses runs of ``-``/``_`` into one dash and strips them from
      both ends

    The result may be empty when the title holds no word characters.
    """
    if not title:
        return ""
    text = title.strip().lower()
    text = _AMPERSAND_RE.sub(" and ", text)
    text = _SEPARATOR_RE.sub("-", text)
    text = _DISALLOWED_RE.sub("", text)
    text = _REPEAT_RE.sub("-", text)
    return text.strip("-_")
