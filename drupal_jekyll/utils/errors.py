"""
Structured reports for skipped and written nodes.

The :mod:`drupal_jekyll.utils.errors` module centralizes the writing of
report entries for both skipped and successfully exported nodes.  Each
entry is appended to a JSON Lines file under ``reports/import`` so that
the outcome of a run can be reviewed or parsed afterwards.

Two public functions are provided:

``report_error``
    Record a node that was skipped or could not be exported.  An
    optional exception can be supplied and will be serialized to the log.

``report_ok``
    Record a node that was written.  Additional key/value information
    (typically the written paths) can be attached via ``extra``.

The ``EVENTS`` dictionary maps event codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

# The same lookup is used by :func:`report_error` and :func:`report_ok`.
EVENTS: Dict[str, str] = {
    "POST_WRITTEN": "Blog post written",
    "PAGE_WRITTEN": "Page written",
    "PAGE_WITHOUT_ALIAS": "Page has no URL alias, nothing written",
}

DEFAULT_REPORT_DIR = os.path.join("reports", "import")


def _write_jsonl(path: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``path``."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


def _entry(code: str, post: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "code": code,
        "message": EVENTS.get(code, code),
        "nodeid": post.get("nid"),
        "title": post.get("title"),
    }


def report_error(
    code: str,
    post: Mapping[str, Any],
    exc: Optional[Exception] = None,
    *,
    report_dir: str = DEFAULT_REPORT_DIR,
) -> Dict[str, Any]:
    """Log a skip or failure event for ``post``.

    Parameters
    ----------
    code:
        A key identifying the type of event.  If ``code`` is present in
        :data:`EVENTS` its value will be used as the message.
    post:
        The node row associated with the event.  Only the ``nid`` and
        ``title`` keys are referenced if present.
    exc:
        Optional exception instance that triggered the event.  Its string
        representation is included in the entry.
    report_dir:
        Directory holding ``errors.jsonl``.
    """
    entry = _entry(code, post)
    if exc is not None:
        entry["error"] = str(exc)
    _write_jsonl(os.path.join(report_dir, "errors.jsonl"), entry)
    return entry


def report_ok(
    code: str,
    post: Mapping[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    *,
    report_dir: str = DEFAULT_REPORT_DIR,
) -> Dict[str, Any]:
    """Log a successful event for ``post``.

    Parameters
    ----------
    code:
        A key identifying the type of event.
    post:
        The node row associated with the event.
    extra:
        Optional dictionary of additional fields to merge into the entry.
    report_dir:
        Directory holding ``success.jsonl``.
    """
    entry = _entry(code, post)
    if extra:
        entry.update(extra)
    _write_jsonl(os.path.join(report_dir, "success.jsonl"), entry)
    return entry
