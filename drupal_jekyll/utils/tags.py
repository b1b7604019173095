from __future__ import annotations

from typing import Iterable, List, Optional


def _normalize_label(value: Optional[str]) -> str:
    """Trim and case-fold; the label text is otherwise kept as stored."""
    if not value:
        return ""
    return value.strip().casefold()


def normalize_tags(labels: Optional[Iterable[Optional[str]]]) -> List[str]:
    """
    Normalize the taxonomy terms joined to a node.

    - Trims surrounding spaces and case-folds
    - Drops empty labels
    - Deduplicates while preserving first-seen order

    Entities and inner whitespace are left alone, so ``R&amp;D`` stays
    ``r&amp;d``.  Returns a list suitable for the ``tags`` key of the
    front matter.
    """
    if not labels:
        return []

    seen = set()
    result: List[str] = []
    for raw in labels:
        label = _normalize_label(raw)
        if label and label not in seen:
            seen.add(label)
            result.append(label)
    return result
