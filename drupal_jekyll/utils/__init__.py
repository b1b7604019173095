"""
Utility helpers used by the import tool.

This subpackage exposes slugification, tag normalization, the author
lookup, structured reports and redirect map generation.
"""

from .authors import AuthorMap
from .errors import EVENTS, report_error, report_ok
from .redirects import generate_redirects_csv
from .slugs import slugify
from .tags import normalize_tags

__all__ = [
    "AuthorMap",
    "EVENTS",
    "report_error",
    "report_ok",
    "generate_redirects_csv",
    "slugify",
    "normalize_tags",
]
