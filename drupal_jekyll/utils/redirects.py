"""
Legacy path helpers and the redirect map report.

Every exported node leaves refresh stubs behind at its old Drupal paths
(``node/<nid>`` and each URL alias).  The helpers here normalize those
paths and :func:`generate_redirects_csv` writes the full list of stubs
to a CSV file so the mapping can also be configured as server-side 301
redirects.
"""

from __future__ import annotations

import csv
import os
from typing import Dict, Iterable


def node_path(nid: int) -> str:
    """Return the Drupal system path of a node, e.g. ``node/42``."""
    return f"node/{nid}"


def strip_leading_slash(path: str) -> str:
    """Remove a single leading ``/`` from an alias destination."""
    return path[1:] if path.startswith("/") else path


def canonical_from_alias(alias: str) -> str:
    """Turn an alias destination into the site-absolute canonical path."""
    return "/" + strip_leading_slash(alias)


def generate_redirects_csv(
    redirects: Iterable[Dict[str, str]], *, out_path: str = "reports/redirect_map.csv"
) -> str:
    """Generate a CSV mapping legacy Drupal paths to their new locations.

    Parameters
    ----------
    redirects:
        Iterable of dictionaries with ``OldPath`` and ``NewPath`` keys.
    out_path:
        Location of the CSV file to be written.  The parent directory is
        created automatically.

    Returns
    -------
    str
        The path of the generated CSV file.
    """
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["OldPath", "NewPath"])
        for redirect in redirects:
            old_path = "/" + strip_leading_slash(redirect.get("OldPath", ""))
            writer.writerow([old_path, redirect.get("NewPath", "")])
    return out_path
