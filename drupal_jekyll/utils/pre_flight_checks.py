from __future__ import annotations

from typing import Iterable, List

# Tables touched by the post, alias and tag queries
REQUIRED_TABLES = (
    "node",
    "node_revisions",
    "users",
    "filter_formats",
    "url_alias",
    "term_node",
    "term_data",
)


class PreFlightCheckError(Exception):
    """Custom exception for pre-flight check failures."""
    pass


def run_source_pre_flight_checks(source, tables: Iterable[str] = REQUIRED_TABLES) -> None:
    """
    Verifies that the Drupal database exposes every table the import reads.

    Args:
        source: An open :class:`~drupal_jekyll.extractors.drupal_extractor.DrupalSource`.
        tables: Unprefixed table names to look for.

    Raises:
        PreFlightCheckError: If any table is missing.
    """
    existing = {name.lower() for name in source.existing_tables()}
    missing: List[str] = [
        source.table(name) for name in tables if source.table(name).lower() not in existing
    ]
    if missing:
        raise PreFlightCheckError(
            "Missing tables in the Drupal database: " + ", ".join(missing)
        )
