"""
Extractors for Drupal databases.

This subpackage reads nodes, URL aliases and taxonomy terms from a live
Drupal MySQL database or from a local DuckDB snapshot of its tables and
hands them to the import tool as plain row dictionaries.
"""

from .drupal_extractor import DrupalSource, SourceConnectionError, SourceQueryError

__all__ = ["DrupalSource", "SourceConnectionError", "SourceQueryError"]
