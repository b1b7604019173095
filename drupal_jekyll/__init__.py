"""
Top-level package for the Drupal → Jekyll import utility.

This package bundles all components required to read published nodes
from a Drupal database, normalize their bodies, render Jekyll front
matter and write the resulting site tree together with redirect stubs
for every legacy URL.  Modules are split into subpackages:

* :mod:`drupal_jekyll.extractors` – database access (MySQL or DuckDB snapshot)
* :mod:`drupal_jekyll.models` – the pydantic model of a joined node row
* :mod:`drupal_jekyll.parsers` – body normalization and format dispatch
* :mod:`drupal_jekyll.writers` – front matter rendering and file output
* :mod:`drupal_jekyll.utils` – slugs, tags, authors, reports and redirects

Orchestration is handled in :mod:`drupal_jekyll.import_tool`.
"""

__version__ = "0.1.0"
