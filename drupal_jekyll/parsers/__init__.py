"""
Body parsers.

This subpackage prepares Drupal revision bodies for Jekyll: line-ending
normalization, self-closing ``<br/>`` tags and the input-format dispatch
that decides between Markdown and HTML output.
"""

from .body_parser import ContentFormat, content_format, normalize_body, render_body

__all__ = ["ContentFormat", "content_format", "normalize_body", "render_body"]
