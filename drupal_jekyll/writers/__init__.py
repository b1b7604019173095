"""
Writers for the Jekyll site tree.

This subpackage renders YAML front matter and writes canonical post and
page files, refresh stubs and the ``_layouts/refresh.html`` template.
"""

from .jekyll_writer import (
    bootstrap_site,
    build_front_matter,
    render_front_matter,
    write_content_file,
    write_redirect_stub,
)

__all__ = [
    "bootstrap_site",
    "build_front_matter",
    "render_front_matter",
    "write_content_file",
    "write_redirect_stub",
]
