"""
File output for the Jekyll site tree.

Every file written here has the same shape: a YAML front matter block
opened and closed by ``---`` lines, followed by the body (empty for
refresh stubs).  Paths are always resolved below the output ``root``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml

from drupal_jekyll.models.drupal_post import DrupalPost
from drupal_jekyll.utils.redirects import canonical_from_alias, strip_leading_slash

PathLike = Union[str, Path]

FRONT_MATTER_BOUNDARY = "---"
SITE_DIRECTORIES = ("_drafts", "_layouts", "blog")
BLOG_DIRECTORY = "blog"
REFRESH_LAYOUT = "refresh"

REFRESH_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="content-type" content="text/html; charset=utf-8" />
<meta http-equiv="refresh" content="0;url={{ page.refresh_to_post_id }}.html" />
</head>
</html>
"""


def bootstrap_site(root: PathLike) -> Path:
    """Create the site directories and (re)write the refresh layout."""
    root_path = Path(root)
    for name in SITE_DIRECTORIES:
        (root_path / name).mkdir(parents=True, exist_ok=True)
    (root_path / "_layouts" / f"{REFRESH_LAYOUT}.html").write_text(REFRESH_TEMPLATE, encoding="utf-8")
    return root_path


def build_front_matter(post: DrupalPost, *, layout: str = "post", author: Optional[str] = None) -> Dict[str, Any]:
    """Ordered front matter for a canonical post or page file."""
    return {
        "layout": layout,
        "title": post.title,
        "nodeid": post.nid,
        "created": post.created,
        "tags": list(post.tags),
        "author": author,
    }


def render_front_matter(data: Mapping[str, Any]) -> str:
    """Serialize ``data`` as a front matter block, closing ``---`` included.

    Keys whose value is ``None`` or an empty string are left out.
    """
    clean = {k: v for k, v in data.items() if v is not None and v != ""}
    text = yaml.safe_dump(
        clean,
        explicit_start=True,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    return text + FRONT_MATTER_BOUNDARY + "\n"


def write_content_file(path: PathLike, front_matter: Mapping[str, Any], body: str = "") -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(render_front_matter(front_matter) + body, encoding="utf-8")
    return file_path


def write_redirect_stub(root: PathLike, legacy_path: str, target: str) -> Path:
    """Write ``<legacy_path>/index.md`` refreshing to ``target``."""
    stub = Path(root) / strip_leading_slash(legacy_path) / "index.md"
    return write_content_file(
        stub, {"layout": REFRESH_LAYOUT, "refresh_to_post_id": target}
    )


def blog_post_location(post: DrupalPost, slug: str, extension: str) -> Tuple[str, str]:
    """Return ``(relative file path, canonical path)`` for a blog post.

    >>> blog_post_location(post, "my-first-post", "md")  # doctest: +SKIP
    ('blog/2009/2009-02-13-my-first-post.md', '/blog/2009/02/13/my-first-post')
    """
    created = post.created_at
    filename = f"{BLOG_DIRECTORY}/{created:%Y}/{created:%Y-%m-%d}-{slug}.{extension}"
    canonical = f"/{BLOG_DIRECTORY}/{created:%Y}/{created:%m}/{created:%d}/{slug}"
    return filename, canonical


def page_location(alias: str, extension: str) -> Tuple[str, str]:
    """Return ``(relative file path, canonical path)`` for a page's first alias."""
    directory = strip_leading_slash(alias)
    parts: List[str] = [p for p in (directory, f"index.{extension}") if p]
    return "/".join(parts), canonical_from_alias(alias)
