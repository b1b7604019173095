"""
High-level orchestration of the Drupal → Jekyll import.

This module defines a :class:`DrupalImportTool` class that ties together
the extractor, body parser, writers and utilities into a complete
pipeline.  It reads every blog, story and page node from the Drupal
database, writes a Jekyll file for each published one, leaves refresh
stubs at the legacy ``node/<nid>`` path and at every URL alias, and
finishes with a redirect map report.

Configuration is supplied via a JSON file path or directly as a
dictionary.  The ``database`` section holds the connection settings
(or ``duckdb_path`` for a local snapshot), ``output`` controls the site
directory, default layout and reports directory (kept outside the site
tree, next to it by default), and ``authors`` maps Drupal user names to
Jekyll author ids.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from drupal_jekyll.extractors.drupal_extractor import DrupalSource
from drupal_jekyll.models.drupal_post import DrupalPost
from drupal_jekyll.parsers.body_parser import render_body
from drupal_jekyll.utils.authors import AuthorMap
from drupal_jekyll.utils.errors import report_error, report_ok
from drupal_jekyll.utils.pre_flight_checks import run_source_pre_flight_checks
from drupal_jekyll.utils.redirects import generate_redirects_csv, node_path
from drupal_jekyll.utils.slugs import slugify
from drupal_jekyll.writers.jekyll_writer import (
    blog_post_location,
    bootstrap_site,
    build_front_matter,
    page_location,
    write_content_file,
    write_redirect_stub,
)


def default_reports_dir(output_dir: Path) -> str:
    """Directory next to the site tree, e.g. ``site-reports`` beside ``site``."""
    site = Path(output_dir).resolve()
    return str(site.parent / f"{site.name}-reports")


class DrupalImportTool:
    """
    Encapsulates all state and behavior required to export a Drupal site
    into a Jekyll tree.  This class is responsible for reading
    configuration, opening the source database, dispatching each node to
    the blog or page handling and recording what was written.  Per-node
    outcomes are recorded using the :mod:`drupal_jekyll.utils.errors`
    module.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif config is None:
            config = {}

        config.setdefault("database", {})
        config["database"].setdefault("host", os.getenv("DRUPAL_DB_HOST", "localhost"))
        config["database"].setdefault("port", int(os.getenv("DRUPAL_DB_PORT", "3306")))
        config["database"].setdefault("user", os.getenv("DRUPAL_DB_USER", ""))
        config["database"].setdefault("password", os.getenv("DRUPAL_DB_PASSWORD", ""))
        config["database"].setdefault("name", os.getenv("DRUPAL_DB_NAME", ""))
        config["database"].setdefault("table_prefix", "")
        config["database"].setdefault("duckdb_path", None)

        config.setdefault("output", {})
        config["output"].setdefault("directory", ".")
        config["output"].setdefault("layout", "post")
        config["output"].setdefault("reports_dir", None)

        config.setdefault("authors", {})

        self.config = config
        self.output_dir = Path(config["output"]["directory"])
        self.layout: str = config["output"]["layout"]
        self.reports_dir: str = config["output"]["reports_dir"] or default_reports_dir(self.output_dir)
        self.import_report_dir = os.path.join(self.reports_dir, "import")
        self.authors = AuthorMap(config["authors"])
        self.redirects: List[Dict[str, str]] = []
        self.written: List[str] = []

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(self.import_report_dir, exist_ok=True)
        with open(os.path.join(self.import_report_dir, "import.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def open_source(self) -> DrupalSource:
        db = self.config["database"]
        if db.get("duckdb_path"):
            self.log_message(f"Opening DuckDB snapshot {db['duckdb_path']}")
            return DrupalSource.open_duckdb(db["duckdb_path"], table_prefix=db["table_prefix"])
        self.log_message(f"Connecting to MySQL database '{db['name']}' at {db['host']}:{db['port']}")
        return DrupalSource.connect_mysql(
            host=db["host"],
            port=db["port"],
            user=db["user"],
            password=db["password"],
            database=db["name"],
            table_prefix=db["table_prefix"],
        )

    def run(self, source: Optional[DrupalSource] = None) -> None:
        """
        Export every published node from ``source`` into the output
        directory.  When ``source`` is omitted the database named in the
        configuration is opened, and closed again at the end of the run.

        Connection, query and filesystem failures propagate and abort the
        run.  Unpublished nodes are skipped without touching the site tree;
        pages without aliases are only reported.
        """
        owns_source = source is None
        if source is None:
            source = self.open_source()
        try:
            run_source_pre_flight_checks(source)
            bootstrap_site(self.output_dir)

            rows = source.fetch_posts()
            self.log_message(f"Found {len(rows)} nodes in the Drupal database.")
            exported = 0
            for row in rows:
                post = DrupalPost.model_validate(row)
                if not post.is_published:
                    self.log_message(f"Skipping unpublished node {post.nid}.", level="DEBUG")
                    continue
                print(".", end="", flush=True)
                post.tags = source.fetch_tags(post.nid)
                if post.is_blog:
                    self.process_blog_post(source, post)
                else:
                    self.process_page(source, post)
                exported += 1
            print()
            self.log_message(f"Exported {exported} published nodes, {len(self.redirects)} redirect stubs.")

            out_path = generate_redirects_csv(
                self.redirects, out_path=os.path.join(self.reports_dir, "redirect_map.csv")
            )
            self.log_message(f"Redirect map written to {out_path}")
        finally:
            if owns_source:
                source.close()

    def _front_matter(self, post: DrupalPost) -> Dict[str, Any]:
        return build_front_matter(post, layout=self.layout, author=self.authors.resolve(post.author))

    def _stub(self, legacy_path: str, target: str) -> Path:
        path = write_redirect_stub(self.output_dir, legacy_path, target)
        self.redirects.append({"OldPath": legacy_path, "NewPath": target})
        return path

    def process_blog_post(self, source: DrupalSource, post: DrupalPost) -> Path:
        extension, body = render_body(post.body, post.format_name)
        slug = slugify(post.title)
        filename, canonical = blog_post_location(post, slug, extension)

        path = write_content_file(self.output_dir / filename, self._front_matter(post), body)
        self.written.append(filename)

        for alias in source.fetch_aliases(post.nid):
            self._stub(alias, canonical)
        self._stub(node_path(post.nid), canonical)

        report_ok(
            "POST_WRITTEN",
            post.report_fields(),
            {"path": filename, "canonical": canonical},
            report_dir=self.import_report_dir,
        )
        return path

    def process_page(self, source: DrupalSource, post: DrupalPost) -> Optional[Path]:
        extension, body = render_body(post.body, post.format_name)
        aliases = source.fetch_aliases(post.nid)
        if not aliases:
            report_error("PAGE_WITHOUT_ALIAS", post.report_fields(), report_dir=self.import_report_dir)
            return None

        filename, canonical = page_location(aliases[0], extension)
        path = write_content_file(self.output_dir / filename, self._front_matter(post), body)
        self.written.append(filename)

        for alias in aliases[1:]:
            self._stub(alias, canonical)
        self._stub(node_path(post.nid), canonical)

        report_ok(
            "PAGE_WRITTEN",
            post.report_fields(),
            {"path": filename, "canonical": canonical},
            report_dir=self.import_report_dir,
        )
        return path
