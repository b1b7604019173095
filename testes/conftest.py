import os
import sys

import duckdb
import pytest
import yaml

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from drupal_jekyll.extractors.drupal_extractor import DrupalSource


SCHEMA = [
    "CREATE TABLE {p}node (nid INTEGER, vid INTEGER, type VARCHAR, title VARCHAR, uid INTEGER, status INTEGER, created BIGINT)",
    "CREATE TABLE {p}node_revisions (nid INTEGER, vid INTEGER, body VARCHAR, format INTEGER)",
    "CREATE TABLE {p}users (uid INTEGER, name VARCHAR)",
    "CREATE TABLE {p}filter_formats (format INTEGER, name VARCHAR)",
    "CREATE TABLE {p}url_alias (pid INTEGER, src VARCHAR, dst VARCHAR)",
    "CREATE TABLE {p}term_node (nid INTEGER, tid INTEGER)",
    "CREATE TABLE {p}term_data (tid INTEGER, name VARCHAR)",
]

FORMATS = {1: "Filtered HTML", 2: "Full HTML", 3: "Markdown", 4: "PHP code"}


class DrupalDB:
    """Small builder for a Drupal 6 style schema inside DuckDB."""

    def __init__(self, con, prefix=""):
        self.con = con
        self.prefix = prefix
        for stmt in SCHEMA:
            con.execute(stmt.format(p=prefix))
        for fid, name in FORMATS.items():
            con.execute(f"INSERT INTO {prefix}filter_formats VALUES (?, ?)", [fid, name])
        con.execute(f"INSERT INTO {prefix}users VALUES (1, 'admin'), (2, 'jdoe')")
        self._pid = 0
        self._tid = 0
        self._tags = {}

    def add_node(self, nid, title, body, *, type="blog", status=1, created=1234567890, fmt=3, uid=1, vid=None):
        vid = vid or nid * 10
        self.con.execute(
            f"INSERT INTO {self.prefix}node VALUES (?, ?, ?, ?, ?, ?, ?)",
            [nid, vid, type, title, uid, status, created],
        )
        self.con.execute(
            f"INSERT INTO {self.prefix}node_revisions VALUES (?, ?, ?, ?)", [nid, vid, body, fmt]
        )

    def add_revision(self, nid, vid, body, fmt=3):
        self.con.execute(
            f"INSERT INTO {self.prefix}node_revisions VALUES (?, ?, ?, ?)", [nid, vid, body, fmt]
        )

    def add_alias(self, nid, dst, pid=None):
        self._pid += 1
        self.con.execute(
            f"INSERT INTO {self.prefix}url_alias VALUES (?, ?, ?)",
            [pid if pid is not None else self._pid, f"node/{nid}", dst],
        )

    def add_tag(self, nid, name):
        if name not in self._tags:
            self._tid += 1
            self._tags[name] = self._tid
            self.con.execute(f"INSERT INTO {self.prefix}term_data VALUES (?, ?)", [self._tid, name])
        self.con.execute(f"INSERT INTO {self.prefix}term_node VALUES (?, ?)", [nid, self._tags[name]])

    def source(self):
        return DrupalSource(self.con, placeholder="?", table_prefix=self.prefix)


@pytest.fixture
def drupal_db():
    con = duckdb.connect()
    yield DrupalDB(con)
    con.close()


@pytest.fixture
def import_config(tmp_path):
    return {
        "output": {
            "directory": str(tmp_path / "site"),
            "layout": "post",
            "reports_dir": str(tmp_path / "reports"),
        },
        "authors": {"admin": "site-owner"},
    }


def read_front_matter(path):
    """Split a written file into (front matter dict, body)."""
    text = path.read_text(encoding="utf-8")
    assert text.startswith("---\n")
    head, body = text[4:].split("\n---\n", 1)
    return yaml.safe_load(head), body
