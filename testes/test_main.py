import duckdb

from conftest import DrupalDB, read_front_matter
import main


def _snapshot(tmp_path):
    path = str(tmp_path / "drupal.duckdb")
    con = duckdb.connect(path)
    db = DrupalDB(con)
    db.add_node(1, "Welcome", "Hi", type="page")
    db.add_alias(1, "welcome")
    con.close()
    return path


def test_cli_exports_from_duckdb_snapshot(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _snapshot(tmp_path)

    code = main.main(["--duckdb", path, "--output", "site", "--layout", "page", "--config", "missing.json"])

    assert code == 0
    data, body = read_front_matter(tmp_path / "site" / "welcome" / "index.md")
    assert data["layout"] == "page"
    assert body == "Hi"
    assert (tmp_path / "site-reports" / "redirect_map.csv").exists()
    assert not (tmp_path / "site" / "reports").exists()


def test_positional_arguments_override_config():
    args = main.build_parser().parse_args(["drupal", "root", "secret", "--host", "db", "--port", "3307"])
    config = main.apply_overrides({"database": {"name": "other", "table_prefix": "x_"}}, args)
    assert config["database"] == {
        "name": "drupal",
        "user": "root",
        "password": "secret",
        "host": "db",
        "port": 3307,
        "table_prefix": "x_",
    }
    assert config["output"] == {}


def test_missing_database_name_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DRUPAL_DB_NAME", raising=False)
    assert main.main(["--config", "missing.json"]) == 1


def test_connection_failure_exits_with_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = main.main(
        ["drupal", "nobody", "pw", "--host", "127.0.0.1", "--port", "1", "--config", "missing.json", "--reports", "logs"]
    )
    assert code == 1
    log = (tmp_path / "logs" / "import" / "import.log").read_text(encoding="utf-8")
    assert "ERROR: Could not connect" in log
