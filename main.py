"""
Entry point for the Drupal to Jekyll import tool.
"""

import argparse
import json
import os
import sys

from drupal_jekyll.extractors.drupal_extractor import SourceConnectionError, SourceQueryError
from drupal_jekyll.import_tool import DrupalImportTool
from drupal_jekyll.utils.pre_flight_checks import PreFlightCheckError

CONFIG_FILE = "config/import_config.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export a Drupal site into a Jekyll directory tree")
    parser.add_argument("dbname", nargs="?", help="Drupal database name")
    parser.add_argument("user", nargs="?", help="Database user")
    parser.add_argument("password", nargs="?", help="Database password")
    parser.add_argument("--host", help="Database host (default: localhost)")
    parser.add_argument("--port", type=int, help="Database port (default: 3306)")
    parser.add_argument("--prefix", help="Drupal table prefix")
    parser.add_argument("--duckdb", help="Read from a DuckDB snapshot instead of MySQL")
    parser.add_argument("--output", help="Site directory to write into (default: current directory)")
    parser.add_argument("--reports", help="Directory for logs and reports (default: <output>-reports next to the site)")
    parser.add_argument("--layout", help="Front matter layout for exported nodes (default: post)")
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON configuration file")
    return parser


def load_config(path: str) -> dict:
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return {}


def apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    database = config.setdefault("database", {})
    output = config.setdefault("output", {})
    for key, value in (
        ("name", args.dbname),
        ("user", args.user),
        ("password", args.password),
        ("host", args.host),
        ("port", args.port),
        ("table_prefix", args.prefix),
        ("duckdb_path", args.duckdb),
    ):
        if value is not None:
            database[key] = value
    if args.output is not None:
        output["directory"] = args.output
    if args.layout is not None:
        output["layout"] = args.layout
    if args.reports is not None:
        output["reports_dir"] = args.reports
    return config


def main(argv=None) -> int:
    """
    Main function to run the Drupal to Jekyll import tool.
    """
    args = build_parser().parse_args(argv)
    tool = DrupalImportTool(apply_overrides(load_config(args.config), args))
    tool.log_message("Starting Drupal to Jekyll import.")

    if not tool.config["database"].get("duckdb_path") and not tool.config["database"].get("name"):
        tool.log_message("No database name given and no DuckDB snapshot configured.", level="ERROR")
        return 1

    try:
        tool.run()
    except (SourceConnectionError, SourceQueryError, PreFlightCheckError) as e:
        tool.log_message(str(e), level="ERROR")
        return 1

    tool.log_message("Import process finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
