import argparse
import os

import duckdb
import pandas as pd
import pymysql

from drupal_jekyll.utils.pre_flight_checks import REQUIRED_TABLES


def snapshot_tables(mysql_con, duck_con, table_prefix=""):
    """
    Copies every Drupal table read by the import from MySQL into DuckDB.
    Tables already present in the snapshot are left untouched.
    """
    existing_tables = {row[0] for row in duck_con.execute("SHOW TABLES;").fetchall()}
    copied = []
    for name in REQUIRED_TABLES:
        table_name = f"{table_prefix}{name}"
        if table_name in existing_tables:
            print(f"Table '{table_name}' already exists. Skipping.")
            continue

        print(f"Reading table '{table_name}' from MySQL...")
        df = pd.read_sql(f"SELECT * FROM {table_name}", mysql_con)

        duck_con.register("df_temp", df)
        duck_con.execute(f"CREATE TABLE {table_name} AS SELECT * FROM df_temp")
        duck_con.unregister("df_temp")
        print(f"Table '{table_name}' created with {len(df)} rows.")
        copied.append(table_name)
    return copied


def main():
    parser = argparse.ArgumentParser(description="Snapshot the Drupal tables into a DuckDB file")
    parser.add_argument("host", help="DB Server Host")
    parser.add_argument("port", type=int, help="DB Service Port")
    parser.add_argument("user", help="User name")
    parser.add_argument("password", help="Password")
    parser.add_argument("database", help="Database")
    parser.add_argument("--out", default="data/drupal.duckdb", help="DuckDB file to write")
    parser.add_argument("--prefix", default="", help="Drupal table prefix")
    args = parser.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    mysql_con = pymysql.connect(
        host=args.host,
        port=args.port,
        user=args.user,
        password=args.password,
        db=args.database,
        charset="utf8mb4",
    )
    duck_con = duckdb.connect(database=args.out, read_only=False)
    try:
        snapshot_tables(mysql_con, duck_con, args.prefix)
    finally:
        duck_con.close()
        mysql_con.close()
        print("Connections closed.")


if __name__ == "__main__":
    main()
