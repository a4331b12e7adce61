"""HTTP product API with database migrations applied at start-up."""

from __future__ import annotations

import argparse
import os
import sqlite3
import sys

from flask import Flask, Response

from patternkit.migrations import (
    ChecksumMismatchError,
    check_table_exists,
    create_migration_table,
    run_migrations,
)
from patternkit.products import list_products


def create_app() -> Flask:
    """Build the application with the product routes mounted at ``/``."""
    app = Flask(__name__)

    @app.get("/products")
    def list_route() -> Response:
        return Response(list_products(), mimetype="text/plain")

    @app.post("/products")
    def create_route() -> Response:
        return Response("Product created", mimetype="text/plain")

    return app


def prepare_database(
    connection: sqlite3.Connection, directory: str | os.PathLike[str] = "./migrations"
) -> None:
    """Ensure the migration table exists and apply pending migrations."""
    if not check_table_exists(connection):
        create_migration_table(connection)
    run_migrations(connection, directory)


def main(argv: list[str] | None = None) -> int:
    """Migrate the database and serve the API."""
    parser = argparse.ArgumentParser(description="Serve the product API.")
    parser.add_argument("--database", default="app.db", help="SQLite database file")
    parser.add_argument(
        "--migrations", default="./migrations", help="directory of .sql migrations"
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    try:
        connection = sqlite3.connect(args.database)
        try:
            prepare_database(connection, args.migrations)
        finally:
            connection.close()
    except (OSError, sqlite3.Error, ChecksumMismatchError) as error:
        print(f"Error preparing the database: {error}", file=sys.stderr)
        return 1

    create_app().run(host=args.host, port=args.port)
    return 0