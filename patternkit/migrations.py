"""Checksum-verified SQL migrations on an SQLite database."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from patternkit.sha3sum import sha3_256_of_file


class ChecksumMismatchError(Exception):
    """An already executed migration file has been changed since it ran."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            f"The SHA3 checksum of the file {file_name} does not match "
            "the one recorded in the table."
        )
        self.file_name = file_name


def check_table_exists(connection: sqlite3.Connection) -> bool:
    """Return whether the migration bookkeeping table exists."""
    row = connection.execute(
        "SELECT EXISTS (SELECT 1 FROM sqlite_master "
        "WHERE type = 'table' AND name = 't_migration')"
    ).fetchone()
    return bool(row[0])


def create_migration_table(connection: sqlite3.Connection) -> None:
    """Create the migration bookkeeping table if it is missing."""
    with connection:
        connection.execute(
            """CREATE TABLE IF NOT EXISTS t_migration (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                file_name TEXT NOT NULL UNIQUE,
                checksum_sha3 TEXT NOT NULL,
                executed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )"""
        )


def run_migrations(
    connection: sqlite3.Connection, directory: str | os.PathLike[str] = "./migrations"
) -> None:
    """Execute every new ``.sql`` file in ``directory`` in name order.

    Files that already ran are verified against their recorded checksum;
    a changed file raises :class:`ChecksumMismatchError`.
    """
    entries = sorted(Path(directory).iterdir(), key=lambda entry: entry.name)

    for path in entries:
        file_name = path.name
        print(file_name)

        if path.suffix != ".sql":
            continue

        file_sha3 = sha3_256_of_file(path)
        row = connection.execute(
            "SELECT checksum_sha3 FROM t_migration WHERE file_name = ?",
            (file_name,),
        ).fetchone()

        if row is not None:
            if row[0] != file_sha3:
                raise ChecksumMismatchError(file_name)
            print(f"Already executed and verified: {file_name}")
            continue

        sql_content = path.read_text()
        connection.executescript(sql_content)
        with connection:
            connection.execute(
                "INSERT INTO t_migration (file_name, checksum_sha3) VALUES (?, ?)",
                (file_name, file_sha3),
            )
        print(f"Executed: {file_name}")