import sqlite3

import pytest

from patternkit.api import create_app, main, prepare_database
from patternkit.migrations import check_table_exists


@pytest.fixture
def client():
    return create_app().test_client()


def test_get_products_lists_names(client):
    response = client.get("/products")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Product A, Product B"
    assert response.mimetype == "text/plain"


def test_post_products_confirms_creation(client):
    response = client.post("/products")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Product created"


def test_unknown_method_is_rejected(client):
    response = client.delete("/products")
    assert response.status_code == 405


def test_prepare_database_creates_table_and_migrates(tmp_path):
    directory = tmp_path / "migrations"
    directory.mkdir()
    (directory / "001.sql").write_text("CREATE TABLE thing (id INTEGER);")
    connection = sqlite3.connect(":memory:")
    try:
        assert check_table_exists(connection) is False
        prepare_database(connection, directory)
        assert check_table_exists(connection) is True
        files = [r[0] for r in connection.execute("SELECT file_name FROM t_migration")]
        assert files == ["001.sql"]
    finally:
        connection.close()


def test_prepare_database_twice_keeps_single_record(tmp_path):
    directory = tmp_path / "migrations"
    directory.mkdir()
    (directory / "001.sql").write_text("CREATE TABLE thing (id INTEGER);")
    connection = sqlite3.connect(":memory:")
    try:
        prepare_database(connection, directory)
        prepare_database(connection, directory)
        count = connection.execute("SELECT COUNT(*) FROM t_migration").fetchone()[0]
        assert count == 1
    finally:
        connection.close()


def test_main_reports_missing_migrations_directory(tmp_path, capsys):
    status = main(
        [
            "--database",
            str(tmp_path / "app.db"),
            "--migrations",
            str(tmp_path / "absent"),
        ]
    )
    assert status == 1
    assert "Error preparing the database" in capsys.readouterr().err


def test_main_reports_checksum_mismatch(tmp_path, capsys):
    directory = tmp_path / "migrations"
    directory.mkdir()
    migration = directory / "001.sql"
    migration.write_text("CREATE TABLE thing (id INTEGER);")
    database = tmp_path / "app.db"
    connection = sqlite3.connect(database)
    try:
        prepare_database(connection, directory)
    finally:
        connection.close()
    migration.write_text("CREATE TABLE other (id INTEGER);")
    status = main(["--database", str(database), "--migrations", str(directory)])
    assert status == 1
    assert "001.sql" in capsys.readouterr().err