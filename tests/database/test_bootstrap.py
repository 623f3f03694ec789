from pathlib import Path

from payroll_system.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_iter_sql_statements_respects_quotes_and_comments():
    sql = """
    -- comment; with a semicolon
    INSERT INTO t VALUES ('a;b');
    INSERT INTO t VALUES ("it\\'s; fine");
    SELECT 1
    """

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("it\\\'s; fine")',
        "SELECT 1",
    ]


def test_schema_file_splits_into_create_tables():
    schema = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
    statements = list(iter_sql_statements(_strip_create_db_and_use(schema.read_text(encoding="utf-8"))))

    assert len(statements) == 4
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
