# portal/infrastructure/duckdb_connection.py
from __future__ import annotations

from pathlib import Path

import duckdb

from portal.log import log

from .config import get_settings

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def criar_conexao(path: str = ":memory:") -> duckdb.DuckDBPyConnection:
    """Abre o store, aplica o schema e popula o cadastro fixo se vazio."""
    from .seed import popular

    conn = duckdb.connect(path)
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    row = conn.execute("SELECT count(*) FROM fornecedor").fetchone()
    if row is None or int(row[0]) == 0:
        popular(conn)
        log(f"Store {path} populado com o cadastro de demonstracao")
    return conn


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        _connection = criar_conexao(get_settings().duckdb_path)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn
