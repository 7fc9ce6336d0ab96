# portal/infrastructure/repositories/duckdb_pedido_repo.py
from __future__ import annotations

import duckdb


class DuckDBPedidoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def fornecedor_do_pedido(self, identificador: str) -> str | None:
        """Match exato; o chamador normaliza para maiusculas."""
        row = self._conn.execute(
            "SELECT fornecedor_id FROM pedido WHERE identificador = ?",
            [identificador],
        ).fetchone()
        return str(row[0]) if row else None

    def pedidos_do_fornecedor(self, fornecedor_id: str) -> list[str]:
        rows = self._conn.execute(
            "SELECT identificador FROM pedido WHERE fornecedor_id = ? ORDER BY identificador",
            [fornecedor_id],
        ).fetchall()
        return [str(r[0]) for r in rows]

    def associar(self, identificador: str, fornecedor_id: str) -> None:
        self._conn.execute(
            "INSERT INTO pedido VALUES (?, ?)",
            [identificador.strip().upper(), fornecedor_id],
        )
