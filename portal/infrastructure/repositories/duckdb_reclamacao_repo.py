# portal/infrastructure/repositories/duckdb_reclamacao_repo.py
from __future__ import annotations

import duckdb

from portal.domain.ocorrencia.entities import Reclamacao
from portal.domain.ocorrencia.enums import StatusReclamacao, TipoOcorrencia

_COLUNAS = (
    "id, fornecedor_nome, fornecedor_email, data, tipo, descricao, status, "
    "resposta_email, resposta_texto"
)


class DuckDBReclamacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self, status: StatusReclamacao | None = None) -> list[Reclamacao]:
        if status is None:
            rows = self._conn.execute(
                f"SELECT {_COLUNAS} FROM reclamacao ORDER BY posicao",
            ).fetchall()
        else:
            rows = self._conn.execute(
                f"SELECT {_COLUNAS} FROM reclamacao WHERE status = ? ORDER BY posicao",
                [status.value],
            ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, reclamacao_id: str) -> Reclamacao | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM reclamacao WHERE id = ?",
            [reclamacao_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def salvar(self, reclamacao: Reclamacao) -> None:
        r = reclamacao
        existe = self._conn.execute(
            "SELECT 1 FROM reclamacao WHERE id = ?", [r.id],
        ).fetchone()
        if existe:
            self._conn.execute(
                """UPDATE reclamacao SET status = ?, resposta_email = ?, resposta_texto = ?
                   WHERE id = ?""",
                [r.status.value, r.resposta_email, r.resposta_texto, r.id],
            )
            return
        row = self._conn.execute("SELECT coalesce(max(posicao), 0) FROM reclamacao").fetchone()
        posicao = (int(row[0]) if row else 0) + 1
        self._conn.execute(
            f"INSERT INTO reclamacao (posicao, {_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                posicao, r.id, r.fornecedor_nome, r.fornecedor_email, r.data, r.tipo.value,
                r.descricao, r.status.value, r.resposta_email, r.resposta_texto,
            ],
        )

    def contar_pendentes(self) -> int:
        row = self._conn.execute(
            "SELECT count(*) FROM reclamacao WHERE status = ?",
            [StatusReclamacao.PENDENTE.value],
        ).fetchone()
        return int(row[0]) if row else 0

    def _hidratar(self, row: tuple) -> Reclamacao:  # type: ignore[type-arg]
        return Reclamacao(
            id=str(row[0]),
            fornecedor_nome=str(row[1]),
            fornecedor_email=str(row[2]),
            data=row[3],
            tipo=TipoOcorrencia(str(row[4])),
            descricao=str(row[5]),
            status=StatusReclamacao(str(row[6])),
            resposta_email=str(row[7]) if row[7] is not None else None,
            resposta_texto=str(row[8]) if row[8] is not None else None,
        )
