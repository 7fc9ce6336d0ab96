# portal/infrastructure/repositories/duckdb_fornecedor_repo.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import duckdb

from portal.domain.fornecedor.entities import Fornecedor, RegistroAdvertencia
from portal.domain.fornecedor.value_objects import CNPJ, Criterios, ItemPedido

_COLUNAS = (
    "id, nome, cnpj, contato, nota_media, qualidade, entrega, suporte, "
    "volume, ocorrencias, segmento, advertencias, bloqueado, ultima_auditoria"
)


class DuckDBFornecedorRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, fornecedor_id: str) -> Fornecedor | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM fornecedor WHERE id = ?",
            [fornecedor_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar(self) -> list[Fornecedor]:
        """Ordem de insercao. O ranking ordena por nota em cima disto."""
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM fornecedor ORDER BY ordem",
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_nome_ou_cnpj(self, query: str) -> list[Fornecedor]:
        """Nome ILIKE, CNPJ formatado LIKE ou digitos do CNPJ LIKE."""
        termo = query.strip()
        digitos = "".join(c for c in termo if c.isdigit())
        rows = self._conn.execute(
            f"""SELECT {_COLUNAS} FROM fornecedor
               WHERE nome ILIKE ? OR cnpj LIKE ?
                  OR (? <> '' AND regexp_replace(cnpj, '[^0-9]', '', 'g') LIKE ?)
               ORDER BY ordem""",
            [f"%{termo}%", f"%{termo}%", digitos, f"%{digitos}%"],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def salvar(self, fornecedor: Fornecedor) -> None:
        """Grava o agregado inteiro (linha + itens + historico) numa transacao."""
        self._conn.begin()
        try:
            existe = self._conn.execute(
                "SELECT 1 FROM fornecedor WHERE id = ?", [fornecedor.id],
            ).fetchone()
            if existe:
                self._atualizar(fornecedor)
            else:
                self._inserir(fornecedor)
            self._reescrever_filhas(fornecedor)
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _inserir(self, f: Fornecedor) -> None:
        row = self._conn.execute("SELECT coalesce(max(ordem), 0) FROM fornecedor").fetchone()
        ordem = (int(row[0]) if row else 0) + 1
        self._conn.execute(
            f"""INSERT INTO fornecedor (ordem, {_COLUNAS})
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            [
                ordem, f.id, f.nome, f.cnpj.formatado, f.contato,
                f.nota_media, f.criterios.qualidade, f.criterios.entrega, f.criterios.suporte,
                f.volume, f.ocorrencias, f.segmento, f.advertencias, f.bloqueado,
                f.ultima_auditoria,
            ],
        )

    def _atualizar(self, f: Fornecedor) -> None:
        self._conn.execute(
            """UPDATE fornecedor SET
                 nome = ?, cnpj = ?, contato = ?, nota_media = ?,
                 qualidade = ?, entrega = ?, suporte = ?, volume = ?,
                 ocorrencias = ?, segmento = ?, advertencias = ?, bloqueado = ?,
                 ultima_auditoria = ?
               WHERE id = ?""",
            [
                f.nome, f.cnpj.formatado, f.contato, f.nota_media,
                f.criterios.qualidade, f.criterios.entrega, f.criterios.suporte, f.volume,
                f.ocorrencias, f.segmento, f.advertencias, f.bloqueado,
                f.ultima_auditoria, f.id,
            ],
        )

    def _reescrever_filhas(self, f: Fornecedor) -> None:
        self._conn.execute("DELETE FROM fornecedor_item WHERE fornecedor_id = ?", [f.id])
        self._conn.execute("DELETE FROM advertencia WHERE fornecedor_id = ?", [f.id])
        if f.itens:
            self._conn.executemany(
                "INSERT INTO fornecedor_item VALUES (?, ?, ?, ?, ?, ?)",
                [
                    [f.id, pos, i.id, i.nome, i.quantidade, i.unidade]
                    for pos, i in enumerate(f.itens)
                ],
            )
        if f.historico_advertencias:
            self._conn.executemany(
                "INSERT INTO advertencia VALUES (?, ?, ?, ?, ?)",
                [
                    [f.id, pos, r.data, r.motivo, r.gestor]
                    for pos, r in enumerate(f.historico_advertencias)
                ],
            )

    def _itens(self, fornecedor_id: str) -> tuple[ItemPedido, ...]:
        rows = self._conn.execute(
            """SELECT item_id, nome, quantidade, unidade FROM fornecedor_item
               WHERE fornecedor_id = ? ORDER BY posicao""",
            [fornecedor_id],
        ).fetchall()
        return tuple(
            ItemPedido(id=str(r[0]), nome=str(r[1]), quantidade=int(r[2]), unidade=str(r[3]))
            for r in rows
        )

    def _historico(self, fornecedor_id: str) -> tuple[RegistroAdvertencia, ...]:
        rows = self._conn.execute(
            """SELECT data, motivo, gestor FROM advertencia
               WHERE fornecedor_id = ? ORDER BY posicao""",
            [fornecedor_id],
        ).fetchall()
        return tuple(
            RegistroAdvertencia(data=r[0], motivo=str(r[1]), gestor=str(r[2]))
            for r in rows
        )

    def _hidratar(self, row: tuple) -> Fornecedor:  # type: ignore[type-arg]
        """Colunas: id(0), nome(1), cnpj(2), contato(3), nota_media(4),
        qualidade(5), entrega(6), suporte(7), volume(8), ocorrencias(9),
        segmento(10), advertencias(11), bloqueado(12), ultima_auditoria(13)"""
        fornecedor_id = str(row[0])
        return Fornecedor(
            id=fornecedor_id,
            nome=str(row[1]),
            cnpj=CNPJ(str(row[2])),
            contato=str(row[3]),
            nota_media=Decimal(str(row[4])),
            criterios=Criterios(
                qualidade=Decimal(str(row[5])),
                entrega=Decimal(str(row[6])),
                suporte=Decimal(str(row[7])),
            ),
            volume=int(row[8]),
            ocorrencias=int(row[9]),
            segmento=str(row[10]),
            advertencias=int(row[11]),
            bloqueado=bool(row[12]),
            ultima_auditoria=row[13] if isinstance(row[13], date) else None,
            itens=self._itens(fornecedor_id),
            historico_advertencias=self._historico(fornecedor_id),
        )
