# portal/infrastructure/repositories/duckdb_ocorrencia_repo.py
from __future__ import annotations

import duckdb

from portal.domain.ocorrencia.entities import ItemAfetado, Ocorrencia
from portal.domain.ocorrencia.enums import StatusOcorrencia, TipoOcorrencia

_COLUNAS = (
    "id, data, pedido_id, segmento, tipo, qtd_itens_afetados, qtd_anexos, "
    "status, descricao, autor"
)


class DuckDBOcorrenciaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(
        self,
        pedido_id: str | None = None,
        segmento: str | None = None,
        status: StatusOcorrencia | None = None,
        tipo: TipoOcorrencia | None = None,
    ) -> list[Ocorrencia]:
        """Filtros opcionais combinados com AND. Ordem de registro."""
        condicoes: list[str] = []
        params: list[object] = []
        if pedido_id:
            condicoes.append("upper(pedido_id) = ?")
            params.append(pedido_id.strip().upper())
        if segmento:
            condicoes.append("segmento = ?")
            params.append(segmento)
        if status is not None:
            condicoes.append("status = ?")
            params.append(status.value)
        if tipo is not None:
            condicoes.append("tipo = ?")
            params.append(tipo.value)
        where = f"WHERE {' AND '.join(condicoes)}" if condicoes else ""
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM ocorrencia {where} ORDER BY posicao",
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_por_pedidos_ou_segmento(
        self,
        pedidos: list[str],
        segmento: str,
    ) -> list[Ocorrencia]:
        """Vinculo indireto com o fornecedor: pedido associado OU mesmo segmento."""
        condicoes = ["segmento = ?"]
        params: list[object] = [segmento]
        if pedidos:
            condicoes.append(f"upper(pedido_id) IN ({', '.join('?' for _ in pedidos)})")
            params.extend(p.upper() for p in pedidos)
        rows = self._conn.execute(
            f"""SELECT {_COLUNAS} FROM ocorrencia
               WHERE {' OR '.join(condicoes)}
               ORDER BY posicao""",
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, ocorrencia_id: str) -> Ocorrencia | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM ocorrencia WHERE id = ?",
            [ocorrencia_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def adicionar(self, ocorrencia: Ocorrencia) -> None:
        o = ocorrencia
        self._conn.begin()
        try:
            row = self._conn.execute(
                "SELECT coalesce(max(posicao), 0) FROM ocorrencia",
            ).fetchone()
            posicao = (int(row[0]) if row else 0) + 1
            self._conn.execute(
                f"INSERT INTO ocorrencia (posicao, {_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                [
                    posicao, o.id, o.data, o.pedido_id, o.segmento, o.tipo.value,
                    o.qtd_itens_afetados, o.qtd_anexos, o.status.value, o.descricao, o.autor,
                ],
            )
            if o.itens_afetados:
                self._conn.executemany(
                    "INSERT INTO ocorrencia_item VALUES (?, ?, ?, ?, ?)",
                    [
                        [o.id, pos, i.nome, i.quantidade, i.observacao]
                        for pos, i in enumerate(o.itens_afetados)
                    ],
                )
            if o.anexos:
                self._conn.executemany(
                    "INSERT INTO ocorrencia_anexo VALUES (?, ?, ?)",
                    [[o.id, pos, nome] for pos, nome in enumerate(o.anexos)],
                )
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def atualizar_status(self, ocorrencia_id: str, status: StatusOcorrencia) -> None:
        self._conn.execute(
            "UPDATE ocorrencia SET status = ? WHERE id = ?",
            [status.value, ocorrencia_id],
        )

    def proximo_id(self, ano: int) -> str:
        """RP-<ano>-<seq>, seq com 4 digitos, continuando do maior existente no ano."""
        row = self._conn.execute(
            """SELECT coalesce(max(CAST(split_part(id, '-', 3) AS INTEGER)), 0)
               FROM ocorrencia WHERE id LIKE ?""",
            [f"RP-{ano}-%"],
        ).fetchone()
        seq = (int(row[0]) if row else 0) + 1
        return f"RP-{ano}-{seq:04d}"

    def _itens(self, ocorrencia_id: str) -> tuple[ItemAfetado, ...]:
        rows = self._conn.execute(
            """SELECT nome, quantidade, observacao FROM ocorrencia_item
               WHERE ocorrencia_id = ? ORDER BY posicao""",
            [ocorrencia_id],
        ).fetchall()
        return tuple(
            ItemAfetado(nome=str(r[0]), quantidade=int(r[1]), observacao=str(r[2]))
            for r in rows
        )

    def _anexos(self, ocorrencia_id: str) -> tuple[str, ...]:
        rows = self._conn.execute(
            """SELECT nome_arquivo FROM ocorrencia_anexo
               WHERE ocorrencia_id = ? ORDER BY posicao""",
            [ocorrencia_id],
        ).fetchall()
        return tuple(str(r[0]) for r in rows)

    def _hidratar(self, row: tuple) -> Ocorrencia:  # type: ignore[type-arg]
        """Colunas: id(0), data(1), pedido_id(2), segmento(3), tipo(4),
        qtd_itens_afetados(5), qtd_anexos(6), status(7), descricao(8), autor(9)"""
        ocorrencia_id = str(row[0])
        return Ocorrencia(
            id=ocorrencia_id,
            data=row[1],
            pedido_id=str(row[2]),
            segmento=str(row[3]),
            tipo=TipoOcorrencia(str(row[4])),
            qtd_itens_afetados=int(row[5]),
            qtd_anexos=int(row[6]),
            status=StatusOcorrencia(str(row[7])),
            descricao=str(row[8]),
            autor=str(row[9]),
            itens_afetados=self._itens(ocorrencia_id),
            anexos=self._anexos(ocorrencia_id),
        )
