# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest

from portal.domain.errors import ServicoExternoError
from portal.domain.reputacao.entities import FonteCitada, RespostaGerador
from portal.infrastructure.duckdb_connection import criar_conexao


class GeradorFake:
    """Gerador de reputacao deterministico para testes. Registra as chamadas."""

    def __init__(
        self,
        texto: str = "Empresa sem registros negativos relevantes.",
        fontes: tuple[FonteCitada, ...] = (
            FonteCitada("Portal da Transparencia", "https://portaldatransparencia.gov.br"),
        ),
        falhar: bool = False,
    ) -> None:
        self.texto = texto
        self.fontes = fontes
        self.falhar = falhar
        self.consultas: list[str] = []
        self.prompts: list[str] = []

    def gerar_relatorio(
        self,
        consulta: str,
        contexto: dict[str, str] | None = None,
    ) -> RespostaGerador:
        self.consultas.append(consulta)
        if self.falhar:
            raise ServicoExternoError("gerador fora do ar")
        return RespostaGerador(texto=self.texto, fontes=self.fontes)

    def gerar_analise(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.falhar:
            raise ServicoExternoError("gerador fora do ar")
        return self.texto


@pytest.fixture
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo, com schema e cadastro de demonstracao."""
    c = criar_conexao(":memory:")
    yield c
    c.close()


@pytest.fixture
def gerador() -> GeradorFake:
    return GeradorFake()
