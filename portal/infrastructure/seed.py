# portal/infrastructure/seed.py
"""Cadastro fixo de demonstracao carregado no start do processo.
Fornecedores, associacoes OC/processo, historico de ocorrencias e
reclamacoes pendentes."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import duckdb

from portal.domain.fornecedor.entities import Fornecedor, RegistroAdvertencia
from portal.domain.fornecedor.value_objects import CNPJ, Criterios, ItemPedido
from portal.domain.ocorrencia.entities import ItemAfetado, Ocorrencia, Reclamacao
from portal.domain.ocorrencia.enums import StatusOcorrencia, TipoOcorrencia

from .repositories.duckdb_fornecedor_repo import DuckDBFornecedorRepo
from .repositories.duckdb_ocorrencia_repo import DuckDBOcorrenciaRepo
from .repositories.duckdb_pedido_repo import DuckDBPedidoRepo
from .repositories.duckdb_reclamacao_repo import DuckDBReclamacaoRepo


def _criterios(qualidade: str, entrega: str, suporte: str) -> Criterios:
    return Criterios(Decimal(qualidade), Decimal(entrega), Decimal(suporte))


FORNECEDORES: tuple[Fornecedor, ...] = (
    Fornecedor(
        id="1",
        nome="Fornecedor Exemplo LTDA",
        cnpj=CNPJ("12.345.678/0001-90"),
        contato="compras@fornecedor.com.br",
        nota_media=Decimal("4.8"),
        criterios=_criterios("5", "4.5", "5"),
        volume=150,
        ocorrencias=2,
        segmento="Logística",
        itens=(
            ItemPedido("i1", "Cabo de alimentação 2m", 50, "un"),
            ItemPedido("i2", "Chave de fenda Phillips", 20, "un"),
            ItemPedido("i3", "Parafuso M6", 200, "un"),
        ),
    ),
    Fornecedor(
        id="2",
        nome="Indústria & Cia ME",
        cnpj=CNPJ("98.765.432/0001-10"),
        contato="contato@industriacia.com.br",
        nota_media=Decimal("4.2"),
        criterios=_criterios("4", "4.5", "4"),
        volume=85,
        ocorrencias=1,
        segmento="Periféricos",
        itens=(
            ItemPedido("i4", "Luvas de proteção (M)", 100, "par"),
            ItemPedido("i5", "Máscara PFF2", 300, "un"),
        ),
        advertencias=1,
        historico_advertencias=(
            RegistroAdvertencia(
                date(2025, 5, 10),
                "Atraso crítico na entrega de EPIs para a unidade SESI.",
                "Carlos Gestor",
            ),
        ),
    ),
    Fornecedor(
        id="3",
        nome="TecnoGlobal S.A.",
        cnpj=CNPJ("11.222.333/0001-44"),
        contato="ti@tecno.com",
        nota_media=Decimal("4.9"),
        criterios=_criterios("5", "5", "4.8"),
        volume=210,
        ocorrencias=0,
        segmento="TI",
    ),
    Fornecedor(
        id="4",
        nome="Madeiras Brasil",
        cnpj=CNPJ("22.333.444/0001-55"),
        contato="vendas@madeiras.com",
        nota_media=Decimal("3.5"),
        criterios=_criterios("3.5", "3", "4"),
        volume=45,
        ocorrencias=3,
        segmento="Construção",
        advertencias=2,
        historico_advertencias=(
            RegistroAdvertencia(
                date(2025, 2, 15),
                "Divergência recorrente de nota fiscal e carga física.",
                "Ana Auditoria",
            ),
            RegistroAdvertencia(
                date(2025, 6, 20),
                "Madeira entregue sem certificação ambiental exigida em contrato.",
                "João Silva",
            ),
        ),
    ),
    Fornecedor(
        id="5",
        nome="Metalúrgica Ferro Forte",
        cnpj=CNPJ("33.444.555/0001-66"),
        contato="contato@ferroforte.com",
        nota_media=Decimal("1.8"),
        criterios=_criterios("2", "1.5", "2"),
        volume=30,
        ocorrencias=8,
        segmento="Metalurgia",
        advertencias=3,
        bloqueado=True,
        historico_advertencias=(
            RegistroAdvertencia(
                date(2024, 12, 1),
                "Material com oxidação severa em 40% do lote.",
                "Marcos Qualidade",
            ),
            RegistroAdvertencia(
                date(2025, 3, 12),
                "Interrupção de linha de produção por falta de insumos programados.",
                "Marcos Qualidade",
            ),
            RegistroAdvertencia(
                date(2025, 8, 1),
                "Recusa sistemática em atender chamados de garantia.",
                "Diretoria FINDES",
            ),
        ),
    ),
    Fornecedor(
        id="9",
        nome="Auto Peças Vale",
        cnpj=CNPJ("77.888.999/0001-00"),
        contato="vendas@valepartes.com",
        nota_media=Decimal("1.2"),
        criterios=_criterios("1", "1.5", "1"),
        volume=20,
        ocorrencias=12,
        segmento="Automotiva",
        advertencias=3,
        bloqueado=True,
        historico_advertencias=(
            RegistroAdvertencia(
                date(2025, 1, 10),
                "Peças falsificadas identificadas em auditoria.",
                "Compliance",
            ),
            RegistroAdvertencia(
                date(2025, 2, 20),
                "Uso indevido da marca FINDES em material promocional.",
                "Jurídico",
            ),
            RegistroAdvertencia(
                date(2025, 3, 30),
                "Acúmulo de 10 reclamações não resolvidas em 30 dias.",
                "Operações",
            ),
        ),
    ),
)

# OC ou numero de processo Fluig -> fornecedor
PEDIDOS: dict[str, str] = {
    "OC-2025-001": "1",
    "FLUIG-123456": "1",
    "OC-2025-002": "2",
    "FLUIG-987654": "2",
}

OCORRENCIAS: tuple[Ocorrencia, ...] = (
    Ocorrencia(
        id="RP-2025-0043",
        data=date(2025, 10, 12),
        pedido_id="OC-2025-001",
        segmento="Logística",
        tipo=TipoOcorrencia.ATRASO_NA_ENTREGA,
        itens_afetados=(
            ItemAfetado("Cabo 2m", 50, "Parcial entregue com 7 dias de atraso"),
        ),
        anexos=("Comprovante_OC001.pdf", "Print_Rastreamento.png"),
        status=StatusOcorrencia.FECHADO,
        descricao=(
            "Previsto 05/10, recebido 12/10; sem aviso prévio do fornecedor. "
            "Impacto severo na linha de produção."
        ),
        autor="João Silva",
    ),
)

RECLAMACOES: tuple[Reclamacao, ...] = (
    Reclamacao(
        id="REC-001",
        fornecedor_nome="Fornecedor Exemplo LTDA",
        fornecedor_email="compras@fornecedor.com.br",
        data=date(2025, 10, 24),
        tipo=TipoOcorrencia.ATRASO_NA_ENTREGA,
        descricao="A carga de cabos de alimentação não chegou no prazo estipulado de 48h.",
    ),
    Reclamacao(
        id="REC-002",
        fornecedor_nome="Indústria & Cia ME",
        fornecedor_email="contato@industriacia.com.br",
        data=date(2025, 10, 25),
        tipo=TipoOcorrencia.PRODUTO_COM_DEFEITO,
        descricao="Lote de luvas de proteção apresenta costuras frágeis.",
    ),
    Reclamacao(
        id="REC-003",
        fornecedor_nome="Madeiras Brasil",
        fornecedor_email="vendas@madeiras.com",
        data=date(2025, 10, 26),
        tipo=TipoOcorrencia.DIVERGENCIA_NO_PEDIDO,
        descricao="Recebemos pinus em vez de eucalipto tratado.",
    ),
)


def popular(conn: duckdb.DuckDBPyConnection) -> None:
    """Insere o cadastro fixo. Espera schema aplicado e tabelas vazias."""
    fornecedor_repo = DuckDBFornecedorRepo(conn)
    for fornecedor in FORNECEDORES:
        fornecedor_repo.salvar(fornecedor)

    pedido_repo = DuckDBPedidoRepo(conn)
    for identificador, fornecedor_id in PEDIDOS.items():
        pedido_repo.associar(identificador, fornecedor_id)

    ocorrencia_repo = DuckDBOcorrenciaRepo(conn)
    for ocorrencia in OCORRENCIAS:
        ocorrencia_repo.adicionar(ocorrencia)

    reclamacao_repo = DuckDBReclamacaoRepo(conn)
    for reclamacao in RECLAMACOES:
        reclamacao_repo.salvar(reclamacao)
