# portal/infrastructure/simulador_reputacao.py
"""Relatorio de reputacao fabricado localmente para fornecedores do cadastro.

Deterministico: a semente e o CNPJ, entao a mesma empresa sempre recebe os
mesmos numeros. O veredito acompanha a nota media real do fornecedor.
"""
from __future__ import annotations

import random
from datetime import datetime
from decimal import Decimal
from urllib.parse import quote_plus

from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.enums import StatusFornecedor
from portal.domain.fornecedor.score import classificar
from portal.domain.reputacao.entities import FonteCitada, OrigemRelatorio, RelatorioReputacao

_VEREDITOS: dict[StatusFornecedor, str] = {
    StatusFornecedor.OTIMO: "risco baixo",
    StatusFornecedor.BOM: "risco moderado",
    StatusFornecedor.RUIM: "risco elevado",
}

_CERTIDOES = ("Receita Federal", "FGTS", "Trabalhista (CNDT)", "Estadual")


def simular_relatorio(
    fornecedor: Fornecedor,
    consulta: str,
    agora: datetime | None = None,
) -> RelatorioReputacao:
    rng = random.Random(fornecedor.cnpj.valor)
    fator = float(fornecedor.nota_media / Decimal("5"))
    faixa = classificar(fornecedor.nota_media)
    veredito = _VEREDITOS[faixa]

    iec = max(0, min(100, round(fator * 100 + rng.uniform(-6, 6))))
    pontualidade = round(min(100.0, 55 + fator * 40 + rng.uniform(-3, 3)), 1)
    taxa_reclamacao = round(max(0.0, (1 - fator) * 12 + rng.uniform(0, 1.5)), 1)
    sla_medio = round(1.5 + (1 - fator) * 6 + rng.uniform(0, 1.5), 1)
    nota_reclame_aqui = round(max(0.0, min(10.0, fator * 10 + rng.uniform(-1, 0.5))), 1)
    nota_google = round(max(1.0, min(5.0, fator * 5 + rng.uniform(-0.5, 0.3))), 1)
    # Fornecedor RUIM nunca sai com todas as certidoes em dia.
    certidoes = {
        nome: "OK" if rng.random() < (0.5 + fator / 2) and faixa is not StatusFornecedor.RUIM
        else "PENDENTE"
        for nome in _CERTIDOES
    }

    texto = (
        f"{fornecedor.nome} (CNPJ {fornecedor.cnpj.formatado}), segmento "
        f"{fornecedor.segmento}, apresenta indice de confiabilidade {iec}/100 e "
        f"{pontualidade}% de entregas no prazo. Taxa de reclamacoes de "
        f"{taxa_reclamacao}% e SLA medio de atendimento de {sla_medio} dias. "
        f"Parecer: {veredito}."
    )
    nome_busca = quote_plus(fornecedor.nome)
    fontes = (
        FonteCitada("Reclame Aqui", f"https://www.reclameaqui.com.br/busca/?q={nome_busca}"),
        FonteCitada("Google Avaliações", f"https://www.google.com/search?q={nome_busca}"),
    )
    return RelatorioReputacao(
        consulta=consulta,
        texto=texto,
        origem=OrigemRelatorio.SIMULADO_INTERNO,
        gerado_em=agora or datetime.now(),
        fontes=fontes,
        indicadores={
            "nome": fornecedor.nome,
            "cnpj": fornecedor.cnpj.formatado,
            "cnpj_valido": fornecedor.cnpj.digitos_conferem,
            "iec": iec,
            "taxa_pontualidade": pontualidade,
            "taxa_reclamacao": taxa_reclamacao,
            "sla_medio_dias": sla_medio,
            "veredito": veredito,
            "certidoes": certidoes,
            "fontes_externas": {
                "Reclame Aqui": f"{nota_reclame_aqui}/10",
                "Google Avaliações": f"{nota_google}/5",
            },
            "alertas_criticos": fornecedor.advertencias,
        },
    )
