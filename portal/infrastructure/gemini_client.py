# portal/infrastructure/gemini_client.py
#
# IO-only: chamada ao Google Generative Language (Gemini) via REST.
#
# O texto devolvido e opaco: so e extraido, nunca interpretado. As citacoes
# vem de groundingMetadata quando a busca do Google esta habilitada.
# Retry limitado (settings.reputacao_retries) apenas para erro de transporte,
# timeout e HTTP 5xx. Qualquer falha final vira ServicoExternoError.
from __future__ import annotations

from typing import Any

import httpx

from portal.domain.errors import ServicoExternoError
from portal.domain.reputacao.entities import FonteCitada, RespostaGerador
from portal.log import log

from .config import Settings

_PROMPT_REPUTACAO = (
    "Pesquise a reputação pública da empresa brasileira \"{consulta}\"{contexto}. "
    "Resuma em português, em até 3 parágrafos, a situação cadastral, "
    "reclamações de clientes, processos ou sanções conhecidas e um parecer "
    "final de risco para contratação como fornecedor."
)


class GeminiClient:
    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.Client(timeout=settings.reputacao_timeout)

    def gerar_relatorio(
        self,
        consulta: str,
        contexto: dict[str, str] | None = None,
    ) -> RespostaGerador:
        detalhes = ""
        if contexto:
            partes = [f"{chave}: {valor}" for chave, valor in contexto.items() if valor]
            if partes:
                detalhes = f" ({', '.join(partes)})"
        prompt = _PROMPT_REPUTACAO.format(consulta=consulta, contexto=detalhes)
        data = self._gerar(prompt, com_busca=True)
        return RespostaGerador(texto=_extrair_texto(data), fontes=_extrair_fontes(data))

    def gerar_analise(self, prompt: str) -> str:
        return _extrair_texto(self._gerar(prompt, com_busca=False))

    def _gerar(self, prompt: str, com_busca: bool) -> dict[str, Any]:
        if not self._settings.gemini_api_key:
            raise ServicoExternoError("GEMINI_API_KEY nao configurada")

        url = (
            f"{self._settings.gemini_base_url.rstrip('/')}"
            f"/models/{self._settings.gemini_model}:generateContent"
        )
        body: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if com_busca:
            body["tools"] = [{"google_search": {}}]

        tentativas = 1 + max(0, self._settings.reputacao_retries)
        ultimo_erro = ""
        for tentativa in range(1, tentativas + 1):
            try:
                resp = self._client.post(
                    url,
                    json=body,
                    headers={"x-goog-api-key": self._settings.gemini_api_key},
                    timeout=self._settings.reputacao_timeout,
                )
            except httpx.TimeoutException:
                ultimo_erro = f"timeout apos {self._settings.reputacao_timeout:.0f}s"
            except httpx.TransportError as err:
                ultimo_erro = f"falha de transporte: {err}"
            else:
                if resp.status_code < 500:
                    break
                ultimo_erro = f"HTTP {resp.status_code}"
            log(f"  Gemini tentativa {tentativa}/{tentativas} falhou ({ultimo_erro})")
        else:
            raise ServicoExternoError(f"Gerador de reputacao indisponivel: {ultimo_erro}")

        if resp.status_code >= 400:
            raise ServicoExternoError(f"Gerador de reputacao recusou a chamada: HTTP {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as err:
            raise ServicoExternoError("Resposta do gerador nao e JSON") from err
        if not isinstance(data, dict):
            raise ServicoExternoError("Resposta do gerador em formato inesperado")
        return data


def _candidato(data: dict[str, Any]) -> dict[str, Any]:
    candidatos = data.get("candidates") or []
    return candidatos[0] if candidatos and isinstance(candidatos[0], dict) else {}


def _extrair_texto(data: dict[str, Any]) -> str:
    partes = (_candidato(data).get("content") or {}).get("parts") or []
    return "".join(str(p.get("text", "")) for p in partes if isinstance(p, dict)).strip()


def _extrair_fontes(data: dict[str, Any]) -> tuple[FonteCitada, ...]:
    chunks = (_candidato(data).get("groundingMetadata") or {}).get("groundingChunks") or []
    fontes: list[FonteCitada] = []
    vistos: set[str] = set()
    for chunk in chunks:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if not web or not web.get("uri") or web["uri"] in vistos:
            continue
        vistos.add(web["uri"])
        fontes.append(FonteCitada(titulo=str(web.get("title") or web["uri"]), url=str(web["uri"])))
    return tuple(fontes)
