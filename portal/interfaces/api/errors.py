# portal/interfaces/api/errors.py
"""Conversao dos erros de dominio em respostas HTTP. Nenhum e fatal."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portal.domain.errors import (
    AutenticacaoError,
    FornecedorBloqueadoError,
    NaoEncontradoError,
    ServicoExternoError,
    ValidacaoError,
)
from portal.log import log


async def _nao_encontrado(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _validacao(request: Request, exc: ValidacaoError) -> JSONResponse:
    status = 409 if isinstance(exc, FornecedorBloqueadoError) else 422
    return JSONResponse(
        status_code=status,
        content={"detail": "Validacao falhou", "erros": exc.erros},
    )


async def _servico_externo(request: Request, exc: Exception) -> JSONResponse:
    log(f"Servico externo falhou em {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,
        content={"detail": "Servico de consulta externa indisponivel. Tente novamente."},
    )


async def _autenticacao(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Basic"},
    )


def registrar_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NaoEncontradoError, _nao_encontrado)
    app.add_exception_handler(ValidacaoError, _validacao)
    app.add_exception_handler(ServicoExternoError, _servico_externo)
    app.add_exception_handler(AutenticacaoError, _autenticacao)
