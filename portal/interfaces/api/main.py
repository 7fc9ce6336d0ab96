# portal/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from portal.infrastructure.config import get_settings
from portal.interfaces.api.errors import registrar_handlers
from portal.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from portal.infrastructure.duckdb_connection import get_connection
    get_connection()  # aplica schema e popula o cadastro no startup
    yield


app = FastAPI(
    title="Portal de Avaliacao de Fornecedores",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)

registrar_handlers(app)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

# Routers: ranking ANTES de fornecedor (/fornecedores/ranking vs /fornecedores/{fornecedor_id})
from portal.interfaces.api.routes.avaliacao_routes import router as avaliacao_router  # noqa: E402
from portal.interfaces.api.routes.fornecedor_routes import router as fornecedor_router  # noqa: E402
from portal.interfaces.api.routes.gestao_routes import router as gestao_router  # noqa: E402
from portal.interfaces.api.routes.ocorrencia_routes import router as ocorrencia_router  # noqa: E402
from portal.interfaces.api.routes.ranking_routes import router as ranking_router  # noqa: E402
from portal.interfaces.api.routes.reputacao_routes import router as reputacao_router  # noqa: E402

app.include_router(ranking_router, prefix="/api")
app.include_router(fornecedor_router, prefix="/api")
app.include_router(avaliacao_router, prefix="/api")
app.include_router(ocorrencia_router, prefix="/api")
app.include_router(reputacao_router, prefix="/api")
app.include_router(gestao_router, prefix="/api")
