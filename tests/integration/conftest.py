# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture
def client(
    conn: duckdb.DuckDBPyConnection,
    gerador: object,
) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory novo e gerador fake injetados.
    Um store por teste: as rotas de gestao alteram o cadastro."""
    from portal.infrastructure import duckdb_connection
    duckdb_connection.set_connection(conn)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from portal.infrastructure.config import get_settings
    get_settings.cache_clear()

    from portal.application.services.reputacao_service import RastreadorConsultas
    from portal.interfaces.api.dependencies import get_gerador, get_rastreador
    from portal.interfaces.api.main import app

    rastreador = RastreadorConsultas()
    app.dependency_overrides[get_gerador] = lambda: gerador
    app.dependency_overrides[get_rastreador] = lambda: rastreador
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
