# portal/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    gestor_usuario: str
    gestor_senha: str
    gemini_api_key: str
    gemini_model: str
    gemini_base_url: str
    reputacao_timeout: float
    reputacao_retries: int
    reputacao_max_sessoes: int
    rate_limit_per_minute: int
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        gestor_usuario=os.environ.get("PORTAL_GESTOR_USUARIO", "gestor"),
        gestor_senha=os.environ.get("PORTAL_GESTOR_SENHA", "1234"),
        gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
        gemini_model=os.environ.get("GEMINI_MODEL", "gemini-2.0-flash"),
        gemini_base_url=os.environ.get(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta",
        ),
        reputacao_timeout=float(os.environ.get("REPUTACAO_TIMEOUT", "30")),
        reputacao_retries=int(os.environ.get("REPUTACAO_RETRIES", "1")),
        reputacao_max_sessoes=int(os.environ.get("REPUTACAO_MAX_SESSOES", "1000")),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
