# portal/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from portal.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP. IP sem requisicao na janela sai do mapa."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = {}
        self._ultima_limpeza = 0.0

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()

        # 0 = sem limite (usado em testes)
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        if not self._permitir(client_ip, time.time(), settings.rate_limit_per_minute):
            return Response(
                content='{"detail": "Limite de requisicoes excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )
        return await call_next(request)

    def _permitir(self, client_ip: str, now: float, limite: int) -> bool:
        # No maximo uma varredura completa por janela.
        if now - self._ultima_limpeza >= JANELA_SEGUNDOS:
            self._limpar(now)
            self._ultima_limpeza = now

        recentes = [t for t in self._requests.get(client_ip, []) if now - t < JANELA_SEGUNDOS]
        if len(recentes) >= limite:
            self._requests[client_ip] = recentes
            return False
        recentes.append(now)
        self._requests[client_ip] = recentes
        return True

    def _limpar(self, now: float) -> None:
        for ip in list(self._requests):
            recentes = [t for t in self._requests[ip] if now - t < JANELA_SEGUNDOS]
            if recentes:
                self._requests[ip] = recentes
            else:
                del self._requests[ip]
