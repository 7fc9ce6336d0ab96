# portal/application/services/reclamacao_service.py
from __future__ import annotations

from portal.domain.errors import NaoEncontradoError
from portal.domain.ocorrencia.enums import StatusReclamacao
from portal.domain.ocorrencia.fluxo import responder_reclamacao
from portal.domain.ocorrencia.repository import ReclamacaoRepository
from portal.log import log

from ..dtos.ocorrencia_dto import ReclamacaoDTO
from .trava import TRAVA_REGISTRO


class ReclamacaoService:
    def __init__(self, reclamacao_repo: ReclamacaoRepository) -> None:
        self._reclamacao_repo = reclamacao_repo

    def listar(self, status: StatusReclamacao | None = None) -> list[ReclamacaoDTO]:
        return [ReclamacaoDTO.from_domain(r) for r in self._reclamacao_repo.listar(status)]

    def responder(self, reclamacao_id: str, email: str, texto: str) -> ReclamacaoDTO:
        with TRAVA_REGISTRO:
            reclamacao = self._reclamacao_repo.buscar_por_id(reclamacao_id)
            if reclamacao is None:
                raise NaoEncontradoError(f"Reclamacao {reclamacao_id} nao encontrada")
            respondida = responder_reclamacao(reclamacao, email, texto)
            self._reclamacao_repo.salvar(respondida)
        log(f"Reclamacao {reclamacao_id} respondida para {respondida.resposta_email}")
        return ReclamacaoDTO.from_domain(respondida)
