# portal/application/services/ocorrencia_service.py
from __future__ import annotations

from datetime import date

from portal.domain.errors import NaoEncontradoError, ValidacaoError
from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.repository import FornecedorRepository, PedidoRepository
from portal.domain.ocorrencia.entities import ItemAfetado, Ocorrencia, RelatoOcorrencia
from portal.domain.ocorrencia.enums import StatusOcorrencia, TipoOcorrencia
from portal.domain.ocorrencia.fluxo import ERRO_TIPO, avancar_status, validar_relato
from portal.domain.ocorrencia.repository import OcorrenciaRepository
from portal.log import log

from ..dtos.ocorrencia_dto import OcorrenciaDTO
from .avaliacao_service import MSG_PEDIDO_NAO_ENCONTRADO
from .trava import TRAVA_REGISTRO


class OcorrenciaService:
    def __init__(
        self,
        ocorrencia_repo: OcorrenciaRepository,
        fornecedor_repo: FornecedorRepository,
        pedido_repo: PedidoRepository,
    ) -> None:
        self._ocorrencia_repo = ocorrencia_repo
        self._fornecedor_repo = fornecedor_repo
        self._pedido_repo = pedido_repo

    def listar(
        self,
        pedido_id: str | None = None,
        segmento: str | None = None,
        status: StatusOcorrencia | None = None,
        tipo: TipoOcorrencia | None = None,
    ) -> list[OcorrenciaDTO]:
        ocorrencias = self._ocorrencia_repo.listar(pedido_id, segmento, status, tipo)
        return [OcorrenciaDTO.from_domain(o) for o in ocorrencias]

    def registrar(self, relato: RelatoOcorrencia, hoje: date | None = None) -> OcorrenciaDTO:
        """Valida o relato (todas as regras de uma vez) e anexa ao historico.

        Raises:
            NaoEncontradoError: OC/processo desconhecido.
            ValidacaoError: lista com todas as regras violadas; nada e gravado.
        """
        fornecedor = self._fornecedor_do_pedido(relato.pedido_id)
        erros = validar_relato(relato, fornecedor.itens)
        tipo = relato.tipo
        if erros or tipo is None:
            raise ValidacaoError(erros or [ERRO_TIPO])

        data = hoje or date.today()
        with TRAVA_REGISTRO:
            ocorrencia = Ocorrencia(
                id=self._ocorrencia_repo.proximo_id(data.year),
                data=data,
                pedido_id=relato.pedido_id.strip().upper(),
                segmento=fornecedor.segmento,
                tipo=tipo,
                descricao=relato.descricao.strip(),
                autor=relato.autor,
                itens_afetados=self._itens_afetados(relato, fornecedor),
                anexos=relato.anexos,
            )
            self._ocorrencia_repo.adicionar(ocorrencia)
        log(
            f"Ocorrencia {ocorrencia.id} registrada: pedido={ocorrencia.pedido_id} "
            f"tipo={ocorrencia.tipo.value} itens={ocorrencia.qtd_itens_afetados}"
        )
        return OcorrenciaDTO.from_domain(ocorrencia)

    def avancar_status(self, ocorrencia_id: str) -> OcorrenciaDTO:
        with TRAVA_REGISTRO:
            ocorrencia = self._ocorrencia_repo.buscar_por_id(ocorrencia_id)
            if ocorrencia is None:
                raise NaoEncontradoError(f"Ocorrencia {ocorrencia_id} nao encontrada")
            avancada = avancar_status(ocorrencia)
            self._ocorrencia_repo.atualizar_status(avancada.id, avancada.status)
        log(f"Ocorrencia {ocorrencia_id}: {ocorrencia.status.value} -> {avancada.status.value}")
        return OcorrenciaDTO.from_domain(avancada)

    def _fornecedor_do_pedido(self, pedido_id: str) -> Fornecedor:
        fornecedor_id = self._pedido_repo.fornecedor_do_pedido(pedido_id.strip().upper())
        fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id) if fornecedor_id else None
        if fornecedor is None:
            raise NaoEncontradoError(MSG_PEDIDO_NAO_ENCONTRADO)
        return fornecedor

    @staticmethod
    def _itens_afetados(relato: RelatoOcorrencia, fornecedor: Fornecedor) -> tuple[ItemAfetado, ...]:
        # Tipos nao relacionados a itens descartam a selecao.
        if relato.tipo is None or not relato.tipo.relacionado_a_itens:
            return ()
        afetados: list[ItemAfetado] = []
        for sel in relato.itens:
            item = fornecedor.item_por_id(sel.item_id)
            if item is not None:
                afetados.append(ItemAfetado(item.nome, item.quantidade, sel.observacao.strip()))
        return tuple(afetados)
