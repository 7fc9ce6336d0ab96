# portal/application/dtos/ficha_dto.py
from __future__ import annotations

from pydantic import BaseModel

from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.ocorrencia.entities import Ocorrencia

from .fornecedor_dto import FornecedorDTO
from .ocorrencia_dto import OcorrenciaDTO


class FichaFornecedorDTO(BaseModel):
    fornecedor: FornecedorDTO
    pedidos: list[str]
    ocorrencias: list[OcorrenciaDTO]

    @classmethod
    def from_domain(
        cls,
        fornecedor: Fornecedor,
        pedidos: list[str],
        ocorrencias: list[Ocorrencia],
    ) -> FichaFornecedorDTO:
        return cls(
            fornecedor=FornecedorDTO.from_domain(fornecedor),
            pedidos=pedidos,
            ocorrencias=[OcorrenciaDTO.from_domain(o) for o in ocorrencias],
        )
