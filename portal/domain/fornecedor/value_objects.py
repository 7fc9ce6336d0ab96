# portal/domain/fornecedor/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

NOTA_MINIMA = Decimal("0")
NOTA_MAXIMA = Decimal("5")


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    pesos_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_1[i] for i in range(12))
    resto = soma % 11
    d1 = 0 if resto < 2 else 11 - resto
    if int(digitos[12]) != d1:
        return False

    pesos_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(digitos[i]) * pesos_2[i] for i in range(13))
    resto = soma % 11
    d2 = 0 if resto < 2 else 11 - resto
    return int(digitos[13]) == d2


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ.

    So exige 14 digitos: o cadastro de demonstracao usa numeros ficticios,
    entao os digitos verificadores ficam expostos em `digitos_conferem`
    em vez de barrar a construcao.
    """

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        digitos = "".join(c for c in raw if c.isdigit())
        if len(digitos) != 14:
            raise ValueError(f"CNPJ invalido: comprimento {len(digitos)}, esperado 14")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    @property
    def digitos_conferem(self) -> bool:
        if len(set(self._valor)) == 1:
            return False
        return _verificar_cnpj(self._valor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


def _nota(valor: Decimal | float | int | str) -> Decimal:
    nota = valor if isinstance(valor, Decimal) else Decimal(str(valor))
    if nota < NOTA_MINIMA or nota > NOTA_MAXIMA:
        raise ValueError(f"Nota fora do intervalo [0, 5]: {nota}")
    return nota


@dataclass(frozen=True)
class Criterios:
    """Notas por criterio, cada uma em [0, 5]. Zero = ainda nao avaliado."""

    qualidade: Decimal
    entrega: Decimal
    suporte: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "qualidade", _nota(self.qualidade))
        object.__setattr__(self, "entrega", _nota(self.entrega))
        object.__setattr__(self, "suporte", _nota(self.suporte))


@dataclass(frozen=True)
class ItemPedido:
    """Linha de item de uma OC."""

    id: str
    nome: str
    quantidade: int
    unidade: str

    def __post_init__(self) -> None:
        if self.quantidade < 0:
            raise ValueError("Quantidade do item nao pode ser negativa")
