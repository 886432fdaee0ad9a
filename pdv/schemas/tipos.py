# pdv/schemas/tipos.py
# Tipos decimais serializados como no contrato JSON: dinheiro com 2 casas
# ("6.00") e quantidades com 3 casas ("0.500").
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

from pdv.core.dinheiro import quantizar_dinheiro, quantizar_quantidade


def serializar_dinheiro(valor: Decimal) -> str:
    return f"{quantizar_dinheiro(valor):.2f}"


def serializar_quantidade(valor: Decimal) -> str:
    return f"{quantizar_quantidade(valor):.3f}"


Dinheiro = Annotated[Decimal, PlainSerializer(serializar_dinheiro, return_type=str)]
Quantidade = Annotated[Decimal, PlainSerializer(serializar_quantidade, return_type=str)]
