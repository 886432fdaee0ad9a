# pdv/core/dinheiro.py
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from pdv.core.exceptions import ArgumentoInvalidoError

CENTAVOS = Decimal("0.01")
MILESIMOS = Decimal("0.001")
ZERO = Decimal("0.00")

# Limites das colunas Numeric(10, 2) e Numeric(10, 3)
LIMITE_DINHEIRO = Decimal("100000000")
LIMITE_QUANTIDADE = Decimal("10000000")


def para_decimal(valor: Any) -> Decimal:
    if isinstance(valor, Decimal):
        resultado = valor
    else:
        if isinstance(valor, float):
            # str() evita carregar o erro binário do float para o Decimal
            valor = str(valor)
        try:
            resultado = Decimal(valor)
        except (InvalidOperation, TypeError, ValueError):
            raise ArgumentoInvalidoError(f"Valor decimal inválido: {valor!r}")
    if not resultado.is_finite():
        raise ArgumentoInvalidoError(f"Valor decimal inválido: {valor!r}")
    return resultado


def _quantizar(valor: Any, passo: Decimal, limite: Decimal) -> Decimal:
    valor = para_decimal(valor)
    try:
        resultado = valor.quantize(passo, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ArgumentoInvalidoError(f"Valor fora do limite permitido: {valor}")
    if abs(resultado) >= limite:
        raise ArgumentoInvalidoError(f"Valor fora do limite permitido: {valor}")
    return resultado


def quantizar_dinheiro(valor: Any) -> Decimal:
    """Arredonda para 2 casas (ROUND_HALF_UP): 0.125 -> 0.13."""
    return _quantizar(valor, CENTAVOS, LIMITE_DINHEIRO)


def quantizar_quantidade(valor: Any) -> Decimal:
    return _quantizar(valor, MILESIMOS, LIMITE_QUANTIDADE)


def calcular_subtotal(quantidade: Any, preco_unitario: Any) -> Decimal:
    return quantizar_dinheiro(para_decimal(quantidade) * para_decimal(preco_unitario))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
