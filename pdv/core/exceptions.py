"""
Erros de domínio do PDV.

O núcleo (crud) levanta estas exceções; a camada HTTP (pdv.main) traduz cada
uma no status correspondente. Uso:

    raise NaoEncontradoError("Comanda", comanda_id)
    raise ArgumentoInvalidoError("Quantidade deve ser maior que zero")
    raise ConflitoError("Comanda 7 já está fechada")
"""
from typing import Any, Optional


class ErroPDV(Exception):
    """Base de todos os erros de domínio."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NaoEncontradoError(ErroPDV):
    """Id referenciado não existe (categoria, produto, mesa, comanda, item, venda)."""
    status_code = 404

    def __init__(self, entidade: str, entidade_id: Optional[Any] = None):
        if entidade_id is not None:
            message = f"{entidade} com ID {entidade_id} não encontrado(a)."
        else:
            message = f"{entidade} não encontrado(a)."
        super().__init__(message)
        self.entidade = entidade
        self.entidade_id = entidade_id


class ArgumentoInvalidoError(ErroPDV):
    """Entrada malformada: quantidade não positiva, valor em dinheiro insuficiente, decimal inválido."""
    status_code = 400


class ConflitoError(ErroPDV):
    """Operação incompatível com o estado atual (ex: comanda já fechada)."""
    status_code = 409
