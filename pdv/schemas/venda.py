# pdv/schemas/venda.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from pdv.core.dinheiro import LIMITE_DINHEIRO
from pdv.db.models.venda import MetodoPagamento
from pdv.schemas.tipos import Dinheiro


class VendaCreateSchemas(BaseModel):
    # O total nunca vem do cliente: é recalculado a partir dos itens da comanda
    comanda_id: int = Field(..., alias="comandaId")
    metodo_pagamento: MetodoPagamento = Field(..., alias="paymentMethod")
    valor_recebido: Optional[Decimal] = Field(None, alias="amountReceived", lt=LIMITE_DINHEIRO)

    class Config:
        populate_by_name = True
        extra = "forbid"


class VendaSchemas(BaseModel):
    id: int
    comanda_id: int = Field(..., alias="comandaId")
    metodo_pagamento: MetodoPagamento = Field(..., alias="paymentMethod")
    valor_total: Dinheiro = Field(..., alias="totalAmount")
    valor_recebido: Optional[Dinheiro] = Field(None, alias="amountReceived")
    troco: Optional[Dinheiro] = Field(None, alias="change")
    criada_em: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
