# pdv/schemas/comanda.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from pdv.core.dinheiro import LIMITE_QUANTIDADE
from pdv.db.models.comanda import StatusComanda
from pdv.schemas.mesa import MesaSchemas
from pdv.schemas.produto import ProdutoSchemas
from pdv.schemas.tipos import Dinheiro, Quantidade


class ComandaCreateSchemas(BaseModel):
    # Sem mesa = venda avulsa no balcão
    mesa_id: Optional[int] = Field(None, alias="tableId")
    cliente_nome: Optional[str] = Field(None, alias="customerName")

    class Config:
        populate_by_name = True
        extra = "forbid"


class ComandaSchemas(BaseModel):
    id: int
    mesa_id: Optional[int] = Field(None, alias="tableId")
    cliente_nome: Optional[str] = Field(None, alias="customerName")
    status: StatusComanda
    total: Optional[Dinheiro] = None
    criada_em: datetime = Field(..., alias="createdAt")
    fechada_em: Optional[datetime] = Field(None, alias="closedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


# --- Itens da comanda ---
class ItemComandaCreateSchemas(BaseModel):
    # preco_unitario e subtotal são definidos no backend
    produto_id: int = Field(..., alias="productId")
    quantidade: Decimal = Field(..., alias="quantity", lt=LIMITE_QUANTIDADE, examples=["2", "0.5"])

    class Config:
        populate_by_name = True
        extra = "forbid"


class ItemQuantidadeUpdateSchemas(BaseModel):
    quantidade: Decimal = Field(..., alias="quantity", lt=LIMITE_QUANTIDADE)

    class Config:
        populate_by_name = True
        extra = "forbid"


class ItemComandaSchemas(BaseModel):
    id: int
    comanda_id: int = Field(..., alias="comandaId")
    produto_id: int = Field(..., alias="productId")
    quantidade: Quantidade = Field(..., alias="quantity")
    preco_unitario: Dinheiro = Field(..., alias="unitPriceAtTimeOfSale")
    subtotal: Dinheiro

    class Config:
        from_attributes = True
        populate_by_name = True


class ItemComandaComProdutoSchemas(ItemComandaSchemas):
    # None quando o produto foi excluído depois de lançado
    produto: Optional[ProdutoSchemas] = Field(None, alias="product")


class ComandaCompletaSchemas(ComandaSchemas):
    mesa: Optional[MesaSchemas] = Field(None, alias="table")
    itens: List[ItemComandaComProdutoSchemas] = Field(default_factory=list, alias="lines")
