# pdv/schemas/relatorio.py
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from pdv.schemas.produto import ProdutoSchemas
from pdv.schemas.tipos import Dinheiro, Quantidade


class VendasPorDia(BaseModel):
    data: date = Field(..., alias="date")
    total: Dinheiro

    class Config:
        populate_by_name = True


class ProdutoMaisVendido(BaseModel):
    produto_id: int = Field(..., alias="productId")
    produto: Optional[ProdutoSchemas] = Field(None, alias="product")
    quantidade: Quantidade = Field(..., alias="quantitySold")
    faturamento: Dinheiro = Field(..., alias="revenue")

    class Config:
        populate_by_name = True


class RelatorioVendas(BaseModel):
    periodo_inicio: date = Field(..., alias="startDate")
    periodo_fim: date = Field(..., alias="endDate")
    total_faturamento: Dinheiro = Field(..., alias="totalRevenue")
    total_vendas: int = Field(..., alias="saleCount")
    ticket_medio: Dinheiro = Field(..., alias="averageTicket")
    produtos_vendidos: Quantidade = Field(..., alias="totalUnitsSold")
    vendas_por_dia: List[VendasPorDia] = Field(default_factory=list, alias="dailyTotals")
    produtos_mais_vendidos: List[ProdutoMaisVendido] = Field(default_factory=list, alias="topProducts")

    class Config:
        populate_by_name = True
