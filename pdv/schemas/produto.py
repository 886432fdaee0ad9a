# pdv/schemas/produto.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pdv.core.dinheiro import LIMITE_DINHEIRO, LIMITE_QUANTIDADE
from pdv.db.models.produto import UnidadeMedida
from pdv.schemas.categoria import CategoriaSchemas
from pdv.schemas.tipos import Dinheiro, Quantidade


class ProdutoCreateSchemas(BaseModel):
    nome: str = Field(..., alias="name", min_length=1)
    preco: Decimal = Field(..., alias="unitPrice", ge=0, lt=LIMITE_DINHEIRO, examples=["6.00"])
    unidade_medida: UnidadeMedida = Field(..., alias="unitOfMeasure")
    categoria_id: int = Field(..., alias="categoryId")
    controla_estoque: bool = Field(False, alias="tracksStock")
    estoque_atual: Optional[Decimal] = Field(
        None, alias="currentStock", gt=-LIMITE_QUANTIDADE, lt=LIMITE_QUANTIDADE
    )

    class Config:
        populate_by_name = True
        extra = "forbid"


class ProdutoUpdateSchemas(BaseModel):
    # Todos os campos opcionais: atualização parcial
    nome: Optional[str] = Field(None, alias="name", min_length=1)
    preco: Optional[Decimal] = Field(None, alias="unitPrice", ge=0, lt=LIMITE_DINHEIRO)
    unidade_medida: Optional[UnidadeMedida] = Field(None, alias="unitOfMeasure")
    categoria_id: Optional[int] = Field(None, alias="categoryId")
    controla_estoque: Optional[bool] = Field(None, alias="tracksStock")
    estoque_atual: Optional[Decimal] = Field(
        None, alias="currentStock", gt=-LIMITE_QUANTIDADE, lt=LIMITE_QUANTIDADE
    )

    class Config:
        populate_by_name = True
        extra = "forbid"

    # Só currentStock aceita null explícito (limpa o estoque); os demais são colunas obrigatórias
    @field_validator("nome", "preco", "unidade_medida", "categoria_id", "controla_estoque")
    @classmethod
    def campo_nao_nulo(cls, v):
        if v is None:
            raise ValueError("Campo não pode ser nulo")
        return v


class ProdutoSchemas(BaseModel):
    id: int
    nome: str = Field(..., alias="name")
    preco: Dinheiro = Field(..., alias="unitPrice")
    unidade_medida: UnidadeMedida = Field(..., alias="unitOfMeasure")
    categoria_id: int = Field(..., alias="categoryId")
    controla_estoque: bool = Field(..., alias="tracksStock")
    estoque_atual: Optional[Quantidade] = Field(None, alias="currentStock")

    class Config:
        from_attributes = True
        populate_by_name = True


class ProdutoComCategoriaSchemas(ProdutoSchemas):
    categoria: Optional[CategoriaSchemas] = Field(None, alias="category")
