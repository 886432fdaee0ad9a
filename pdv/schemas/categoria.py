# pdv/schemas/categoria.py
from pydantic import BaseModel, Field


class CategoriaCreateSchemas(BaseModel):
    nome: str = Field(..., alias="name", min_length=1, examples=["Bolos"])

    class Config:
        populate_by_name = True
        extra = "forbid"


class CategoriaSchemas(BaseModel):
    id: int
    nome: str = Field(..., alias="name")

    class Config:
        from_attributes = True
        populate_by_name = True
