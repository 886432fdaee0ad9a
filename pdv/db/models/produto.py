# pdv/db/models/produto.py
import enum

from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship

from pdv.db.base_class import Base


class UnidadeMedida(str, enum.Enum):
    UNITARIO = "unit"
    PESO = "weight"  # Preço por kg, quantidade fracionada
    FATIA = "slice"


class Produto(Base):
    nome = Column(String, nullable=False, index=True)
    preco = Column(Numeric(10, 2), nullable=False)
    unidade_medida = Column(SAEnum(UnidadeMedida), nullable=False, default=UnidadeMedida.UNITARIO)
    categoria_id = Column(ForeignKey("categorias.id"), nullable=False, index=True)
    controla_estoque = Column(Boolean, nullable=False, default=False)
    estoque_atual = Column(Numeric(10, 3), nullable=True)

    categoria = relationship("Categoria", back_populates="produtos", lazy="joined")
