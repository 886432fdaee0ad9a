# pdv/db/models/categoria.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from pdv.db.base_class import Base


class Categoria(Base):
    nome = Column(String, nullable=False)

    produtos = relationship("Produto", back_populates="categoria")
