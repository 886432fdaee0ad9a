# pdv/db/models/comanda.py
import enum

from sqlalchemy import Column, ForeignKey, Integer, String, Numeric, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship

from pdv.core.dinheiro import utcnow
from pdv.db.base_class import Base


class StatusComanda(str, enum.Enum):
    ABERTA = "open"
    FECHADA = "closed"  # Terminal, não existe reabertura


class Comanda(Base):
    # mesa_id nulo = venda avulsa (balcão)
    mesa_id = Column(ForeignKey("mesas.id"), nullable=True, index=True)
    cliente_nome = Column(String, nullable=True)
    status = Column(SAEnum(StatusComanda), default=StatusComanda.ABERTA, nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=True)  # Só é preenchido no fechamento
    criada_em = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    fechada_em = Column(DateTime(timezone=True), nullable=True)

    mesa = relationship("Mesa", back_populates="comandas")
    itens = relationship(
        "ItemComanda", back_populates="comanda", order_by="ItemComanda.id", cascade="all, delete-orphan"
    )
    vendas = relationship("Venda", back_populates="comanda")

    @property
    def aberta(self) -> bool:
        return self.status == StatusComanda.ABERTA


class ItemComanda(Base):
    __tablename__ = "itens_comanda"

    comanda_id = Column(ForeignKey("comandas.id"), nullable=False, index=True)
    # Sem FK: excluir um produto não apaga o histórico de itens vendidos
    produto_id = Column(Integer, nullable=False, index=True)
    quantidade = Column(Numeric(10, 3), nullable=False)
    preco_unitario = Column(Numeric(10, 2), nullable=False)  # Preço no momento da inclusão
    subtotal = Column(Numeric(10, 2), nullable=False)

    comanda = relationship("Comanda", back_populates="itens")
    produto = relationship(
        "Produto", primaryjoin="foreign(ItemComanda.produto_id) == Produto.id", viewonly=True
    )
