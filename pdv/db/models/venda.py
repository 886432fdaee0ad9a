# pdv/db/models/venda.py
import enum

from sqlalchemy import Column, ForeignKey, Numeric, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship

from pdv.core.dinheiro import utcnow
from pdv.db.base_class import Base


class MetodoPagamento(str, enum.Enum):
    DINHEIRO = "cash"
    CARTAO_CREDITO = "credit_card"
    CARTAO_DEBITO = "debit_card"
    PIX = "pix"


class Venda(Base):
    comanda_id = Column(ForeignKey("comandas.id"), nullable=False, index=True)
    metodo_pagamento = Column(SAEnum(MetodoPagamento), nullable=False)
    valor_total = Column(Numeric(10, 2), nullable=False)
    valor_recebido = Column(Numeric(10, 2), nullable=True)  # Apenas dinheiro
    troco = Column(Numeric(10, 2), nullable=True)  # Apenas dinheiro
    criada_em = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    comanda = relationship("Comanda", back_populates="vendas")
