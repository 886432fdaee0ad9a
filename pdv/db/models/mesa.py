# pdv/db/models/mesa.py
import enum

from sqlalchemy import Column, Integer, Enum as SAEnum
from sqlalchemy.orm import relationship

from pdv.db.base_class import Base


class StatusMesa(str, enum.Enum):
    LIVRE = "free"
    OCUPADA = "occupied"
    RESERVADA = "reserved"


class Mesa(Base):
    numero = Column(Integer, nullable=False, unique=True, index=True)
    status = Column(SAEnum(StatusMesa), default=StatusMesa.LIVRE, nullable=False)

    # Uma mesa tem várias comandas ao longo do tempo, mas no máximo uma aberta
    comandas = relationship("Comanda", back_populates="mesa", order_by="Comanda.id")
