# pdv/crud/crud_mesa.py
from typing import List, Optional

from sqlalchemy.orm import Session

from pdv.core.exceptions import ConflitoError, NaoEncontradoError
from pdv.core.logging import get_logger
from pdv.db.models.mesa import Mesa, StatusMesa
from pdv.schemas.mesa import MesaCreateSchemas

logger = get_logger(__name__)


class CRUDMesa:
    def get(self, db: Session, id: int) -> Optional[Mesa]:
        return db.query(Mesa).filter(Mesa.id == id).first()

    def get_by_numero(self, db: Session, *, numero: int) -> Optional[Mesa]:
        return db.query(Mesa).filter(Mesa.numero == numero).first()

    def get_multi(self, db: Session, *, status: Optional[StatusMesa] = None) -> List[Mesa]:
        query = db.query(Mesa)
        if status:
            query = query.filter(Mesa.status == status)
        return query.order_by(Mesa.numero).all()

    def create(self, db: Session, *, obj_in: MesaCreateSchemas) -> Mesa:
        if self.get_by_numero(db, numero=obj_in.numero):
            raise ConflitoError(f"Mesa com o número {obj_in.numero} já existe.")

        db_obj = Mesa(numero=obj_in.numero, status=obj_in.status or StatusMesa.LIVRE)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def definir_status(self, db: Session, *, mesa: Mesa, status: StatusMesa) -> Mesa:
        """Altera o status sem commit; usado dentro da transação de comanda/venda."""
        if mesa.status != status:
            logger.info("Mesa %s: %s -> %s", mesa.numero, mesa.status.value, status.value)
        mesa.status = status
        db.add(mesa)
        return mesa

    def atualizar_status(self, db: Session, *, id: int, status: StatusMesa) -> Mesa:
        # Sem grafo de transições: qualquer status pode ir para qualquer status
        mesa = self.get(db, id=id)
        if not mesa:
            raise NaoEncontradoError("Mesa", id)
        self.definir_status(db, mesa=mesa, status=status)
        db.commit()
        db.refresh(mesa)
        return mesa

mesa = CRUDMesa()
