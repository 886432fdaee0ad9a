# pdv/crud/crud_categoria.py
from typing import List, Optional

from sqlalchemy.orm import Session

from pdv.db.models.categoria import Categoria
from pdv.schemas.categoria import CategoriaCreateSchemas


class CRUDCategoria:
    def get(self, db: Session, id: int) -> Optional[Categoria]:
        return db.query(Categoria).filter(Categoria.id == id).first()

    def get_multi(self, db: Session) -> List[Categoria]:
        return db.query(Categoria).order_by(Categoria.id).all()

    def create(self, db: Session, *, obj_in: CategoriaCreateSchemas) -> Categoria:
        db_obj = Categoria(nome=obj_in.nome)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

categoria = CRUDCategoria()
