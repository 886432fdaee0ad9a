# pdv/crud/crud_produto.py
from typing import List, Optional, Union, Dict, Any

from sqlalchemy.orm import Session

from pdv.core.dinheiro import quantizar_dinheiro, quantizar_quantidade
from pdv.core.exceptions import ArgumentoInvalidoError, NaoEncontradoError
from pdv.crud.crud_categoria import categoria as crud_categoria
from pdv.db.models.produto import Produto
from pdv.schemas.produto import ProdutoCreateSchemas, ProdutoUpdateSchemas

# Colunas NOT NULL; estoque_atual pode ser limpo com None
CAMPOS_OBRIGATORIOS = ("nome", "preco", "unidade_medida", "categoria_id", "controla_estoque")


class CRUDProduto:
    def get(self, db: Session, id: int) -> Optional[Produto]:
        return db.query(Produto).filter(Produto.id == id).first()

    def get_multi(self, db: Session) -> List[Produto]:
        # A categoria vem junto (lazy="joined") para o catálogo já sair completo
        return db.query(Produto).order_by(Produto.id).all()

    def _validar_categoria(self, db: Session, categoria_id: int) -> None:
        if not crud_categoria.get(db, id=categoria_id):
            raise NaoEncontradoError("Categoria", categoria_id)

    def create(self, db: Session, *, obj_in: ProdutoCreateSchemas) -> Produto:
        self._validar_categoria(db, obj_in.categoria_id)

        db_obj = Produto(
            nome=obj_in.nome,
            preco=quantizar_dinheiro(obj_in.preco),
            unidade_medida=obj_in.unidade_medida,
            categoria_id=obj_in.categoria_id,
            controla_estoque=obj_in.controla_estoque if obj_in.controla_estoque is not None else False,
            estoque_atual=quantizar_quantidade(obj_in.estoque_atual) if obj_in.estoque_atual is not None else None,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, id: int, obj_in: Union[ProdutoUpdateSchemas, Dict[str, Any]]
    ) -> Produto:
        db_obj = self.get(db, id=id)
        if not db_obj:
            raise NaoEncontradoError("Produto", id)

        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        nulos = [campo for campo in CAMPOS_OBRIGATORIOS if campo in update_data and update_data[campo] is None]
        if nulos:
            raise ArgumentoInvalidoError(f"Campos obrigatórios não podem ser nulos: {', '.join(nulos)}")

        if update_data.get("categoria_id") is not None:
            self._validar_categoria(db, update_data["categoria_id"])
        if update_data.get("preco") is not None:
            update_data["preco"] = quantizar_dinheiro(update_data["preco"])
        if update_data.get("estoque_atual") is not None:
            update_data["estoque_atual"] = quantizar_quantidade(update_data["estoque_atual"])

        # Campos não informados permanecem como estão
        for field in update_data:
            if hasattr(db_obj, field):
                setattr(db_obj, field, update_data[field])

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: int) -> None:
        """Exclusão idempotente: id inexistente não é erro. Itens já lançados mantêm o produto_id."""
        obj = self.get(db, id=id)
        if obj:
            db.delete(obj)
            db.commit()

produto = CRUDProduto()
