# pdv/crud/crud_comanda.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from pdv.core.dinheiro import ZERO, calcular_subtotal, quantizar_dinheiro, quantizar_quantidade, utcnow
from pdv.core.exceptions import ArgumentoInvalidoError, ConflitoError, NaoEncontradoError
from pdv.core.logging import get_logger
from pdv.crud.crud_mesa import mesa as crud_mesa
from pdv.crud.crud_produto import produto as crud_produto
from pdv.db.models.comanda import Comanda, ItemComanda, StatusComanda
from pdv.db.models.mesa import StatusMesa
from pdv.schemas.comanda import ComandaCreateSchemas, ItemComandaCreateSchemas

logger = get_logger(__name__)


class CRUDComanda:
    def get(self, db: Session, id: int) -> Optional[Comanda]:
        return db.query(Comanda).filter(Comanda.id == id).first()

    def get_completa(self, db: Session, id: int) -> Optional[Comanda]:
        """Comanda com mesa e itens (cada item com seu produto, ou None se o produto foi excluído)."""
        return (
            db.query(Comanda)
            .options(
                selectinload(Comanda.mesa),
                selectinload(Comanda.itens).selectinload(ItemComanda.produto),
            )
            .filter(Comanda.id == id)
            .first()
        )

    def get_multi(
        self, db: Session, *, status: Optional[StatusComanda] = None, skip: int = 0, limit: int = 100
    ) -> List[Comanda]:
        query = db.query(Comanda)
        if status:
            query = query.filter(Comanda.status == status)
        return query.order_by(Comanda.id.desc()).offset(skip).limit(limit).all()

    def get_aberta_by_mesa(self, db: Session, *, mesa_id: int) -> Optional[Comanda]:
        """Retorna a comanda aberta da mesa. Se houver mais de uma, a primeira criada."""
        return db.query(Comanda).filter(
            Comanda.mesa_id == mesa_id,
            Comanda.status == StatusComanda.ABERTA,
        ).order_by(Comanda.id).first()

    def get_aberta_para_alteracao(self, db: Session, *, comanda_id: int) -> Comanda:
        comanda = self.get(db, id=comanda_id)
        if not comanda:
            raise NaoEncontradoError("Comanda", comanda_id)
        if not comanda.aberta:
            raise ConflitoError(f"Comanda {comanda_id} já está fechada.")
        return comanda

    def create(self, db: Session, *, obj_in: ComandaCreateSchemas) -> Comanda:
        """
        Abre uma comanda. Com mesa, a mesa passa para OCUPADA na mesma transação.
        Uma mesa só pode ter uma comanda aberta por vez.
        """
        mesa = None
        if obj_in.mesa_id is not None:
            mesa = crud_mesa.get(db, id=obj_in.mesa_id)
            if not mesa:
                raise NaoEncontradoError("Mesa", obj_in.mesa_id)
            existente = self.get_aberta_by_mesa(db, mesa_id=mesa.id)
            if existente:
                raise ConflitoError(
                    f"Mesa {mesa.numero} já possui uma comanda aberta (ID: {existente.id})."
                )

        db_obj = Comanda(
            mesa_id=obj_in.mesa_id,
            cliente_nome=obj_in.cliente_nome,
            status=StatusComanda.ABERTA,
            total=None,
            criada_em=utcnow(),
        )
        db.add(db_obj)
        if mesa:
            crud_mesa.definir_status(db, mesa=mesa, status=StatusMesa.OCUPADA)

        db.commit()
        db.refresh(db_obj)
        logger.info("Comanda %s aberta (mesa_id=%s)", db_obj.id, db_obj.mesa_id)
        return db_obj

    def calcular_total(self, db: Session, *, comanda_id: int) -> Decimal:
        """Soma os subtotais atuais dos itens; nunca usa um total acumulado."""
        subtotais = db.query(ItemComanda.subtotal).filter(ItemComanda.comanda_id == comanda_id).all()
        return quantizar_dinheiro(sum((subtotal for (subtotal,) in subtotais), ZERO))

    def encerrar(self, db: Session, *, comanda: Comanda, total: Decimal, momento: Optional[datetime] = None) -> Comanda:
        """
        Caminho único de término da comanda (fechamento direto ou venda):
        grava total e data de fechamento e libera a mesa. Não faz commit.
        """
        comanda.status = StatusComanda.FECHADA
        comanda.total = quantizar_dinheiro(total)
        comanda.fechada_em = momento or utcnow()
        db.add(comanda)

        if comanda.mesa_id is not None:
            mesa = crud_mesa.get(db, id=comanda.mesa_id)
            if mesa:
                crud_mesa.definir_status(db, mesa=mesa, status=StatusMesa.LIVRE)
        return comanda

    def fechar_comanda(self, db: Session, *, comanda_id: int) -> Comanda:
        comanda = self.get_aberta_para_alteracao(db, comanda_id=comanda_id)
        total = self.calcular_total(db, comanda_id=comanda.id)

        try:
            self.encerrar(db, comanda=comanda, total=total)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(comanda)
        logger.info("Comanda %s fechada sem venda (total=%s)", comanda.id, comanda.total)
        return comanda


class CRUDItemComanda:
    def get(self, db: Session, id: int) -> Optional[ItemComanda]:
        return db.query(ItemComanda).filter(ItemComanda.id == id).first()

    def get_multi_by_comanda(self, db: Session, *, comanda_id: int) -> List[ItemComanda]:
        return db.query(ItemComanda).filter(ItemComanda.comanda_id == comanda_id).order_by(ItemComanda.id).all()

    @staticmethod
    def _validar_quantidade(quantidade) -> Decimal:
        quantidade = quantizar_quantidade(quantidade)
        if quantidade <= 0:
            raise ArgumentoInvalidoError("Quantidade deve ser maior que zero.")
        return quantidade

    def create(self, db: Session, *, comanda_id: int, obj_in: ItemComandaCreateSchemas) -> ItemComanda:
        comanda = crud_comanda.get_aberta_para_alteracao(db, comanda_id=comanda_id)

        produto = crud_produto.get(db, id=obj_in.produto_id)
        if not produto:
            raise NaoEncontradoError("Produto", obj_in.produto_id)

        quantidade = self._validar_quantidade(obj_in.quantidade)
        # O preço fica congelado no item; alterar o produto depois não afeta a comanda
        preco_unitario = quantizar_dinheiro(produto.preco)

        db_item = ItemComanda(
            comanda_id=comanda.id,
            produto_id=produto.id,
            quantidade=quantidade,
            preco_unitario=preco_unitario,
            subtotal=calcular_subtotal(quantidade, preco_unitario),
        )
        db.add(db_item)
        db.commit()
        db.refresh(db_item)
        return db_item

    def atualizar_quantidade(self, db: Session, *, item_id: int, quantidade) -> ItemComanda:
        """
        Define a quantidade e recalcula o subtotal com o preço congelado do item.
        Quantidade <= 0 é rejeitada: remover o item é decisão de quem chama (remove).
        """
        item = self.get(db, id=item_id)
        if not item:
            raise NaoEncontradoError("Item", item_id)
        crud_comanda.get_aberta_para_alteracao(db, comanda_id=item.comanda_id)

        quantidade = self._validar_quantidade(quantidade)
        item.quantidade = quantidade
        item.subtotal = calcular_subtotal(quantidade, item.preco_unitario)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def remove(self, db: Session, *, id: int) -> Optional[ItemComanda]:
        item = self.get(db, id=id)
        if not item:
            return None  # Idempotente
        crud_comanda.get_aberta_para_alteracao(db, comanda_id=item.comanda_id)
        db.delete(item)
        db.commit()
        return item

comanda = CRUDComanda()
crud_comanda = comanda
item_comanda = CRUDItemComanda()
