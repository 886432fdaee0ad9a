# pdv/crud/crud_venda.py
from typing import List, Optional

from sqlalchemy.orm import Session

from pdv.core.dinheiro import quantizar_dinheiro, quantizar_quantidade, utcnow
from pdv.core.exceptions import ArgumentoInvalidoError, ConflitoError, NaoEncontradoError
from pdv.core.logging import get_logger
from pdv.crud.crud_comanda import comanda as crud_comanda
from pdv.db.models.comanda import ItemComanda
from pdv.db.models.produto import Produto
from pdv.db.models.venda import MetodoPagamento, Venda
from pdv.schemas.venda import VendaCreateSchemas

logger = get_logger(__name__)


class CRUDVenda:
    def get(self, db: Session, id: int) -> Optional[Venda]:
        return db.query(Venda).filter(Venda.id == id).first()

    def get_multi_by_comanda(self, db: Session, *, comanda_id: int) -> List[Venda]:
        return db.query(Venda).filter(Venda.comanda_id == comanda_id).order_by(Venda.id).all()

    def create(self, db: Session, *, obj_in: VendaCreateSchemas) -> Venda:
        """
        Registra a venda de uma comanda aberta.

        Numa única transação: grava a venda, fecha a comanda com o total
        recalculado, libera a mesa e baixa o estoque dos produtos controlados.
        Qualquer falha desfaz tudo.
        """
        comanda = crud_comanda.get(db, id=obj_in.comanda_id)
        if not comanda:
            raise NaoEncontradoError("Comanda", obj_in.comanda_id)
        if not comanda.aberta:
            raise ConflitoError(f"Comanda {comanda.id} já está fechada.")

        itens = (
            db.query(ItemComanda).filter(ItemComanda.comanda_id == comanda.id).order_by(ItemComanda.id).all()
        )
        if not itens:
            raise ArgumentoInvalidoError("Comanda sem itens não pode ser vendida.")

        total = crud_comanda.calcular_total(db, comanda_id=comanda.id)

        valor_recebido = None
        troco = None
        if obj_in.metodo_pagamento == MetodoPagamento.DINHEIRO:
            if obj_in.valor_recebido is None:
                raise ArgumentoInvalidoError("Valor recebido é obrigatório para pagamento em dinheiro.")
            valor_recebido = quantizar_dinheiro(obj_in.valor_recebido)
            if valor_recebido < total:
                raise ArgumentoInvalidoError(
                    f"Valor insuficiente: recebido R$ {valor_recebido}, total R$ {total}."
                )
            troco = valor_recebido - total

        agora = utcnow()
        try:
            db_venda = Venda(
                comanda_id=comanda.id,
                metodo_pagamento=obj_in.metodo_pagamento,
                valor_total=total,
                valor_recebido=valor_recebido,
                troco=troco,
                criada_em=agora,
            )
            db.add(db_venda)
            crud_comanda.encerrar(db, comanda=comanda, total=total, momento=agora)
            self._baixar_estoque(db, itens)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(db_venda)
        logger.info(
            "Venda %s registrada: comanda=%s metodo=%s total=%s",
            db_venda.id, db_venda.comanda_id, db_venda.metodo_pagamento.value, db_venda.valor_total,
        )
        return db_venda

    def _baixar_estoque(self, db: Session, itens: List[ItemComanda]) -> None:
        # Estoque é informativo: pode ficar negativo, nunca bloqueia a venda
        for item in itens:
            produto = db.query(Produto).filter(Produto.id == item.produto_id).first()
            if not produto or not produto.controla_estoque or produto.estoque_atual is None:
                continue
            produto.estoque_atual = quantizar_quantidade(produto.estoque_atual - item.quantidade)
            db.add(produto)

venda = CRUDVenda()
