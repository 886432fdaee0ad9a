from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps
from pdv.services.redis_service import RedisService

router = APIRouter()


@router.post("/", response_model=schemas.VendaSchemas, status_code=status.HTTP_201_CREATED)
def registrar_venda(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    venda_in: schemas.VendaCreateSchemas,
) -> Any:
    """
    Registra a venda de uma comanda aberta.
    O total é sempre recalculado a partir dos itens; em dinheiro, calcula o troco.
    Fecha a comanda e libera a mesa.
    """
    venda = crud.venda.create(db=db, obj_in=venda_in)
    eventos.publish("vendas", {
        "evento": "venda_registrada",
        "venda_id": venda.id,
        "comanda_id": venda.comanda_id,
        "metodo": venda.metodo_pagamento.value,
        "valor_total": str(venda.valor_total),
    })
    return venda


@router.get("/{venda_id}", response_model=schemas.VendaSchemas)
def read_venda_by_id(venda_id: int, db: Session = Depends(deps.get_db)) -> Any:
    venda = crud.venda.get(db=db, id=venda_id)
    if not venda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Venda não encontrada")
    return venda
