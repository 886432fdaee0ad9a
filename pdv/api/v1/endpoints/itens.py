from typing import Any

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps
from pdv.services.redis_service import RedisService

router = APIRouter()


@router.put("/{item_id}", response_model=schemas.ItemComandaSchemas)
def update_quantidade_item(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    item_id: int,
    item_in: schemas.ItemQuantidadeUpdateSchemas,
) -> Any:
    """
    Define a nova quantidade do item. Quantidade zero ou negativa é rejeitada;
    para tirar o item da comanda use DELETE.
    """
    item = crud.item_comanda.atualizar_quantidade(db=db, item_id=item_id, quantidade=item_in.quantidade)
    eventos.publish("comandas", {
        "evento": "item_atualizado",
        "comanda_id": item.comanda_id,
        "item_id": item.id,
        "quantidade": str(item.quantidade),
    })
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_item(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    item_id: int,
) -> Response:
    removido = crud.item_comanda.remove(db=db, id=item_id)
    if removido:
        eventos.publish("comandas", {"evento": "item_removido", "comanda_id": removido.comanda_id, "item_id": item_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
