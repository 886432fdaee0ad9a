from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps
from pdv.db.models.comanda import StatusComanda
from pdv.services.redis_service import RedisService

router = APIRouter()


@router.get("/", response_model=List[schemas.ComandaSchemas])
def read_comandas(
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100,
    status_comanda: Optional[StatusComanda] = None,
) -> Any:
    """
    Recupera a lista de comandas (mais recentes primeiro), opcionalmente filtrada por status.
    """
    return crud.comanda.get_multi(db, status=status_comanda, skip=skip, limit=limit)


@router.post("/", response_model=schemas.ComandaSchemas, status_code=status.HTTP_201_CREATED)
def create_comanda(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    comanda_in: schemas.ComandaCreateSchemas,
) -> Any:
    """
    Abre uma comanda. Com mesa, a mesa passa a ocupada.
    """
    comanda = crud.comanda.create(db=db, obj_in=comanda_in)
    eventos.publish("comandas", {"evento": "comanda_criada", "comanda_id": comanda.id, "mesa_id": comanda.mesa_id})
    return comanda


@router.get("/{comanda_id}", response_model=schemas.ComandaCompletaSchemas)
def read_comanda_by_id(comanda_id: int, db: Session = Depends(deps.get_db)) -> Any:
    comanda = crud.comanda.get_completa(db=db, id=comanda_id)
    if not comanda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comanda não encontrada")
    return comanda


@router.post("/{comanda_id}/itens", response_model=schemas.ItemComandaSchemas, status_code=status.HTTP_201_CREATED)
def add_item_comanda(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    comanda_id: int,
    item_in: schemas.ItemComandaCreateSchemas,
) -> Any:
    item = crud.item_comanda.create(db=db, comanda_id=comanda_id, obj_in=item_in)
    eventos.publish("comandas", {
        "evento": "item_adicionado",
        "comanda_id": item.comanda_id,
        "item_id": item.id,
        "produto_id": item.produto_id,
        "quantidade": str(item.quantidade),
    })
    return item


@router.put("/{comanda_id}/fechar", response_model=schemas.ComandaSchemas)
def fechar_comanda(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    comanda_id: int,
) -> Any:
    """
    Fecha a comanda sem venda: calcula o total a partir dos itens e libera a mesa.
    """
    comanda = crud.comanda.fechar_comanda(db=db, comanda_id=comanda_id)
    eventos.publish("comandas", {
        "evento": "comanda_fechada",
        "comanda_id": comanda.id,
        "mesa_id": comanda.mesa_id,
        "total": str(comanda.total),
    })
    return comanda
