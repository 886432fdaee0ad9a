from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps
from pdv.db.models.mesa import StatusMesa
from pdv.services.redis_service import RedisService

router = APIRouter()


@router.get("/", response_model=List[schemas.MesaSchemas])
def read_mesas(
    db: Session = Depends(deps.get_db),
    status_mesa: Optional[StatusMesa] = None,
) -> Any:
    """
    Recupera a lista de mesas, opcionalmente filtrada por status.
    """
    return crud.mesa.get_multi(db, status=status_mesa)


@router.post("/", response_model=schemas.MesaSchemas, status_code=status.HTTP_201_CREATED)
def create_mesa(
    *,
    db: Session = Depends(deps.get_db),
    mesa_in: schemas.MesaCreateSchemas,
) -> Any:
    return crud.mesa.create(db=db, obj_in=mesa_in)


@router.get("/{mesa_id}", response_model=schemas.MesaSchemas)
def read_mesa_by_id(mesa_id: int, db: Session = Depends(deps.get_db)) -> Any:
    mesa = crud.mesa.get(db=db, id=mesa_id)
    if not mesa:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mesa não encontrada")
    return mesa


@router.put("/{mesa_id}/status", response_model=schemas.MesaSchemas)
def update_status_mesa(
    *,
    db: Session = Depends(deps.get_db),
    eventos: RedisService = Depends(deps.get_eventos),
    mesa_id: int,
    status_in: schemas.MesaStatusUpdateSchemas,
) -> Any:
    mesa = crud.mesa.atualizar_status(db=db, id=mesa_id, status=status_in.status)
    eventos.publish("mesas", {"evento": "mesa_status_alterado", "mesa_id": mesa.id, "status": mesa.status.value})
    return mesa


@router.get("/{mesa_id}/comanda", response_model=schemas.ComandaSchemas)
def read_comanda_aberta_da_mesa(mesa_id: int, db: Session = Depends(deps.get_db)) -> Any:
    """
    Comanda aberta da mesa, se existir.
    """
    comanda = crud.comanda.get_aberta_by_mesa(db, mesa_id=mesa_id)
    if not comanda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mesa sem comanda aberta")
    return comanda
