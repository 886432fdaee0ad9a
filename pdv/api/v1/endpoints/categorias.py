from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps

router = APIRouter()


@router.get("/", response_model=List[schemas.CategoriaSchemas])
def read_categorias(db: Session = Depends(deps.get_db)) -> Any:
    return crud.categoria.get_multi(db)


@router.post("/", response_model=schemas.CategoriaSchemas, status_code=status.HTTP_201_CREATED)
def create_categoria(
    *,
    db: Session = Depends(deps.get_db),
    categoria_in: schemas.CategoriaCreateSchemas,
) -> Any:
    return crud.categoria.create(db=db, obj_in=categoria_in)
