from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps

router = APIRouter()


@router.get("/vendas", response_model=schemas.RelatorioVendas)
def relatorio_vendas(
    db: Session = Depends(deps.get_db),
    de: date = Query(..., description="Data inicial (YYYY-MM-DD), inclusiva"),
    ate: date = Query(..., description="Data final (YYYY-MM-DD), inclusiva"),
) -> Any:
    return crud.relatorio.get_relatorio_vendas(db, data_inicio=de, data_fim=ate)
