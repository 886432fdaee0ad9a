from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from pdv import crud, schemas
from pdv.api import deps

router = APIRouter()


@router.get("/", response_model=List[schemas.ProdutoComCategoriaSchemas])
def read_produtos(db: Session = Depends(deps.get_db)) -> Any:
    """
    Lista o catálogo, cada produto com sua categoria.
    """
    return crud.produto.get_multi(db)


@router.post("/", response_model=schemas.ProdutoSchemas, status_code=status.HTTP_201_CREATED)
def create_produto(
    *,
    db: Session = Depends(deps.get_db),
    produto_in: schemas.ProdutoCreateSchemas,
) -> Any:
    return crud.produto.create(db=db, obj_in=produto_in)


@router.get("/{produto_id}", response_model=schemas.ProdutoSchemas)
def read_produto_by_id(produto_id: int, db: Session = Depends(deps.get_db)) -> Any:
    produto = crud.produto.get(db=db, id=produto_id)
    if not produto:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Produto não encontrado")
    return produto


@router.put("/{produto_id}", response_model=schemas.ProdutoSchemas)
def update_produto(
    *,
    db: Session = Depends(deps.get_db),
    produto_id: int,
    produto_in: schemas.ProdutoUpdateSchemas,
) -> Any:
    """
    Atualização parcial: campos não enviados permanecem como estão.
    Itens já lançados em comandas mantêm o preço antigo.
    """
    return crud.produto.update(db=db, id=produto_id, obj_in=produto_in)


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_produto(produto_id: int, db: Session = Depends(deps.get_db)) -> Response:
    crud.produto.remove(db=db, id=produto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
