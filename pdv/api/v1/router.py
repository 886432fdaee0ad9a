from fastapi import APIRouter

from pdv.api.v1.endpoints import (
    categorias,
    produtos,
    mesas,
    comandas,
    itens,
    vendas,
    relatorios,
)

api_router_v1 = APIRouter()

api_router_v1.include_router(categorias.router, prefix="/categorias", tags=["Categorias"])
api_router_v1.include_router(produtos.router, prefix="/produtos", tags=["Produtos"])
api_router_v1.include_router(mesas.router, prefix="/mesas", tags=["Mesas"])
api_router_v1.include_router(comandas.router, prefix="/comandas", tags=["Comandas"])
api_router_v1.include_router(itens.router, prefix="/itens", tags=["Itens da Comanda"])
api_router_v1.include_router(vendas.router, prefix="/vendas", tags=["Vendas"])
api_router_v1.include_router(relatorios.router, prefix="/relatorios", tags=["Relatórios"])

@api_router_v1.get("/", tags=["Root V1"])
def read_root_v1():
    return {"message": "API V1 Operacional"}
