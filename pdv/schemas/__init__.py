from .categoria import CategoriaSchemas, CategoriaCreateSchemas
from .produto import ProdutoSchemas, ProdutoComCategoriaSchemas, ProdutoCreateSchemas, ProdutoUpdateSchemas
from .mesa import MesaSchemas, MesaCreateSchemas, MesaStatusUpdateSchemas
from .comanda import (
    ComandaSchemas, ComandaCompletaSchemas, ComandaCreateSchemas,
    ItemComandaSchemas, ItemComandaComProdutoSchemas, ItemComandaCreateSchemas, ItemQuantidadeUpdateSchemas,
)
from .venda import VendaSchemas, VendaCreateSchemas
from .relatorio import RelatorioVendas, VendasPorDia, ProdutoMaisVendido
