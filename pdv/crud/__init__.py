from .crud_categoria import categoria
from .crud_produto import produto
from .crud_mesa import mesa
from .crud_comanda import comanda, item_comanda
from .crud_venda import venda
from .crud_relatorio import relatorio
