# Importa todos os modelos para que o metadata (create_all / Alembic) os conheça
from pdv.db.models.categoria import Categoria
from pdv.db.models.produto import Produto, UnidadeMedida
from pdv.db.models.mesa import Mesa, StatusMesa
from pdv.db.models.comanda import Comanda, ItemComanda, StatusComanda
from pdv.db.models.venda import Venda, MetodoPagamento
