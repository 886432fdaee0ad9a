"""esquema inicial: categorias, produtos, mesas, comandas, itens e vendas

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

unidade_medida = sa.Enum("UNITARIO", "PESO", "FATIA", name="unidademedida")
status_mesa = sa.Enum("LIVRE", "OCUPADA", "RESERVADA", name="statusmesa")
status_comanda = sa.Enum("ABERTA", "FECHADA", name="statuscomanda")
metodo_pagamento = sa.Enum("DINHEIRO", "CARTAO_CREDITO", "CARTAO_DEBITO", "PIX", name="metodopagamento")


def upgrade() -> None:
    op.create_table(
        "categorias",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(), nullable=False),
    )
    op.create_index("ix_categorias_id", "categorias", ["id"])

    op.create_table(
        "produtos",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(), nullable=False),
        sa.Column("preco", sa.Numeric(10, 2), nullable=False),
        sa.Column("unidade_medida", unidade_medida, nullable=False),
        sa.Column("categoria_id", sa.Integer(), sa.ForeignKey("categorias.id"), nullable=False),
        sa.Column("controla_estoque", sa.Boolean(), nullable=False),
        sa.Column("estoque_atual", sa.Numeric(10, 3), nullable=True),
    )
    op.create_index("ix_produtos_id", "produtos", ["id"])
    op.create_index("ix_produtos_nome", "produtos", ["nome"])
    op.create_index("ix_produtos_categoria_id", "produtos", ["categoria_id"])

    op.create_table(
        "mesas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("numero", sa.Integer(), nullable=False),
        sa.Column("status", status_mesa, nullable=False),
    )
    op.create_index("ix_mesas_id", "mesas", ["id"])
    op.create_index("ix_mesas_numero", "mesas", ["numero"], unique=True)

    op.create_table(
        "comandas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("mesa_id", sa.Integer(), sa.ForeignKey("mesas.id"), nullable=True),
        sa.Column("cliente_nome", sa.String(), nullable=True),
        sa.Column("status", status_comanda, nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=True),
        sa.Column("criada_em", sa.DateTime(timezone=True), nullable=False),
        sa.Column("fechada_em", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_comandas_id", "comandas", ["id"])
    op.create_index("ix_comandas_mesa_id", "comandas", ["mesa_id"])
    op.create_index("ix_comandas_status", "comandas", ["status"])

    op.create_table(
        "itens_comanda",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("comanda_id", sa.Integer(), sa.ForeignKey("comandas.id"), nullable=False),
        sa.Column("produto_id", sa.Integer(), nullable=False),
        sa.Column("quantidade", sa.Numeric(10, 3), nullable=False),
        sa.Column("preco_unitario", sa.Numeric(10, 2), nullable=False),
        sa.Column("subtotal", sa.Numeric(10, 2), nullable=False),
    )
    op.create_index("ix_itens_comanda_id", "itens_comanda", ["id"])
    op.create_index("ix_itens_comanda_comanda_id", "itens_comanda", ["comanda_id"])
    op.create_index("ix_itens_comanda_produto_id", "itens_comanda", ["produto_id"])

    op.create_table(
        "vendas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("comanda_id", sa.Integer(), sa.ForeignKey("comandas.id"), nullable=False),
        sa.Column("metodo_pagamento", metodo_pagamento, nullable=False),
        sa.Column("valor_total", sa.Numeric(10, 2), nullable=False),
        sa.Column("valor_recebido", sa.Numeric(10, 2), nullable=True),
        sa.Column("troco", sa.Numeric(10, 2), nullable=True),
        sa.Column("criada_em", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_vendas_id", "vendas", ["id"])
    op.create_index("ix_vendas_comanda_id", "vendas", ["comanda_id"])
    op.create_index("ix_vendas_criada_em", "vendas", ["criada_em"])


def downgrade() -> None:
    op.drop_table("vendas")
    op.drop_table("itens_comanda")
    op.drop_table("comandas")
    op.drop_table("mesas")
    op.drop_table("produtos")
    op.drop_table("categorias")
    bind = op.get_bind()
    for enum in (metodo_pagamento, status_comanda, status_mesa, unidade_medida):
        enum.drop(bind, checkfirst=True)
