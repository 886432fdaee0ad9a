# pdv/seed.py
"""Dados de demonstração: categorias, produtos de confeitaria e 12 mesas."""
from decimal import Decimal

from sqlalchemy.orm import Session

from pdv.core.logging import get_logger
from pdv.db.models import Categoria, Mesa, Produto, StatusMesa, UnidadeMedida

logger = get_logger(__name__)

CATEGORIAS = ["Doces", "Bolos", "Tortas", "Salgados", "Bebidas"]

# (nome, preço, unidade, categoria, estoque)
PRODUTOS = [
    ("Brigadeiro Gourmet", "6.00", UnidadeMedida.UNITARIO, "Doces", "120"),
    ("Bolo de Chocolate", "8.50", UnidadeMedida.FATIA, "Bolos", "8"),
    ("Torta de Morango", "130.00", UnidadeMedida.PESO, "Tortas", "2.5"),
    ("Pão de Açúcar", "3.50", UnidadeMedida.UNITARIO, "Salgados", "50"),
    ("Refrigerante", "4.00", UnidadeMedida.UNITARIO, "Bebidas", "30"),
    ("Torta de Limão", "9.00", UnidadeMedida.FATIA, "Tortas", "6"),
    ("Cupcake", "7.50", UnidadeMedida.UNITARIO, "Doces", "24"),
    ("Cookie", "4.50", UnidadeMedida.UNITARIO, "Doces", "40"),
]

TOTAL_MESAS = 12
MESAS_OCUPADAS = {2, 5, 9, 11}
MESAS_RESERVADAS = {3}


def status_inicial_mesa(numero: int) -> StatusMesa:
    if numero in MESAS_OCUPADAS:
        return StatusMesa.OCUPADA
    if numero in MESAS_RESERVADAS:
        return StatusMesa.RESERVADA
    return StatusMesa.LIVRE


def seed_dados_iniciais(db: Session) -> bool:
    """Popula um banco vazio. Retorna False se já havia dados."""
    if db.query(Categoria).first() is not None:
        return False

    categorias = {nome: Categoria(nome=nome) for nome in CATEGORIAS}
    db.add_all(categorias.values())
    db.flush()

    for nome, preco, unidade, categoria, estoque in PRODUTOS:
        db.add(Produto(
            nome=nome,
            preco=Decimal(preco),
            unidade_medida=unidade,
            categoria_id=categorias[categoria].id,
            controla_estoque=True,
            estoque_atual=Decimal(estoque),
        ))

    for numero in range(1, TOTAL_MESAS + 1):
        db.add(Mesa(numero=numero, status=status_inicial_mesa(numero)))

    db.commit()
    logger.info("Dados iniciais criados: %d categorias, %d produtos, %d mesas",
                len(CATEGORIAS), len(PRODUTOS), TOTAL_MESAS)
    return True
