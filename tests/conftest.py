"""
Pytest configuration and fixtures for the PDV tests.
"""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from pdv import crud
from pdv.api.deps import get_eventos
from pdv.database import criar_engine, get_db
from pdv.db.base_class import Base
from pdv.db.models import UnidadeMedida
from pdv.main import app
from pdv.schemas import CategoriaCreateSchemas, MesaCreateSchemas, ProdutoCreateSchemas


# SQLite in-memory database for testing
engine = criar_engine("sqlite://")
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class EventosFake:
    """Substitui o RedisService: guarda os eventos em memória."""

    def __init__(self):
        self.publicados = []

    def publish(self, channel, message):
        self.publicados.append((channel, message))
        return True

    def nomes(self):
        return [message["evento"] for _, message in self.publicados]


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def eventos():
    return EventosFake()


@pytest.fixture(scope="function")
def client(db_session, eventos):
    """
    Create a test client with database session and event publisher overrides.
    """
    def override_get_db():
        try:
            yield db_session
            db_session.commit()
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_eventos] = lambda: eventos
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def categoria(db_session):
    return crud.categoria.create(db_session, obj_in=CategoriaCreateSchemas(nome="Doces"))


def novo_produto(db, categoria, nome, preco, unidade=UnidadeMedida.UNITARIO, estoque=None):
    return crud.produto.create(db, obj_in=ProdutoCreateSchemas(
        nome=nome,
        preco=Decimal(preco),
        unidade_medida=unidade,
        categoria_id=categoria.id,
        controla_estoque=estoque is not None,
        estoque_atual=Decimal(estoque) if estoque is not None else None,
    ))


@pytest.fixture
def brigadeiro(db_session, categoria):
    return novo_produto(db_session, categoria, "Brigadeiro Gourmet", "6.00", estoque="120")


@pytest.fixture
def torta(db_session, categoria):
    return novo_produto(db_session, categoria, "Torta de Morango", "130.00", UnidadeMedida.PESO, estoque="2.5")


@pytest.fixture
def refrigerante(db_session, categoria):
    return novo_produto(db_session, categoria, "Refrigerante", "4.00")


@pytest.fixture
def mesa(db_session):
    return crud.mesa.create(db_session, obj_in=MesaCreateSchemas(numero=3))
