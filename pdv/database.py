# pdv/database.py
from typing import AsyncGenerator

import anyio
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pdv.core.config import settings


def criar_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        # Banco em memória: uma única conexão compartilhada entre as threads do servidor
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


# Define o motor de banco de dados
engine = criar_engine(settings.DATABASE_URL)

# Cria uma fábrica de sessões
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=True,
    bind=engine,
)

# Um único escritor por vez: cada requisição é uma transação completa e
# nenhum leitor enxerga uma venda aplicada pela metade. O lock é aguardado
# no event loop: requisições na fila não ocupam threads do pool.
_escritor = anyio.Lock()


# Dependência para obter uma sessão de banco de dados
async def get_db() -> AsyncGenerator[Session, None]:
    async with _escritor:
        session = SessionLocal()
        try:
            yield session
            await run_in_threadpool(session.commit)
        except Exception:
            await run_in_threadpool(session.rollback)
            raise
        finally:
            await run_in_threadpool(session.close)
