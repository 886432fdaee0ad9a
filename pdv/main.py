from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdv.core.config import settings
from pdv.core.exceptions import ErroPDV
from pdv.core.logging import configurar_logging, get_logger
from pdv.api.v1.router import api_router_v1
from pdv.database import SessionLocal, engine
from pdv.db.base_class import Base
from pdv.db import models  # noqa: F401  Registra os modelos no metadata
from pdv.seed import seed_dados_iniciais
from pdv.services.redis_service import redis_service

configurar_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="PDV para confeitaria/restaurante: mesas, produtos, comandas, vendas e relatórios",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    contact={
        "name": "Suporte Técnico",
        "email": settings.SUPPORT_EMAIL,
    },
    license_info={
        "name": "MIT",
    },
)

# Configuração de CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ErroPDV)
async def erro_pdv_handler(request: Request, exc: ErroPDV) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.on_event("startup")
def preparar_banco():
    # Banco em memória (ou desenvolvimento) nasce vazio: cria as tabelas aqui.
    # Em produção, use migrações com Alembic.
    if settings.ENVIRONMENT == "development" or settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
        logger.info("Tabelas criadas")
    if settings.SEED_DADOS_INICIAIS:
        with SessionLocal() as db:
            seed_dados_iniciais(db)


@app.on_event("shutdown")
def encerrar_redis():
    redis_service.disconnect()


# Inclui todas as rotas da API V1
app.include_router(api_router_v1, prefix=settings.API_V1_STR)

@app.get("/", tags=["Root"])
def read_root():
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": "/docs",
        "status": "operacional",
        "environment": settings.ENVIRONMENT
    }

@app.get("/health", tags=["Health Check"])
def health_check():
    """Endpoint para verificação de saúde da API"""
    return {
        "status": "healthy",
        "database": "memory" if settings.DATABASE_URL.startswith("sqlite") else "external",
        "environment": settings.ENVIRONMENT
    }
