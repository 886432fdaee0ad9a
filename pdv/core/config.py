from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Configurações básicas do projeto
    PROJECT_NAME: str = "PDV Comandas"
    PROJECT_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Banco de dados. "sqlite://" mantém tudo em memória no processo;
    # qualquer URL do SQLAlchemy (ex: postgresql://...) troca o backend.
    DATABASE_URL: str = "sqlite://"

    # Configurações opcionais (com valores padrão)
    ENVIRONMENT: str = "development"
    SUPPORT_EMAIL: str = "support@example.com"
    LOG_LEVEL: str = "INFO"
    SEED_DADOS_INICIAIS: bool = True

    # Notificações via Redis (desligadas por padrão)
    REDIS_ENABLED: bool = False
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_CANAL_PREFIXO: str = "pdv"

    # Configurações de CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignora variáveis extras não declaradas


settings = Settings()
