# pdv/services/redis_service.py
import json
from typing import Any, Dict, Optional

import redis

from pdv.core.config import settings
from pdv.core.logging import get_logger

logger = get_logger(__name__)


class RedisService:
    """
    Publica eventos do PDV (comanda aberta, item lançado, venda registrada...)
    para painéis e cozinha. A publicação acontece depois do commit e é
    best-effort: falha no Redis não desfaz a operação.
    """

    def __init__(
        self,
        host: str = settings.REDIS_HOST,
        port: int = settings.REDIS_PORT,
        enabled: bool = settings.REDIS_ENABLED,
        prefixo: str = settings.REDIS_CANAL_PREFIXO,
    ):
        self.host = host
        self.port = port
        self.enabled = enabled
        self.prefixo = prefixo
        self._client: Optional[redis.Redis] = None

    def connect(self) -> None:
        if not self._client:
            self._client = redis.Redis(
                host=self.host,
                port=self.port,
                decode_responses=True,
                socket_connect_timeout=1,
                socket_timeout=1,
            )
            logger.info("Cliente Redis configurado para %s:%s", self.host, self.port)

    def disconnect(self) -> None:
        if self._client:
            self._client.close()
            self._client = None
            logger.info("Desconectado do Redis.")

    @property
    def client(self) -> redis.Redis:
        if not self._client:
            self.connect()
        return self._client

    def canal(self, nome: str) -> str:
        return f"{self.prefixo}:{nome}"

    def publish(self, channel: str, message: Dict[str, Any]) -> bool:
        if not self.enabled:
            logger.debug("Redis desabilitado; evento %s não publicado", message.get("evento"))
            return False

        payload = json.dumps(message, default=str)
        try:
            self.client.publish(self.canal(channel), payload)
        except redis.exceptions.RedisError as e:
            logger.warning("Falha ao publicar no canal %s: %s", self.canal(channel), e)
            return False
        logger.debug("Evento publicado no canal %s: %s", self.canal(channel), payload)
        return True


# Instância global para ser usada na aplicação
redis_service = RedisService()


def get_redis_service() -> RedisService:
    return redis_service
