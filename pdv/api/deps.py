# pdv/api/deps.py
from pdv.database import get_db
from pdv.services.redis_service import RedisService, get_redis_service


def get_eventos() -> RedisService:
    return get_redis_service()


__all__ = ["get_db", "get_eventos"]
