# app/services/client_storage.py
import threading
import time
from typing import Dict, Tuple

import redis

from app.utils.retry import redis_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)

# klucze "lokalnego storage" klienta
CART_KEY = "art-cart"
CURRENT_ORDER_KEY = "current_order_id"
LANGUAGE_KEY = "language"


class ClientStorage:
    """
    Key/value storage per klient (odpowiednik localStorage / sessionStorage).
    `ttl` != None oznacza klucz "sesyjny" - wygasa sam.
    """

    def get(self, client_id: str, key: str) -> str | None:
        raise NotImplementedError

    def set(self, client_id: str, key: str, value: str, ttl: int | None = None) -> None:
        raise NotImplementedError

    def delete(self, client_id: str, key: str) -> None:
        raise NotImplementedError


class MemoryClientStorage(ClientStorage):
    """Storage w pamieci procesu - dev i testy."""

    def __init__(self):
        self._data: Dict[Tuple[str, str], Tuple[str, float | None]] = {}
        self._lock = threading.Lock()

    def get(self, client_id: str, key: str) -> str | None:
        with self._lock:
            entry = self._data.get((client_id, key))
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= time.monotonic():
                del self._data[(client_id, key)]
                return None
            return value

    def set(self, client_id: str, key: str, value: str, ttl: int | None = None) -> None:
        expires_at = time.monotonic() + ttl if ttl else None
        with self._lock:
            self._data[(client_id, key)] = (value, expires_at)

    def delete(self, client_id: str, key: str) -> None:
        with self._lock:
            self._data.pop((client_id, key), None)


class RedisClientStorage(ClientStorage):
    def __init__(self, url: str):
        self.redis = redis.Redis.from_url(url, decode_responses=True)

    @staticmethod
    def _key(client_id: str, key: str) -> str:
        #np. client:abc123:art-cart
        return f"client:{client_id}:{key}"

    @redis_retry()
    def get(self, client_id: str, key: str) -> str | None:
        return self.redis.get(self._key(client_id, key))

    @redis_retry()
    def set(self, client_id: str, key: str, value: str, ttl: int | None = None) -> None:
        self.redis.set(name=self._key(client_id, key), value=value, ex=ttl)

    @redis_retry()
    def delete(self, client_id: str, key: str) -> None:
        self.redis.delete(self._key(client_id, key))


def make_client_storage(backend: str, redis_url: str) -> ClientStorage:
    if backend == "memory":
        logger.warning("Using in-memory client storage, state is lost on restart")
        return MemoryClientStorage()
    if backend == "redis":
        return RedisClientStorage(redis_url)
    raise ValueError(f"Unknown client storage backend: {backend}")
