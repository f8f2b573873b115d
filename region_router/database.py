"""Database connection for the resolved connection target"""
import ssl
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import unquote, urlsplit

import aiomysql

from region_router.config import Settings
from region_router.errors import ConfigurationError
from region_router.models import RoutingConfig

DEFAULT_PORT = 3306

def connect_kwargs(connection_string: str) -> Dict[str, Any]:
    """Split a mysql:// connection string into aiomysql connection arguments"""
    parts = urlsplit(connection_string.strip())
    if not parts.hostname:
        raise ConfigurationError("Connection string has no host")

    return {
        "host": parts.hostname,
        "port": parts.port or DEFAULT_PORT,
        "user": unquote(parts.username) if parts.username else None,
        "password": unquote(parts.password) if parts.password else "",
        "db": parts.path.lstrip("/") or None,
    }

class Database:
    """One pool, opened on the single connection target chosen at startup"""

    def __init__(self, connection_string: str, min_size: int = 1, max_size: int = 10, use_ssl: bool = True):
        self.connection_string = connection_string
        self.min_size = min_size
        self.max_size = max_size
        self.use_ssl = use_ssl
        self._pool: Optional[aiomysql.Pool] = None

    @classmethod
    def from_routing(cls, routing: RoutingConfig, settings: Settings) -> "Database":
        return cls(
            routing.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            use_ssl=settings.database_ssl,
        )

    async def connect(self):
        kwargs = connect_kwargs(self.connection_string)
        if self.use_ssl:
            kwargs["ssl"] = ssl.create_default_context()
        self._pool = await aiomysql.create_pool(
            minsize=self.min_size,
            maxsize=self.max_size,
            autocommit=True,
            **kwargs
        )

    async def close(self):
        if self._pool:
            self._pool.close()
            await self._pool.wait_closed()
            self._pool = None

    def _require_pool(self) -> aiomysql.Pool:
        if self._pool is None:
            raise RuntimeError("Database not connected")
        return self._pool

    async def fetch_all(self, sql: str, args: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Run a query and return its rows as dicts"""
        async with self._require_pool().acquire() as conn:
            async with conn.cursor(aiomysql.DictCursor) as cur:
                await cur.execute(sql, args)
                return list(await cur.fetchall())

    async def execute(self, sql: str, args: Optional[Sequence[Any]] = None) -> int:
        """Run a statement and return the id of the inserted row"""
        async with self._require_pool().acquire() as conn:
            async with conn.cursor() as cur:
                await cur.execute(sql, args)
                return cur.lastrowid

    async def is_healthy(self) -> bool:
        try:
            await self.fetch_all("SELECT 1")
            return True
        except Exception:
            return False
