from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from movies_api.core.config import settings
import logging

_client: AsyncIOMotorClient | None = None


async def get_client() -> AsyncIOMotorClient:
    """
    Singleton-клиент Motor с явными таймаутами и пулом.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            settings.mongo_dsn,
            appname=settings.app_name,
            tz_aware=True,
            maxPoolSize=50,
            minPoolSize=0,
            serverSelectionTimeoutMS=3000,
            connectTimeoutMS=3000,
            socketTimeoutMS=5000,
            retryWrites=True,
        )
    return _client


async def ping() -> bool:
    """Быстрая проверка коннекта (не блокируем запуск дольше таймаута)."""
    client = await get_client()
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logging.getLogger(__name__).warning(
            "mongo_ping_failed", extra={"err": str(e)})
        return False
    return True


async def get_mongo_db() -> AsyncIOMotorDatabase:
    client = await get_client()
    return client[settings.mongo_db]


async def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
