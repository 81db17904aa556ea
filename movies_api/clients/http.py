import httpx
from movies_api.core.config import settings

_client: httpx.AsyncClient | None = None


async def get_http_client() -> httpx.AsyncClient:
    """
    Singleton httpx-клиент для походов в movie-info и review сервисы.
    """
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.upstream_timeout),
            limits=httpx.Limits(max_connections=100,
                                max_keepalive_connections=20),
            headers={"accept": "application/json"},
        )
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
