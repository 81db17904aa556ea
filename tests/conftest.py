import os
import pytest
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from movies_api.main import movie_info_app, reviews_app, movies_app
from movies_api.core.config import settings
from movies_api.core.retry import RetryPolicy
from movies_api.dependencies import get_db, get_retry_policy
from movies_api.clients.http import get_http_client
from tests.helpers import FakeUpstreams


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # отключаем Sentry
    settings.sentry_dsn = ""
    settings.movie_info_url = "http://upstream/v1/movieinfos"
    settings.reviews_url = "http://upstream/v1/reviews"


@pytest.fixture
def mongo_db():
    """In-memory Mongo вместо живой базы; новая на каждый тест."""
    return AsyncMongoMockClient()["movies_test"]


async def _asgi_client(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def info_client(mongo_db):
    movie_info_app.dependency_overrides[get_db] = lambda: mongo_db
    async with await _asgi_client(movie_info_app) as ac:
        yield ac
    movie_info_app.dependency_overrides.clear()


@pytest.fixture
async def review_client(mongo_db):
    reviews_app.dependency_overrides[get_db] = lambda: mongo_db
    async with await _asgi_client(reviews_app) as ac:
        yield ac
    reviews_app.dependency_overrides.clear()


@pytest.fixture
def upstreams():
    return FakeUpstreams()


@pytest.fixture
async def movies_client(upstreams):
    http = upstreams.http_client()
    movies_app.dependency_overrides[get_http_client] = lambda: http
    movies_app.dependency_overrides[get_retry_policy] = (
        lambda: RetryPolicy(max_attempts=4, delay=0))
    async with await _asgi_client(movies_app) as ac:
        yield ac
    movies_app.dependency_overrides.clear()
    await http.aclose()
