import httpx
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from movies_api.core.config import settings
from movies_api.core.retry import RetryPolicy
from movies_api.db.mongo import get_mongo_db
from movies_api.clients.http import get_http_client
from movies_api.clients.movie_info_client import MovieInfoClient
from movies_api.clients.reviews_client import ReviewsClient
from movies_api.services.movie_info_service import MovieInfoService
from movies_api.services.reviews_service import ReviewsService
from movies_api.services.movies_service import MoviesService


async def get_db() -> AsyncIOMotorDatabase:
    return await get_mongo_db()


async def get_movie_info_service(db=Depends(get_db)) -> MovieInfoService:
    return MovieInfoService(db)


async def get_reviews_service(db=Depends(get_db)) -> ReviewsService:
    return ReviewsService(db)


def get_retry_policy() -> RetryPolicy:
    return RetryPolicy.from_settings(settings)


async def get_movie_info_client(
        http: httpx.AsyncClient = Depends(get_http_client),
        retry: RetryPolicy = Depends(get_retry_policy),
) -> MovieInfoClient:
    return MovieInfoClient(http, settings.movie_info_url, retry=retry,
                           timeout=settings.upstream_timeout)


async def get_reviews_client(
        http: httpx.AsyncClient = Depends(get_http_client),
        retry: RetryPolicy = Depends(get_retry_policy),
) -> ReviewsClient:
    return ReviewsClient(http, settings.reviews_url, retry=retry,
                         timeout=settings.upstream_timeout)


async def get_movies_service(
        movie_infos: MovieInfoClient = Depends(get_movie_info_client),
        reviews: ReviewsClient = Depends(get_reviews_client),
) -> MoviesService:
    return MoviesService(movie_infos, reviews,
                         concurrent=settings.aggregate_concurrently)
