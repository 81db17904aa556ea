"""Movies service: joins a movie info with its reviews.

Movie-info absence is fatal for the call, review absence is not:
a movie can exist without reviews, but reviews without a movie
are never shown.
"""

from __future__ import annotations

import asyncio
import logging

from movies_api.clients.movie_info_client import MovieInfoClient
from movies_api.clients.reviews_client import ReviewsClient
from movies_api.models.movies import Movie

logger = logging.getLogger(__name__)


class MoviesService:
    """Aggregates MovieInfoClient and ReviewsClient results."""

    def __init__(
        self,
        movie_info_client: MovieInfoClient,
        reviews_client: ReviewsClient,
        concurrent: bool = True,
    ) -> None:
        self.movie_info_client = movie_info_client
        self.reviews_client = reviews_client
        self.concurrent = concurrent

    async def get_movie(self, movie_id: str) -> Movie:
        """Build the composite movie or raise the first relevant error.

        NotFound / ClientError / ServerError of the movie-info leg win
        over anything the review leg does.
        """
        if self.concurrent:
            movie = await self._get_concurrently(movie_id)
        else:
            movie_info = await self.movie_info_client.fetch_by_id(movie_id)
            reviews = await self.reviews_client.fetch_by_movie_id(movie_id)
            movie = Movie(movie_info=movie_info, review_list=reviews)
        logger.info('movie_aggregated',
                    extra={'movie_id': movie_id,
                           'reviews': len(movie.review_list)})
        return movie

    async def _get_concurrently(self, movie_id: str) -> Movie:
        reviews_task = asyncio.create_task(
            self.reviews_client.fetch_by_movie_id(movie_id))
        try:
            movie_info = await self.movie_info_client.fetch_by_id(movie_id)
        except BaseException:
            # отменяем второй вызов и забираем его результат,
            # иначе asyncio ругается на "exception was never retrieved"
            reviews_task.cancel()
            await asyncio.gather(reviews_task, return_exceptions=True)
            raise
        reviews = await reviews_task
        return Movie(movie_info=movie_info, review_list=reviews)
