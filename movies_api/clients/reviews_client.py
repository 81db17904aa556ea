from http import HTTPStatus
from typing import List

from movies_api.clients.base import UpstreamClient
from movies_api.models.reviews import Review


class ReviewsClient(UpstreamClient):
    """Reads reviews of a movie from the review service."""

    service_name = 'ReviewService'

    async def fetch_by_movie_id(self, movie_info_id: str) -> List[Review]:
        """Reviews of the movie; a 404 upstream means "no reviews yet"."""
        return await self.retry.run(
            lambda: self._fetch_once(movie_info_id),
            name=self.service_name,
        )

    async def _fetch_once(self, movie_info_id: str) -> List[Review]:
        response = await self._get(self.base_url,
                                   params={'movieInfoId': movie_info_id})
        if response.status_code == HTTPStatus.NOT_FOUND:
            return []
        if response.is_client_error:
            raise self.client_error(response)
        return [Review.model_validate(item) for item in response.json()]
