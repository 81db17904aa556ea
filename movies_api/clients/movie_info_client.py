from http import HTTPStatus
from urllib.parse import quote

from movies_api.clients.base import UpstreamClient
from movies_api.core.exceptions import NotFound
from movies_api.models.movie_info import MovieInfo


def _not_found(movie_info_id: str) -> NotFound:
    return NotFound(
        'There is no MovieInfo Available for the passed in Id : '
        f'{movie_info_id}'
    )


class MovieInfoClient(UpstreamClient):
    """Reads movie metadata from the movie-info service."""

    service_name = 'MovieInfoService'

    async def fetch_by_id(self, movie_info_id: str) -> MovieInfo:
        """Return the movie info or raise NotFound / ClientError / ServerError.

        5xx and timeouts are retried according to ``self.retry``.
        """
        return await self.retry.run(
            lambda: self._fetch_once(movie_info_id),
            name=self.service_name,
        )

    async def _fetch_once(self, movie_info_id: str) -> MovieInfo:
        if movie_info_id in ('.', '..'):
            # такой сегмент httpx схлопнет в родительский путь
            raise _not_found(movie_info_id)
        # id уходит одним сегментом пути, "?", "#" и "/" экранируем
        segment = quote(movie_info_id, safe='')
        response = await self._get(f'{self.base_url}/{segment}')
        if response.status_code == HTTPStatus.NOT_FOUND:
            raise _not_found(movie_info_id)
        if response.is_client_error:
            raise self.client_error(response)
        return MovieInfo.model_validate(response.json())
