from http import HTTPStatus
from fastapi import APIRouter, Depends

from movies_api.dependencies import get_movies_service
from movies_api.services.movies_service import MoviesService
from movies_api.models.movies import Movie

router = APIRouter(prefix="/v1/movies", tags=["movies"])


@router.get("/{movie_id}", response_model=Movie,
            status_code=HTTPStatus.OK)
async def get_movie(
    movie_id: str,
    svc: MoviesService = Depends(get_movies_service),
):
    # NotFound / ClientError / ServerError рендерит register_error_handlers
    return await svc.get_movie(movie_id)
