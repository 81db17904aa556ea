from http import HTTPStatus
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response

from movies_api.dependencies import get_movie_info_service
from movies_api.services.movie_info_service import MovieInfoService
from movies_api.models.movie_info import MovieInfo
from movies_api.api.http_utils import handle_runtime_errors, not_found_if_none

router = APIRouter(prefix="/v1/movieinfos", tags=["movie-infos"])

ERRMAP = {
    "mongo_movie_info_create_error": HTTPStatus.SERVICE_UNAVAILABLE,
}


@router.post("", response_model=MovieInfo,
             status_code=HTTPStatus.CREATED)
@handle_runtime_errors(ERRMAP)
async def add_movie_info(
    body: MovieInfo,
    svc: MovieInfoService = Depends(get_movie_info_service),
):
    return await svc.add_movie_info(body)


@router.get("", response_model=List[MovieInfo],
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def list_movie_infos(
    year: Optional[int] = Query(None),
    name: Optional[str] = Query(None),
    svc: MovieInfoService = Depends(get_movie_info_service),
):
    return await svc.list_movie_infos(year=year, name=name)


@router.get("/{movie_info_id}", response_model=MovieInfo,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def get_movie_info(
    movie_info_id: str,
    svc: MovieInfoService = Depends(get_movie_info_service),
):
    return not_found_if_none(await svc.get_movie_info(movie_info_id))


@router.put("/{movie_info_id}", response_model=MovieInfo,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def update_movie_info(
    movie_info_id: str,
    body: MovieInfo,
    svc: MovieInfoService = Depends(get_movie_info_service),
):
    return not_found_if_none(
        await svc.update_movie_info(movie_info_id, body))


@router.delete("/{movie_info_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_runtime_errors(ERRMAP)
async def delete_movie_info(
    movie_info_id: str,
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> Response:
    await svc.delete_movie_info(movie_info_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
