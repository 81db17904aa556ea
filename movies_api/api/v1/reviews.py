from http import HTTPStatus
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response

from movies_api.dependencies import get_reviews_service
from movies_api.services.reviews_service import ReviewsService
from movies_api.models.reviews import Review
from movies_api.api.http_utils import handle_runtime_errors, not_found_if_none

router = APIRouter(prefix="/v1/reviews", tags=["reviews"])

ERRMAP = {
    "mongo_review_create_error": HTTPStatus.SERVICE_UNAVAILABLE,
}


@router.post("", response_model=Review,
             status_code=HTTPStatus.CREATED)
@handle_runtime_errors(ERRMAP)
async def add_review(
    body: Review,
    svc: ReviewsService = Depends(get_reviews_service),
):
    return await svc.add_review(body)


@router.get("", response_model=List[Review],
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def list_reviews(
    movie_info_id: Optional[str] = Query(None, alias="movieInfoId"),
    svc: ReviewsService = Depends(get_reviews_service),
):
    return await svc.list_reviews(movie_info_id=movie_info_id)


@router.get("/{review_id}", response_model=Review,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def get_review(
    review_id: str,
    svc: ReviewsService = Depends(get_reviews_service),
):
    return not_found_if_none(await svc.get_review(review_id),
                             detail="review_not_found")


@router.put("/{review_id}", response_model=Review,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def update_review(
    review_id: str,
    body: Review,
    svc: ReviewsService = Depends(get_reviews_service),
):
    return not_found_if_none(await svc.update_review(review_id, body),
                             detail="review_not_found")


@router.delete("/{review_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_runtime_errors(ERRMAP)
async def delete_review(
    review_id: str,
    svc: ReviewsService = Depends(get_reviews_service),
) -> Response:
    await svc.delete_review(review_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
