"""Reviews service: validated CRUD over the reviews collection."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movies_api.models.reviews import Review
from movies_api.services.repositories.reviews_repo import ReviewsRepo
from movies_api.services.validation import ensure_valid, review_violations

logger = logging.getLogger(__name__)


class ReviewsService:
    """Business logic for reviews."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = ReviewsRepo(db)

    @staticmethod
    def _to_fields(review: Review) -> Dict[str, Any]:
        return {
            'movie_info_id': review.movie_info_id,
            'comment': review.comment,
            'rating': review.rating,
        }

    @staticmethod
    def _from_doc(doc: Dict[str, Any]) -> Review:
        return Review(
            review_id=str(doc['_id']),
            movie_info_id=doc.get('movie_info_id'),
            comment=doc.get('comment'),
            rating=doc.get('rating'),
        )

    def _validate(self, review: Review) -> None:
        violations = review_violations(review)
        if violations:
            logger.info('review_violations',
                        extra={'violations': violations})
        ensure_valid(violations)

    # ---------- CREATE ----------

    async def add_review(self, review: Review) -> Review:
        self._validate(review)
        doc = self._to_fields(review)
        if review.review_id:
            doc['_id'] = review.review_id
        try:
            review_id = await self.repo.insert(doc)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_review_create_error: {error}'
            ) from error
        return review.model_copy(update={'review_id': review_id})

    # ---------- READ ----------

    async def get_review(self, review_id: str) -> Optional[Review]:
        try:
            doc = await self.repo.get_by_id(review_id)
        except PyMongoError as error:
            raise RuntimeError(f'mongo_review_get_error: {error}') from error
        return self._from_doc(doc) if doc else None

    async def list_reviews(
        self,
        movie_info_id: Optional[str] = None,
    ) -> List[Review]:
        try:
            docs = await self.repo.list(movie_info_id=movie_info_id)
        except PyMongoError as error:
            raise RuntimeError(f'mongo_review_list_error: {error}') from error
        return [self._from_doc(doc) for doc in docs]

    # ---------- UPDATE ----------

    async def update_review(
        self,
        review_id: str,
        review: Review,
    ) -> Optional[Review]:
        """Replace comment, rating and owner of a review; None if absent."""
        if await self.get_review(review_id) is None:
            return None
        self._validate(review)
        try:
            doc = await self.repo.update(review_id, self._to_fields(review))
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_review_update_error: {error}'
            ) from error
        return self._from_doc(doc) if doc else None

    # ---------- DELETE ----------

    async def delete_review(self, review_id: str) -> bool:
        try:
            return await self.repo.delete(review_id)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_review_delete_error: {error}'
            ) from error
