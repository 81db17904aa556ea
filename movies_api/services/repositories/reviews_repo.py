"""Mongo repository for reviews collection."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class ReviewsRepo:
    """CRUD helpers for reviews."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db['reviews']

    async def insert(self, doc: Dict[str, Any]) -> str:
        """Insert a new review and return its id as string."""
        doc = dict(doc)
        if not doc.get('_id'):
            doc['_id'] = str(ObjectId())
        result = await self.col.insert_one(doc)
        return str(result.inserted_id)

    async def get_by_id(self, review_id: str) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({'_id': review_id})

    async def list(
        self,
        movie_info_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """All reviews, or only those of one movie info."""
        query = {} if movie_info_id is None else {
            'movie_info_id': movie_info_id}
        cursor = self.col.find(query)
        return [doc async for doc in cursor]

    async def update(
        self,
        review_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        return await self.col.find_one_and_update(
            {'_id': review_id},
            {'$set': fields},
            return_document=ReturnDocument.AFTER,
        )

    async def delete(self, review_id: str) -> bool:
        result = await self.col.delete_one({'_id': review_id})
        return result.deleted_count == 1
