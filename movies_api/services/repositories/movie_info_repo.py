"""Mongo repository for movie_info collection."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class MovieInfoRepo:
    """CRUD helpers for movie metadata; ids are plain strings."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db['movie_info']

    async def insert(self, doc: Dict[str, Any]) -> str:
        """Insert a document, assigning an id if the caller gave none."""
        doc = dict(doc)
        if not doc.get('_id'):
            doc['_id'] = str(ObjectId())
        result = await self.col.insert_one(doc)
        return str(result.inserted_id)

    async def get_by_id(self, movie_info_id: str) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({'_id': movie_info_id})

    async def list(
        self,
        year: Optional[int] = None,
        name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """List movie infos; ``year`` takes precedence over ``name``."""
        if year is not None:
            query: Dict[str, Any] = {'year': year}
        elif name is not None:
            query = {'name': name}
        else:
            query = {}
        cursor = self.col.find(query)
        return [doc async for doc in cursor]

    async def update(
        self,
        movie_info_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Overwrite given fields and return the updated document."""
        return await self.col.find_one_and_update(
            {'_id': movie_info_id},
            {'$set': fields},
            return_document=ReturnDocument.AFTER,
        )

    async def delete(self, movie_info_id: str) -> bool:
        result = await self.col.delete_one({'_id': movie_info_id})
        return result.deleted_count == 1
