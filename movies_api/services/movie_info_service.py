"""Movie info service: validated CRUD over the movie_info collection."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movies_api.models.movie_info import MovieInfo
from movies_api.services.repositories.movie_info_repo import MovieInfoRepo
from movies_api.services.validation import ensure_valid, movie_info_violations

logger = logging.getLogger(__name__)


def _to_fields(info: MovieInfo) -> Dict[str, Any]:
    # BSON не умеет date, храним ISO-строку
    return {
        'name': info.name,
        'year': info.year,
        'cast': list(info.cast),
        'release_date': (info.release_date.isoformat()
                         if info.release_date else None),
    }


def _from_doc(doc: Dict[str, Any]) -> MovieInfo:
    return MovieInfo(
        movie_info_id=str(doc['_id']),
        name=doc.get('name'),
        year=doc.get('year'),
        cast=doc.get('cast') or [],
        release_date=doc.get('release_date'),
    )


class MovieInfoService:
    """Business logic for movie metadata."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = MovieInfoRepo(db)

    # ---------- CREATE ----------

    async def add_movie_info(self, info: MovieInfo) -> MovieInfo:
        ensure_valid(movie_info_violations(info))
        doc = _to_fields(info)
        if info.movie_info_id:
            doc['_id'] = info.movie_info_id
        try:
            movie_info_id = await self.repo.insert(doc)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_movie_info_create_error: {error}'
            ) from error
        logger.info('movie_info_created',
                    extra={'movie_info_id': movie_info_id})
        return info.model_copy(update={'movie_info_id': movie_info_id})

    # ---------- READ ----------

    async def get_movie_info(self, movie_info_id: str) -> Optional[MovieInfo]:
        try:
            doc = await self.repo.get_by_id(movie_info_id)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_movie_info_get_error: {error}'
            ) from error
        return _from_doc(doc) if doc else None

    async def list_movie_infos(
        self,
        year: Optional[int] = None,
        name: Optional[str] = None,
    ) -> List[MovieInfo]:
        try:
            docs = await self.repo.list(year=year, name=name)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_movie_info_list_error: {error}'
            ) from error
        return [_from_doc(doc) for doc in docs]

    # ---------- UPDATE ----------

    async def update_movie_info(
        self,
        movie_info_id: str,
        info: MovieInfo,
    ) -> Optional[MovieInfo]:
        """Replace metadata of an existing movie info; None if absent.

        Absence is reported before the payload is validated.
        """
        if await self.get_movie_info(movie_info_id) is None:
            return None
        ensure_valid(movie_info_violations(info))
        try:
            doc = await self.repo.update(movie_info_id, _to_fields(info))
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_movie_info_update_error: {error}'
            ) from error
        return _from_doc(doc) if doc else None

    # ---------- DELETE ----------

    async def delete_movie_info(self, movie_info_id: str) -> bool:
        try:
            return await self.repo.delete(movie_info_id)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_movie_info_delete_error: {error}'
            ) from error
