"""Stateless validation of incoming movie-info and review payloads.

Each ``*_violations`` function returns the sorted list of violated
constraint messages; ``ensure_valid`` turns a non-empty list into
``ValidationError``.
"""

from __future__ import annotations

from typing import List

from movies_api.core.exceptions import ValidationError
from movies_api.models.movie_info import MovieInfo
from movies_api.models.reviews import Review

RATING_MIN = 0
RATING_MAX = 10


def _blank(value) -> bool:
    return value is None or not str(value).strip()


def movie_info_violations(info: MovieInfo) -> List[str]:
    violations = []
    if _blank(info.name):
        violations.append('movieInfo.name must be present')
    if info.year is None or info.year <= 0:
        violations.append('movieInfo.year must be a Positive Value')
    if not info.cast or any(_blank(member) for member in info.cast):
        violations.append('movieInfo.cast must be present')
    return sorted(violations)


def review_violations(review: Review) -> List[str]:
    violations = []
    if _blank(review.movie_info_id):
        violations.append('reviewInfo.movieInfoId : must not be null')
    if review.rating is None:
        violations.append('rating : must not be null')
    elif review.rating < RATING_MIN:
        violations.append('rating.negative : please pass a non-negative value')
    elif review.rating > RATING_MAX:
        violations.append(
            f'rating.max : please pass a value not greater than {RATING_MAX}')
    return sorted(violations)


def ensure_valid(violations: List[str]) -> None:
    if violations:
        raise ValidationError(violations)
