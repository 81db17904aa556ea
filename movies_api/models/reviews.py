from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Review(BaseModel):
    # movieInfoId часто приходит числом
    model_config = ConfigDict(populate_by_name=True,
                              coerce_numbers_to_str=True)

    review_id: Optional[str] = Field(default=None, alias="reviewId")
    movie_info_id: Optional[str] = Field(default=None, alias="movieInfoId")
    comment: Optional[str] = None
    rating: Optional[float] = None
