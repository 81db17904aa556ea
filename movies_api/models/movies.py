from typing import List

from pydantic import BaseModel, ConfigDict, Field

from movies_api.models.movie_info import MovieInfo
from movies_api.models.reviews import Review


class Movie(BaseModel):
    """MovieInfo joined with its reviews; built per request."""

    model_config = ConfigDict(populate_by_name=True)

    movie_info: MovieInfo = Field(alias="movieInfo")
    review_list: List[Review] = Field(default_factory=list,
                                      alias="reviewList")
