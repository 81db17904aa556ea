from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MovieInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_info_id: Optional[str] = Field(default=None, alias="movieInfoId")
    name: Optional[str] = None
    year: Optional[int] = None
    cast: List[str] = Field(default_factory=list)
    release_date: Optional[date] = None
