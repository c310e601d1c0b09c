"""OMDb title schemas"""

from typing import Optional

from pydantic import BaseModel, Field


class TitleSummary(BaseModel):
    """Title as returned by an OMDb search"""

    imdb_id: str = Field(..., alias="imdbID", min_length=1)
    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    poster: Optional[str] = Field(None, alias="Poster")

    class Config:
        populate_by_name = True

    @property
    def poster_url(self) -> Optional[str]:
        """Poster URL, or None when OMDb has no image"""
        if not self.poster or self.poster == "N/A":
            return None
        return self.poster


class TitleDetail(TitleSummary):
    """Title as returned by an OMDb lookup by id"""

    genre: str = Field("", alias="Genre")
    rating: str = Field("", alias="imdbRating")
    plot: str = Field("", alias="Plot")
