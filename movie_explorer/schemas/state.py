"""Controller state"""

from typing import List, Optional

from pydantic import BaseModel

from .movie import TitleDetail, TitleSummary


class SearchState(BaseModel):
    """Search session owned by the search controller"""

    query: str = ""
    page: int = 1
    results: List[TitleSummary] = []
    has_more: bool = False
    year_filter: str = ""
    loading: bool = False
    error: str = ""


class DetailState(BaseModel):
    """Single title lookup"""

    identifier: str = ""
    detail: Optional[TitleDetail] = None
    loading: bool = False
    error: str = ""


class FavoritesState(BaseModel):
    """Details for the current favorite ids"""

    movies: List[TitleDetail] = []
    loading: bool = False
    error: str = ""
