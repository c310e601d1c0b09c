"""View schemas returned by the API"""

from typing import List, Optional

from pydantic import BaseModel


class MovieCard(BaseModel):
    """Title card shown in search results and favorites"""

    imdb_id: str
    title: str
    year: str
    poster: Optional[str] = None
    is_favorite: bool = False


class MovieDetailItem(MovieCard):
    """Title card with detail fields"""

    genre: str = ""
    rating: str = ""
    plot: str = ""


class SearchRequest(BaseModel):
    """Search form submit"""

    query: str


class YearFilterRequest(BaseModel):
    """Year filter update"""

    year: str = ""


class SearchView(BaseModel):
    """Home/search view"""

    query: str
    page: int
    year_filter: str
    loading: bool
    error: str
    has_more: bool
    can_load_more: bool
    loaded_count: int
    results: List[MovieCard]
    message: Optional[str] = None
    favorites_count: int


class DetailView(BaseModel):
    """Title detail view"""

    identifier: str
    loading: bool
    error: str
    movie: Optional[MovieDetailItem] = None
    message: Optional[str] = None
    favorites_count: int


class FavoritesView(BaseModel):
    """Favorites view"""

    favorite_ids: List[str]
    loading: bool
    error: str
    movies: List[MovieCard]
    message: Optional[str] = None
    favorites_count: int


class FavoriteToggle(BaseModel):
    """Result of a favorite mutation"""

    imdb_id: str
    is_favorite: bool
    changed: bool
    favorites_count: int


class AboutView(BaseModel):
    """Static informational view"""

    name: str
    version: str
    paragraphs: List[str]
