"""Pydantic schemas for validation"""

from .movie import TitleDetail, TitleSummary
from .state import DetailState, FavoritesState, SearchState
from .views import (
    AboutView,
    DetailView,
    FavoritesView,
    FavoriteToggle,
    MovieCard,
    MovieDetailItem,
    SearchRequest,
    SearchView,
    YearFilterRequest,
)

__all__ = [
    "TitleSummary",
    "TitleDetail",
    "SearchState",
    "DetailState",
    "FavoritesState",
    "MovieCard",
    "MovieDetailItem",
    "SearchRequest",
    "YearFilterRequest",
    "SearchView",
    "DetailView",
    "FavoritesView",
    "FavoriteToggle",
    "AboutView",
]
