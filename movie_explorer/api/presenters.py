"""Turn controller state into view schemas"""

from typing import Optional

from ..schemas.movie import TitleDetail, TitleSummary
from ..schemas.views import (
    DetailView,
    FavoritesView,
    MovieCard,
    MovieDetailItem,
    SearchView,
)
from ..services.explorer import MovieExplorer
from ..services.search_controller import NO_MOVIES_FOUND

NO_MOVIE_DATA = "No movie data available."
NO_FAVORITES_ADDED = "No favorite movies added."
NO_FAVORITES_TO_DISPLAY = "No favorite movies to display."


def movie_card(movie: TitleSummary, explorer: MovieExplorer) -> MovieCard:
    """Card with poster normalized and favorite flag set"""
    return MovieCard(
        imdb_id=movie.imdb_id,
        title=movie.title,
        year=movie.year,
        poster=movie.poster_url,
        is_favorite=explorer.favorites.contains(movie.imdb_id),
    )


def movie_detail_item(movie: TitleDetail, explorer: MovieExplorer) -> MovieDetailItem:
    card = movie_card(movie, explorer)
    return MovieDetailItem(
        **card.model_dump(),
        genre=movie.genre,
        rating=movie.rating,
        plot=movie.plot,
    )


def search_view(explorer: MovieExplorer) -> SearchView:
    controller = explorer.search
    state = controller.state
    filtered = controller.filtered_results

    message: Optional[str] = None
    if not state.loading and not state.error and not filtered:
        message = NO_MOVIES_FOUND

    return SearchView(
        query=state.query,
        page=state.page,
        year_filter=state.year_filter,
        loading=state.loading,
        error=state.error,
        has_more=state.has_more,
        can_load_more=controller.can_load_more,
        loaded_count=len(state.results),
        results=[movie_card(movie, explorer) for movie in filtered],
        message=message,
        favorites_count=explorer.favorites.count,
    )


def detail_view(explorer: MovieExplorer) -> DetailView:
    state = explorer.detail.state

    movie = None
    if state.detail is not None:
        movie = movie_detail_item(state.detail, explorer)

    message: Optional[str] = None
    if not state.loading and not state.error and movie is None:
        message = NO_MOVIE_DATA

    return DetailView(
        identifier=state.identifier,
        loading=state.loading,
        error=state.error,
        movie=movie,
        message=message,
        favorites_count=explorer.favorites.count,
    )


def favorites_view(explorer: MovieExplorer) -> FavoritesView:
    state = explorer.favorite_movies.state
    favorite_ids = explorer.favorites.ids

    message: Optional[str] = None
    if not favorite_ids:
        message = NO_FAVORITES_ADDED
    elif not state.loading and not state.error and not state.movies:
        message = NO_FAVORITES_TO_DISPLAY

    return FavoritesView(
        favorite_ids=favorite_ids,
        loading=state.loading,
        error=state.error,
        movies=[movie_card(movie, explorer) for movie in state.movies],
        message=message,
        favorites_count=len(favorite_ids),
    )
