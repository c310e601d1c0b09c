"""Favorites API routes"""

from fastapi import APIRouter, Depends

from ..schemas.views import FavoritesView, FavoriteToggle
from ..services.explorer import MovieExplorer, get_explorer
from .presenters import favorites_view

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


def _toggle_result(
    explorer: MovieExplorer, imdb_id: str, changed: bool
) -> FavoriteToggle:
    return FavoriteToggle(
        imdb_id=imdb_id,
        is_favorite=explorer.favorites.contains(imdb_id),
        changed=changed,
        favorites_count=explorer.favorites.count,
    )


@router.get("", response_model=FavoritesView)
async def get_favorites(explorer: MovieExplorer = Depends(get_explorer)):
    """Details of every favorite that still resolves"""
    return favorites_view(explorer)


@router.post("/{imdb_id}", response_model=FavoriteToggle)
async def add_favorite(imdb_id: str, explorer: MovieExplorer = Depends(get_explorer)):
    """Add a title to favorites"""
    changed = await explorer.favorites.add(imdb_id)
    return _toggle_result(explorer, imdb_id, changed)


@router.delete("/{imdb_id}", response_model=FavoriteToggle)
async def remove_favorite(
    imdb_id: str, explorer: MovieExplorer = Depends(get_explorer)
):
    """Remove a title from favorites"""
    changed = await explorer.favorites.remove(imdb_id)
    return _toggle_result(explorer, imdb_id, changed)


@router.post("/{imdb_id}/toggle", response_model=FavoriteToggle)
async def toggle_favorite(
    imdb_id: str, explorer: MovieExplorer = Depends(get_explorer)
):
    """Add or remove a title depending on its current state"""
    await explorer.favorites.toggle(imdb_id)
    return _toggle_result(explorer, imdb_id, True)
