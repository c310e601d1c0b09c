"""Movie detail API routes"""

from fastapi import APIRouter, Depends, Query

from ..schemas.views import DetailView
from ..services.explorer import MovieExplorer, get_explorer
from .presenters import detail_view

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("/{imdb_id}", response_model=DetailView)
async def get_movie(
    imdb_id: str,
    refresh: bool = Query(False),
    explorer: MovieExplorer = Depends(get_explorer),
):
    """Title details, fetched when the id changes or refresh is set"""
    if refresh and explorer.detail.state.identifier == imdb_id:
        await explorer.detail.reload()
    else:
        await explorer.detail.show(imdb_id)
    return detail_view(explorer)
