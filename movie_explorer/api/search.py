"""Search API routes"""

from fastapi import APIRouter, Depends

from ..schemas.views import SearchRequest, SearchView, YearFilterRequest
from ..services.explorer import MovieExplorer, get_explorer
from .presenters import search_view

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=SearchView)
async def get_search(explorer: MovieExplorer = Depends(get_explorer)):
    """Current search results, year filter applied"""
    return search_view(explorer)


@router.post("", response_model=SearchView)
async def submit_search(
    data: SearchRequest, explorer: MovieExplorer = Depends(get_explorer)
):
    """Run a new search from page 1"""
    await explorer.search.submit(data.query.strip())
    return search_view(explorer)


@router.post("/more", response_model=SearchView)
async def load_more(explorer: MovieExplorer = Depends(get_explorer)):
    """Append the next page of results"""
    await explorer.search.load_more()
    return search_view(explorer)


@router.put("/year-filter", response_model=SearchView)
async def set_year_filter(
    data: YearFilterRequest, explorer: MovieExplorer = Depends(get_explorer)
):
    """Filter loaded results by release year"""
    explorer.search.set_year_filter(data.year)
    return search_view(explorer)
