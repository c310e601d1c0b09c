"""Search and pagination controller"""

from typing import Dict, List

from pydantic import ValidationError

from ..schemas.movie import TitleSummary
from ..schemas.state import SearchState
from .log_service import log_service
from .omdb_service import OMDbRequestError, OMDbService

NO_MOVIES_FOUND = "No movies found."
FETCH_FAILED = "Failed to fetch movies. Please try again."


def apply_year_filter(results: List[TitleSummary], year: str) -> List[TitleSummary]:
    """Keep results whose year string equals the filter; all of them if it is empty"""
    if not year:
        return list(results)
    return [movie for movie in results if movie.year == year]


def parse_search_results(data: Dict) -> List[TitleSummary]:
    """
    Validate the Search array of an OMDb response, dropping invalid entries.

    Raises OMDbRequestError when Search is not a list.
    """
    entries = data.get("Search") or []
    if not isinstance(entries, list):
        log_service.error(f"OMDb returned malformed Search: {entries!r}")
        raise OMDbRequestError("Malformed OMDb search payload")

    results = []
    for item in entries:
        try:
            results.append(TitleSummary.model_validate(item))
        except ValidationError as e:
            log_service.error(f"Dropping invalid search entry {item!r}: {e}")
    return results


class SearchController:
    """Incremental, paged title search against OMDb"""

    def __init__(self, omdb: OMDbService, default_query: str = "batman"):
        self.omdb = omdb
        self.state = SearchState(query=default_query)

    async def start(self):
        """Initial search for the default query"""
        self.state.page = 1
        await self.search(self.state.query, 1, append=False)

    async def search(self, query: str, page: int = 1, append: bool = False):
        """
        Fetch one page for query.

        With append the page is added after the accumulated results,
        otherwise it replaces them. has_more compares the loaded count
        against OMDb's totalResults.
        """
        if not query:
            return

        state = self.state
        state.loading = True
        state.error = ""

        try:
            data = await self.omdb.search_titles(query, page)

            if OMDbService.is_success(data):
                results = parse_search_results(data)
                total_results = OMDbService.parse_total_results(data)

                # Loaded count uses the accumulated length from before this page
                loaded_count = (len(state.results) if append else 0) + len(results)
                state.results = [*state.results, *results] if append else results
                state.has_more = loaded_count < total_results
            else:
                if not append:
                    state.results = []
                state.has_more = False
                state.error = OMDbService.error_message(data, NO_MOVIES_FOUND)
        except OMDbRequestError:
            if not append:
                state.results = []
            state.has_more = False
            state.error = FETCH_FAILED
        finally:
            state.loading = False

    async def submit(self, query: str):
        """Search form submit: new query from page 1"""
        self.state.query = query
        self.state.page = 1
        await self.search(query, 1, append=False)

    async def load_more(self):
        """Fetch the next page and append it"""
        next_page = self.state.page + 1
        self.state.page = next_page
        await self.search(self.state.query, next_page, append=True)

    def set_year_filter(self, year: str):
        self.state.year_filter = (year or "").strip()

    @property
    def filtered_results(self) -> List[TitleSummary]:
        return apply_year_filter(self.state.results, self.state.year_filter)

    @property
    def can_load_more(self) -> bool:
        """Whether the load-more action is offered"""
        return (
            not self.state.loading
            and self.state.has_more
            and len(self.filtered_results) > 0
        )
