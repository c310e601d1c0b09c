"""Title detail fetcher"""

from pydantic import ValidationError

from ..schemas.movie import TitleDetail
from ..schemas.state import DetailState
from .log_service import log_service
from .omdb_service import OMDbRequestError, OMDbService

MOVIE_NOT_FOUND = "Movie not found."
DETAIL_FETCH_FAILED = "Failed to fetch movie details. Please try again."
INVALID_DETAIL = "Movie details could not be read."


class DetailController:
    """Lookup of one title by IMDb id"""

    def __init__(self, omdb: OMDbService):
        self.omdb = omdb
        self.state = DetailState()
        self._mounted = False

    async def show(self, identifier: str):
        """Point the view at identifier, fetching when it changed"""
        if self._mounted and identifier == self.state.identifier:
            return
        self._mounted = True
        self.state.identifier = identifier
        await self.fetch_detail(identifier)

    async def reload(self):
        await self.fetch_detail(self.state.identifier)

    async def fetch_detail(self, identifier: str):
        """
        Look up identifier.

        A negative OMDb response sets the error and leaves any previously
        stored detail in place.
        """
        if not identifier:
            return

        state = self.state
        state.loading = True
        state.error = ""

        try:
            data = await self.omdb.get_title(identifier)

            if OMDbService.is_success(data):
                try:
                    state.detail = TitleDetail.model_validate(data)
                except ValidationError as e:
                    log_service.error(f"Invalid OMDb detail for {identifier}: {e}")
                    state.error = INVALID_DETAIL
            else:
                state.error = OMDbService.error_message(data, MOVIE_NOT_FOUND)
        except OMDbRequestError:
            state.error = DETAIL_FETCH_FAILED
        finally:
            state.loading = False
