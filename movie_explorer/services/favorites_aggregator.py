"""Favorites aggregator"""

import asyncio
from typing import List, Optional

from pydantic import ValidationError

from ..schemas.movie import TitleDetail
from ..schemas.state import FavoritesState
from .favorites_store import FavoritesStore
from .log_service import log_service
from .omdb_service import OMDbService

NO_VALID_FAVORITES = "No valid favorite movies found."
FAVORITES_FETCH_FAILED = "Failed to load favorite movies."


class FavoritesAggregator:
    """Fetches details for every favorite id and keeps the ones that resolve"""

    def __init__(self, omdb: OMDbService, store: FavoritesStore):
        self.omdb = omdb
        self.store = store
        self.state = FavoritesState()
        store.subscribe(self.load_favorites)

    async def refresh(self):
        await self.load_favorites(self.store.ids)

    async def load_favorites(self, identifiers: List[str]):
        """
        Look up all identifiers concurrently and wait for every outcome.

        Failed lookups, negative responses and invalid records are dropped;
        the survivors keep the order of identifiers.
        """
        identifiers = list(identifiers)
        state = self.state

        if not identifiers:
            state.movies = []
            state.error = ""
            return

        state.loading = True
        state.error = ""

        try:
            outcomes = await asyncio.gather(
                *(self.omdb.get_title(imdb_id) for imdb_id in identifiers),
                return_exceptions=True,
            )
            movies = [
                movie
                for movie in (
                    self._parse_outcome(imdb_id, outcome)
                    for imdb_id, outcome in zip(identifiers, outcomes)
                )
                if movie is not None
            ]

            state.movies = movies
            if not movies:
                state.error = NO_VALID_FAVORITES
        except Exception as e:
            log_service.error(f"Favorites lookup failed: {e}")
            state.movies = []
            state.error = FAVORITES_FETCH_FAILED
        finally:
            state.loading = False

    def _parse_outcome(self, imdb_id: str, outcome) -> Optional[TitleDetail]:
        if isinstance(outcome, BaseException):
            log_service.info(f"Dropping favorite {imdb_id}: {outcome!r}")
            return None
        if not isinstance(outcome, dict):
            log_service.info(f"Dropping favorite {imdb_id}: unexpected payload")
            return None
        if not OMDbService.is_success(outcome):
            log_service.info(f"Dropping favorite {imdb_id}: {outcome.get('Error')}")
            return None
        try:
            return TitleDetail.model_validate(outcome)
        except ValidationError as e:
            log_service.info(f"Dropping favorite {imdb_id}: {e}")
            return None
