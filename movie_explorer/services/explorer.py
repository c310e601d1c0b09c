"""Explorer session wiring"""

from fastapi import Request

from ..config import settings
from .detail_controller import DetailController
from .favorites_aggregator import FavoritesAggregator
from .favorites_store import FavoritesStore
from .log_service import log_service
from .omdb_service import OMDbService
from .search_controller import SearchController
from .slot_storage import SlotStorage


class MovieExplorer:
    """One browsing session: search, detail and favorites over a shared client"""

    def __init__(
        self,
        omdb: OMDbService,
        storage: SlotStorage,
        default_query: str = None,
        favorites_slot: str = None,
    ):
        self.omdb = omdb
        self.favorites = FavoritesStore(storage, favorites_slot)
        self.search = SearchController(omdb, default_query or settings.DEFAULT_QUERY)
        self.detail = DetailController(omdb)
        self.favorite_movies = FavoritesAggregator(omdb, self.favorites)

    @classmethod
    def from_settings(cls) -> "MovieExplorer":
        """Build a session from application settings"""
        if not settings.OMDB_API_KEY:
            log_service.info("OMDB_API_KEY is not set; OMDb will reject requests")

        omdb = OMDbService(
            settings.OMDB_API_KEY,
            base_url=settings.OMDB_BASE_URL,
            timeout=settings.OMDB_TIMEOUT,
        )
        return cls(omdb, SlotStorage())

    async def start(self):
        """Load favorites and run the initial search"""
        await self.favorites.initialize()
        await self.search.start()

    async def close(self):
        await self.omdb.close()


def get_explorer(request: Request) -> MovieExplorer:
    """Dependency returning the app's explorer session"""
    return request.app.state.explorer
