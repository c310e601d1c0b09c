"""Services layer"""

from .detail_controller import DetailController
from .explorer import MovieExplorer
from .favorites_aggregator import FavoritesAggregator
from .favorites_store import FavoritesStore
from .log_service import LogService
from .omdb_service import OMDbRequestError, OMDbService
from .search_controller import SearchController, apply_year_filter
from .slot_storage import SlotStorage

__all__ = [
    "LogService",
    "OMDbService",
    "OMDbRequestError",
    "SlotStorage",
    "FavoritesStore",
    "SearchController",
    "apply_year_filter",
    "DetailController",
    "FavoritesAggregator",
    "MovieExplorer",
]
