"""Main FastAPI application"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import favorites, movies, search, system
from .config import settings
from .database import engine, init_db
from .services.explorer import MovieExplorer
from .services.log_service import log_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    await init_db()
    explorer = MovieExplorer.from_settings()
    app.state.explorer = explorer
    await explorer.start()
    log_service.info("Movie Explorer started")
    try:
        yield
    except asyncio.CancelledError:
        pass  # Suppress CancelledError during shutdown
    finally:
        # Shutdown - cleanup runs in finally block
        await explorer.close()
        await engine.dispose()


app = FastAPI(
    title="Movie Explorer",
    description="Search OMDb titles and keep a list of favorites",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
# If ALLOWED_ORIGINS is not set, default to ["*"] for maximum compatibility
allowed_origins = ["*"]
allow_credentials = False  # Credentials cannot be used with "*"

if settings.ALLOWED_ORIGINS:
    allowed_origins = settings.ALLOWED_ORIGINS.split(",")
    allow_credentials = True  # Credentials allowed with specific origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(search.router)
app.include_router(movies.router)
app.include_router(favorites.router)
app.include_router(system.router)


# Root API endpoint
@app.get("/api")
async def api_root():
    """API root"""
    return {
        "name": "Movie Explorer API",
        "version": __version__,
        "views": {
            "search": "/api/search",
            "movie": "/api/movies/{imdb_id}",
            "favorites": "/api/favorites",
            "about": "/api/system/about",
        },
        "docs": "/docs",
    }
