"""Configuration management"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # OMDb
    OMDB_API_KEY: Optional[str] = None
    OMDB_BASE_URL: str = "https://www.omdbapi.com/"
    OMDB_TIMEOUT: float = 30.0

    # Browsing defaults
    DEFAULT_QUERY: str = "batman"
    FAVORITES_SLOT: str = "favoriteMovieIds"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/movie_explorer.db"

    # Directories
    BASE_DIR: Path = Path(__file__).parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = DATA_DIR / "logs"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8765
    ALLOWED_ORIGINS: Optional[str] = None  # Comma-separated origins for the API

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure directories exist
        self.DATA_DIR.mkdir(exist_ok=True, parents=True)
        self.LOGS_DIR.mkdir(exist_ok=True, parents=True)


# Global settings instance
settings = Settings()
