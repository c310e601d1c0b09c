#!/usr/bin/env python3
"""
Movie Explorer Startup Script
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def generate_env_file():
    """Generate .env file if it doesn't exist"""
    env_path = Path(__file__).parent.parent / ".env"
    env_example = Path(__file__).parent.parent / ".env.example"

    if not env_path.exists():
        if env_example.exists():
            env_path.write_text(env_example.read_text())
            print("Generated .env file from .env.example, set OMDB_API_KEY in it")
        else:
            print("Warning: .env.example not found, using default configuration")


async def run_server():
    """Run API server"""
    import uvicorn
    from movie_explorer.config import settings

    print(f"Movie Explorer API starting on http://{settings.HOST}:{settings.PORT}")

    config = uvicorn.Config(
        "movie_explorer.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level="info",
        access_log=True,
    )
    server = uvicorn.Server(config)
    await server.serve()


async def main():
    # Generate .env if it doesn't exist
    generate_env_file()

    from movie_explorer.config import settings
    from movie_explorer.database import init_db

    print("Initializing database...")
    await init_db()
    print("Database initialized successfully.")

    print(f"""
      Movie Explorer

      Search view:     http://{settings.HOST}:{settings.PORT}/api/search
      Favorites view:  http://{settings.HOST}:{settings.PORT}/api/favorites
      API docs:        http://{settings.HOST}:{settings.PORT}/docs

    Press CTRL+C to stop
    """)

    await run_server()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
