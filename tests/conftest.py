"""Shared fixtures: a fake OMDb behind ``httpx.MockTransport`` and a throwaway
SQLite database for slot storage."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from movie_explorer.database import init_db
from movie_explorer.services.omdb_service import OMDbService
from movie_explorer.services.slot_storage import SlotStorage

OMDB_TEST_URL = "https://omdb.test/"


def make_title(
    imdb_id: str,
    title: str | None = None,
    year: str = "2000",
    poster: str = "N/A",
    **detail: str,
) -> dict[str, Any]:
    """Build an OMDb-shaped title record."""
    record = {
        "imdbID": imdb_id,
        "Title": title or f"Title {imdb_id}",
        "Year": year,
        "Poster": poster,
        "Response": "True",
    }
    record.update(detail)
    return record


class FakeOMDb:
    """In-memory OMDb double answering search and lookup-by-id requests."""

    def __init__(self) -> None:
        self.pages: dict[tuple[str, int], dict[str, Any]] = {}
        self.titles: dict[str, dict[str, Any]] = {}
        self.broken: set[str] = set()
        self.raw_bodies: dict[str, str] = {}
        self.delays: dict[str, float] = {}
        self.requests: list[dict[str, str]] = []

    def add_search(
        self, query: str, page: int, entries: list[dict[str, Any]], total: int | str
    ) -> None:
        self.pages[(query, page)] = {
            "Search": entries,
            "totalResults": str(total),
            "Response": "True",
        }

    def add_paged_search(self, query: str, total: int, page_size: int = 10) -> None:
        """Register every page of a search with ``total`` sequential results."""
        ids = [f"tt{query}{n:04d}" for n in range(total)]
        for page, start in enumerate(range(0, total, page_size), start=1):
            entries = [make_title(i) for i in ids[start : start + page_size]]
            self.add_search(query, page, entries, total)

    def add_title(self, imdb_id: str, **fields: str) -> dict[str, Any]:
        record = make_title(imdb_id, **fields)
        self.titles[imdb_id] = record
        return record

    @property
    def lookups(self) -> list[str]:
        return [params["i"] for params in self.requests if "i" in params]

    @property
    def searches(self) -> list[tuple[str, str]]:
        return [(p["s"], p.get("page", "1")) for p in self.requests if "s" in p]

    async def handle(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.requests.append(params)
        key = params.get("s") or params.get("i") or ""

        delay = self.delays.get(key)
        if delay:
            await asyncio.sleep(delay)

        if key in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if key in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[key])

        if "s" in params:
            payload = self.pages.get((params["s"], int(params.get("page", "1"))))
            if payload is None:
                payload = {"Response": "False", "Error": "Movie not found!"}
        else:
            payload = self.titles.get(params.get("i", ""))
            if payload is None:
                payload = {"Response": "False", "Error": "Incorrect IMDb ID."}
        return httpx.Response(200, json=payload)


@pytest.fixture
def fake_omdb() -> FakeOMDb:
    return FakeOMDb()


@pytest_asyncio.fixture
async def omdb(fake_omdb: FakeOMDb) -> AsyncIterator[OMDbService]:
    service = OMDbService(
        "test-key",
        base_url=OMDB_TEST_URL,
        transport=httpx.MockTransport(fake_omdb.handle),
    )
    yield service
    await service.close()


@pytest_asyncio.fixture
async def storage(tmp_path) -> AsyncIterator[SlotStorage]:
    """Slot storage over a fresh SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'slots.db'}")
    await init_db(engine)
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield SlotStorage(session_factory)
    await engine.dispose()


class MemoryStorage:
    """Slot storage double kept in a dict, optionally failing."""

    def __init__(self, fail_reads: bool = False, fail_writes: bool = False) -> None:
        self.slots: dict[str, str] = {}
        self.writes: list[tuple[str, str]] = []
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    async def read(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return self.slots.get(key)

    async def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.slots[key] = value
        self.writes.append((key, value))


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()
