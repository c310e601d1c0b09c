"""Tests for the OMDb HTTP client."""

from __future__ import annotations

import logging

import httpx
import pytest

import movie_explorer.services.omdb_service as omdb_module
from movie_explorer.services.log_service import LogService
from movie_explorer.services.omdb_service import OMDbRequestError, OMDbService
from tests.conftest import OMDB_TEST_URL, FakeOMDb


async def test_search_sends_query_page_and_key(omdb: OMDbService, fake_omdb: FakeOMDb):
    fake_omdb.add_paged_search("batman", total=12)

    data = await omdb.search_titles("batman", 2)

    assert fake_omdb.requests == [{"apikey": "test-key", "s": "batman", "page": "2"}]
    assert OMDbService.is_success(data)
    assert len(data["Search"]) == 2


async def test_lookup_by_id(omdb: OMDbService, fake_omdb: FakeOMDb):
    fake_omdb.add_title("tt0372784", title="Batman Begins", Genre="Action")

    data = await omdb.get_title("tt0372784")

    assert fake_omdb.lookups == ["tt0372784"]
    assert data["Title"] == "Batman Begins"


async def test_negative_envelope_is_returned_not_raised():
    """OMDb sends its own errors with a 4xx status and a JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"Response": "False", "Error": "Invalid API key!"})

    omdb = OMDbService("bad", base_url=OMDB_TEST_URL, transport=httpx.MockTransport(handler))
    try:
        data = await omdb.search_titles("batman")
    finally:
        await omdb.close()

    assert not OMDbService.is_success(data)
    assert OMDbService.error_message(data, "fallback") == "Invalid API key!"


async def test_no_api_key_omits_param():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={"Response": "False"})

    omdb = OMDbService(None, base_url=OMDB_TEST_URL, transport=httpx.MockTransport(handler))
    try:
        await omdb.get_title("tt1")
    finally:
        await omdb.close()

    assert seen == [{"i": "tt1"}]


async def test_transport_failure_raises_request_error(omdb: OMDbService, fake_omdb: FakeOMDb):
    fake_omdb.broken.add("tt1")

    with pytest.raises(OMDbRequestError):
        await omdb.get_title("tt1")


async def test_malformed_json_raises_request_error(omdb: OMDbService, fake_omdb: FakeOMDb):
    fake_omdb.raw_bodies["tt1"] = "<html>bad gateway</html>"

    with pytest.raises(OMDbRequestError):
        await omdb.get_title("tt1")


async def test_non_object_json_raises_request_error(omdb: OMDbService, fake_omdb: FakeOMDb):
    fake_omdb.raw_bodies["tt1"] = "[1, 2, 3]"

    with pytest.raises(OMDbRequestError):
        await omdb.get_title("tt1")


@pytest.mark.parametrize(
    ("total", "expected"),
    [("45", 45), (" 7", 7), ("12 results", 12), ("abc", 0), ("", 0), (None, 0)],
)
def test_parse_total_results(total, expected):
    assert OMDbService.parse_total_results({"totalResults": total}) == expected


def test_parse_total_results_missing_field():
    assert OMDbService.parse_total_results({}) == 0


def test_error_message_fallback():
    assert OMDbService.error_message({"Response": "False"}, "No movies found.") == (
        "No movies found."
    )


class RecordingLog:
    """Log double capturing OMDb request records."""

    def __init__(self) -> None:
        self.requests: list[tuple[dict, str, int | None]] = []
        self.errors: list[str] = []

    def omdb_request(self, params, outcome, elapsed, status=None):
        assert elapsed >= 0
        self.requests.append((params, outcome, status))

    def error(self, message: str, **kwargs):
        self.errors.append(message)


@pytest.fixture
def request_log(monkeypatch) -> RecordingLog:
    log = RecordingLog()
    monkeypatch.setattr(omdb_module, "log_service", log)
    return log


async def test_request_log_records_outcomes(
    omdb: OMDbService, fake_omdb: FakeOMDb, request_log: RecordingLog
):
    fake_omdb.add_title("tt1")
    fake_omdb.broken.add("tt2")
    fake_omdb.raw_bodies["tt3"] = "oops"

    await omdb.get_title("tt1")
    await omdb.get_title("tt404")
    for imdb_id in ("tt2", "tt3"):
        with pytest.raises(OMDbRequestError):
            await omdb.get_title(imdb_id)

    assert request_log.requests == [
        ({"i": "tt1"}, "ok", 200),
        ({"i": "tt404"}, "rejected (Incorrect IMDb ID.)", 200),
        ({"i": "tt2"}, "transport-error", None),
        ({"i": "tt3"}, "invalid-json", 200),
    ]
    assert len(request_log.errors) == 2


async def test_request_log_omits_api_key(
    omdb: OMDbService, fake_omdb: FakeOMDb, request_log: RecordingLog
):
    fake_omdb.add_paged_search("heat", total=3)

    await omdb.search_titles("heat", 1)

    params, outcome, _ = request_log.requests[0]
    assert params == {"s": "heat", "page": 1}
    assert "apikey" not in params
    assert outcome == "ok"


def test_omdb_request_line_format(tmp_path, caplog):
    log = LogService(log_dir=tmp_path)
    caplog.set_level(logging.INFO, logger="movie_explorer.requests")

    log.omdb_request({"s": "heat", "page": 2}, "ok", 0.0421, status=200)
    log.omdb_request({"i": "tt1"}, "transport-error", 0.5)

    messages = [r.getMessage() for r in caplog.records if r.name == "movie_explorer.requests"]
    assert messages == [
        "s=heat page=2 status=200 outcome=ok elapsed_ms=42",
        "i=tt1 status=- outcome=transport-error elapsed_ms=500",
    ]
