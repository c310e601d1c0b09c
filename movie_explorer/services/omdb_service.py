"""OMDb API service"""

import re
import time
from typing import Dict, Optional

import httpx

from .log_service import log_service

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class OMDbRequestError(Exception):
    """Transport or parse failure talking to OMDb"""


class OMDbService:
    """Open Movie Database API integration"""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://www.omdbapi.com/",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def _request(self, params: Dict) -> Dict:
        """
        Make request to OMDb API.

        OMDb reports its own failures (bad key, unknown id, no matches) as a
        JSON body with Response "False", often alongside a 4xx status, so the
        status code is not checked here.
        """
        logged_params = dict(params)
        if self.api_key:
            params = {"apikey": self.api_key, **params}

        started = time.perf_counter()
        status = None
        try:
            response = await self.client.get(self.base_url, params=params)
            status = response.status_code
            data = response.json()
        except httpx.HTTPError as e:
            log_service.omdb_request(
                logged_params, "transport-error", time.perf_counter() - started
            )
            log_service.error(f"OMDb API error: {e}")
            raise OMDbRequestError(str(e)) from e
        except ValueError as e:
            log_service.omdb_request(
                logged_params, "invalid-json", time.perf_counter() - started, status
            )
            log_service.error(f"OMDb returned invalid JSON: {e}")
            raise OMDbRequestError(str(e)) from e

        elapsed = time.perf_counter() - started
        if not isinstance(data, dict):
            log_service.omdb_request(logged_params, "invalid-payload", elapsed, status)
            log_service.error(f"OMDb returned unexpected payload: {type(data).__name__}")
            raise OMDbRequestError("Unexpected OMDb payload")

        outcome = "ok" if self.is_success(data) else f"rejected ({data.get('Error')})"
        log_service.omdb_request(logged_params, outcome, elapsed, status)
        return data

    async def search_titles(self, query: str, page: int = 1) -> Dict:
        """Search titles by name, one page (10 entries) at a time"""
        return await self._request({"s": query, "page": page})

    async def get_title(self, imdb_id: str) -> Dict:
        """Get full title details by IMDb id"""
        return await self._request({"i": imdb_id})

    @staticmethod
    def is_success(payload: Dict) -> bool:
        """True when OMDb flagged the response as successful"""
        return isinstance(payload, dict) and payload.get("Response") == "True"

    @staticmethod
    def error_message(payload: Dict, default: str) -> str:
        """OMDb's own error text, or the given fallback"""
        return payload.get("Error") or default

    @staticmethod
    def parse_total_results(payload: Dict) -> int:
        """Leading integer of totalResults, 0 when missing or unparseable"""
        match = _LEADING_INT.match(str(payload.get("totalResults") or "0"))
        if not match:
            return 0
        return int(match.group(1))

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
