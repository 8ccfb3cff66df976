"""NWS API client with a read-through TTL cache.

Every failure mode (HTTP status, transport error, undecodable body) is
folded into a ``None`` result; nothing raised by httpx escapes ``fetch``.
"""

import asyncio
import logging
from typing import Any

import httpx

from weathermcp.cache.store import TtlCache
from weathermcp.config.schema import UpstreamConfig

logger = logging.getLogger(__name__)


class NwsClient:
    def __init__(
        self,
        config: UpstreamConfig | None = None,
        cache: TtlCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or UpstreamConfig()
        self.cache = cache if cache is not None else TtlCache()
        self._http = httpx.AsyncClient(
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": self.config.accept,
            },
            timeout=self.config.timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )
        self._inflight: dict[str, asyncio.Task] = {}

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    async def fetch(self, url: str) -> dict[str, Any] | None:
        """Return the JSON object at ``url``, from cache when fresh.

        Concurrent cold fetches of the same URL share a single request.
        """
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return cached

        task = self._inflight.get(url)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(url))
            self._inflight[url] = task
            task.add_done_callback(lambda _t: self._inflight.pop(url, None))
        return await asyncio.shield(task)

    async def _fetch_and_store(self, url: str) -> dict[str, Any] | None:
        try:
            resp = await self._http.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("NWS %s returned %d", url, e.response.status_code)
            return None
        except httpx.RequestError as e:
            logger.warning("NWS request failed for %s: %s", url, e)
            return None
        except httpx.InvalidURL as e:
            # URLs can come from upstream payloads (forecast link, station id)
            logger.warning("NWS URL rejected %r: %s", url, e)
            return None
        except ValueError as e:
            logger.warning("NWS returned undecodable body for %s: %s", url, e)
            return None

        if not isinstance(data, dict):
            logger.warning(
                "NWS returned %s instead of an object for %s",
                type(data).__name__, url,
            )
            return None

        self.cache.put(url, data)
        logger.info("API call made for %s", url)
        return data

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "NwsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
