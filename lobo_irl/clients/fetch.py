from __future__ import annotations

import logging

import httpx

from lobo_irl.core.errors import FetchError

logger = logging.getLogger(__name__)


class FetchCache:
    """Last successful response body per URL. Entries are overwritten, never evicted."""

    def __init__(self) -> None:
        self._by_url: dict[str, str] = {}

    def get(self, url: str) -> str | None:
        return self._by_url.get(url)

    def set(self, url: str, text: str) -> None:
        self._by_url[url] = text

    def clear(self) -> None:
        self._by_url.clear()

    def __contains__(self, url: object) -> bool:
        return url in self._by_url

    def __len__(self) -> int:
        return len(self._by_url)


class SensorFetcher:
    def __init__(
        self,
        *,
        cache: FetchCache | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._cache = cache if cache is not None else FetchCache()
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            transport=transport,
            follow_redirects=True,
        )

    @property
    def cache(self) -> FetchCache:
        return self._cache

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, url: str, allow_cache: bool = True) -> str:
        if not url:
            raise ValueError("url must be a non-empty string")

        if allow_cache:
            cached = self._cache.get(url)
            if cached is not None:
                logger.debug("Serving cached response", extra={"url": url, "cache": "hit"})
                return cached

        logger.info(
            "Requesting sensor data",
            extra={"url": url, "cache": "miss" if allow_cache else "bypass"},
        )
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Sensor request failed: %s", e, extra={"url": url})
            raise FetchError(url, e) from e

        text = resp.text
        if not text:
            logger.warning(
                "Sensor returned an empty body",
                extra={"url": url, "status_code": resp.status_code},
            )
            raise FetchError(url)

        if allow_cache:
            self._cache.set(url, text)
        return text
