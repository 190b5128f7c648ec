"""
ScanLingo — Image Lookup
=========================
Google Custom Search (searchType=image) client.

Only the ordered list of items[].link is consumed. Any failure — network,
status, JSON shape — yields an empty list so text sections are never held
back by images.
"""

from __future__ import annotations

from typing import List, Optional

import httpx
from loguru import logger

from scanlingo.config import Settings, get_settings


class ImageSearchClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.request_timeout)

    async def fetch_image_links(self, query: str) -> List[str]:
        params = {
            "key": self.settings.google_search_api_key,
            "cx": self.settings.google_search_cx,
            "q": query,
            "searchType": "image",
            "num": self.settings.image_search_count,
        }
        try:
            resp = await self._http.get(self.settings.google_search_url, params=params)
            resp.raise_for_status()
            items = resp.json().get("items") or []
            links = [item["link"] for item in items if isinstance(item, dict) and item.get("link")]
        except Exception as e:
            logger.warning(f"[ImageSearch] Lookup failed (non-fatal): {e}")
            return []

        logger.debug(f"[ImageSearch] {len(links)} links for query_len={len(query)}")
        return links

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
