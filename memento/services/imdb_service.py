# memento/services/imdb_service.py

import json
import logging
import re
from typing import Any, Optional
from urllib.parse import quote

import httpx

from memento.core.config import Settings, get_settings
from memento.core.exceptions import RemoteServiceError
from memento.schemas import ImdbRating

logger = logging.getLogger(__name__)

IMDB_ID_PATTERN = re.compile(r"^tt\d+$")
LD_JSON_PATTERN = re.compile(
    r"<script[^>]*type=[\"']application/ld\+json[\"'][^>]*>(.*?)</script>",
    re.IGNORECASE | re.DOTALL,
)

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.imdb.com/",
}


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(str(value).replace(",", ""))
    except ValueError:
        return None


def extract_aggregate_rating(node: Any) -> Optional[ImdbRating]:
    """JSON-LD 노드에서 aggregateRating을 재귀적으로 찾는다"""
    if isinstance(node, list):
        for item in node:
            match = extract_aggregate_rating(item)
            if match:
                return match
        return None

    if not isinstance(node, dict):
        return None

    aggregate = node.get("aggregateRating")
    if isinstance(aggregate, dict):
        value = _to_number(aggregate.get("ratingValue"))
        if value is not None:
            count = _to_number(aggregate.get("ratingCount"))
            best = _to_number(aggregate.get("bestRating"))
            return ImdbRating(
                value=value,
                count=int(count) if count is not None else None,
                best=best if best is not None else 10,
            )

    graph = node.get("@graph")
    if isinstance(graph, list):
        return extract_aggregate_rating(graph)

    return None


def parse_rating_from_html(html: str) -> Optional[ImdbRating]:
    for match in LD_JSON_PATTERN.finditer(html):
        script_text = match.group(1).strip()
        if not script_text:
            continue
        try:
            parsed = json.loads(script_text)
        except ValueError:
            # 깨진 script 블록은 건너뜀
            continue
        rating = extract_aggregate_rating(parsed)
        if rating:
            return rating
    return None


class IMDbService:

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.timeout = httpx.Timeout(self.settings.imdb_timeout)
        self.transport = transport

    async def scrape_rating(self, imdb_id: Optional[str]) -> Optional[ImdbRating]:
        """IMDb 타이틀 페이지의 JSON-LD에서 평점 추출 (없으면 None)"""
        normalized = str(imdb_id or "").strip()
        if not IMDB_ID_PATTERN.match(normalized):
            return None

        url = f"{self.settings.imdb_base_url}/title/{quote(normalized)}/"
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, headers=REQUEST_HEADERS, follow_redirects=True
        ) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise RemoteServiceError(
                    f"HTTP request failed with status {e.response.status_code}.",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise RemoteServiceError(f"IMDb request failed: {str(e)}") from e

        return parse_rating_from_html(response.text)
