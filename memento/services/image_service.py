# memento/services/image_service.py

import logging
from pathlib import Path
from typing import Optional

import httpx

from memento.core.config import Settings, get_settings
from memento.core.exceptions import RemoteServiceError
from memento.utils.paths import sanitize_cache_key

logger = logging.getLogger(__name__)


class ImageCache:
    """TMDB 이미지를 받아 디스크에 캐시 (경로를 정리한 파일 이름을 키로 사용)"""

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.cache_dir = Path(self.settings.resolved_image_cache_dir)
        self.timeout = httpx.Timeout(self.settings.tmdb_timeout)
        self.transport = transport

    def cache_path(self, image_path: str, size: str = "w500") -> Path:
        return self.cache_dir / f"{size}{sanitize_cache_key(image_path)}"

    async def get_image(self, image_path: Optional[str], size: str = "w500") -> Optional[bytes]:
        if not image_path:
            return None

        cached = self.cache_path(image_path, size)
        if cached.is_file():
            return cached.read_bytes()

        url = f"{self.settings.tmdb_image_base_url}{size}{image_path}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise RemoteServiceError(
                    f"Image request failed with status {e.response.status_code}.",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise RemoteServiceError(f"Image request failed: {str(e)}") from e

        data = response.content
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            cached.write_bytes(data)
        except OSError as e:
            # 캐시 쓰기 실패는 이미지 반환을 막지 않는다
            logger.warning("Failed to write image cache %s: %s", cached, e)
        return data
