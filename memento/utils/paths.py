# memento/utils/paths.py

import re
from pathlib import Path

from memento.core.exceptions import DatabaseError

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def ensure_data_dir(database_path: Path) -> Path:
    """DB 파일이 들어갈 디렉터리를 만들고 경로 반환"""
    data_dir = database_path.parent
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatabaseError(f"Failed to create data directory: {data_dir} ({e})") from e
    return database_path


def sanitize_cache_key(path: str) -> str:
    """이미지 경로를 캐시 파일 이름으로 변환 ('/abc.jpg' -> '_abc.jpg')"""
    return _UNSAFE_CHARS.sub("_", path)
