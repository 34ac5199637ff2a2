# memento/utils/__init__.py

from .formatting import format_runtime_minutes, to_iso_date, utc_now_iso
from .paths import ensure_data_dir, sanitize_cache_key

__all__ = [
    "format_runtime_minutes",
    "to_iso_date",
    "utc_now_iso",
    "ensure_data_dir",
    "sanitize_cache_key",
]
