# memento/utils/formatting.py

from datetime import date, datetime, timezone
from typing import Optional, Union


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def to_iso_date(value: Union[str, date, None]) -> Optional[str]:
    """date 객체나 문자열을 'YYYY-MM-DD' 문자열로 정규화"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def format_runtime_minutes(minutes) -> str:
    """상영시간(분)을 '2h 19m' 형태로 표시"""
    try:
        total_minutes = int(minutes or 0)
    except (TypeError, ValueError):
        total_minutes = 0
    if total_minutes <= 0:
        return "0m"

    hours, remaining = divmod(total_minutes, 60)
    if hours <= 0:
        return f"{remaining}m"
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"
