# memento/core/sql_literal.py

import math
import re
from typing import Any, Mapping, Optional

# 작은따옴표 문자열 리터럴은 건너뛰고 :name 플레이스홀더만 잡는다
_TOKEN_PATTERN = re.compile(r"'(?:[^']|'')*'|(?<![:\w]):(\w+)")


def to_sql_literal(value: Any) -> str:
    """파이썬 값을 쿼리 텍스트에 그대로 넣을 수 있는 SQL 리터럴로 변환

    None -> NULL, 숫자 -> 10진수 텍스트, bool -> 1/0,
    문자열 -> 작은따옴표로 감싸고 내부 작은따옴표는 두 번 반복.
    그 외 타입은 TypeError.
    """
    if value is None:
        return "NULL"
    # bool은 int의 서브클래스라 먼저 검사
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite number: {value!r}")
        return repr(value)
    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"
    raise TypeError(f"Cannot encode {type(value).__name__} as an SQL literal")


def render_statement(sql: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """:name 바인드 파라미터를 리터럴로 치환한 쿼리 텍스트 반환"""
    params = params or {}

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name is None:
            return match.group(0)
        if name not in params:
            raise KeyError(f"Missing value for bind parameter '{name}'")
        return to_sql_literal(params[name])

    return _TOKEN_PATTERN.sub(_replace, sql)
