# memento/core/exceptions.py

from typing import Optional


class MementoError(Exception):
    """애플리케이션 공통 예외"""


class ValidationError(MementoError):
    """쿼리 실행 전에 걸러지는 입력 오류 (예: TMDB id 누락)"""


class NotFoundError(MementoError):
    pass


class RemoteServiceError(MementoError):
    """TMDB / IMDb / 이미지 서버 호출 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DatabaseError(MementoError):
    """로컬 저장소 오류의 기본 클래스"""


class ProcessLaunchError(DatabaseError):
    """sqlite3 프로세스를 시작하지 못함"""


class QueryExecutionError(DatabaseError):
    """엔진이 쿼리를 거부함 (diagnostic 텍스트 포함)"""


class ResultParseError(DatabaseError):
    """구조화된 결과(JSON)를 해석하지 못함"""


class InvariantViolation(DatabaseError):
    """예상하지 못한 저장소 상태"""
