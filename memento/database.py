# memento/database.py

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import CreateTable

from memento.core.config import Settings, get_settings
from memento.core.exceptions import DatabaseError, QueryExecutionError
from memento.utils.paths import ensure_data_dir

logger = logging.getLogger(__name__)

# Base 클래스 생성
Base = declarative_base()


class QueryExecutor(Protocol):
    """서비스 계층이 사용하는 저장소 실행기 계약"""

    async def execute(self, *statements: Any) -> None: ...

    async def fetch_all(self, statement: Any) -> list[dict]: ...

    async def fetch_one(self, statement: Any) -> Optional[dict]: ...

    async def fetch_scalar(self, statement: Any) -> Any: ...

    def dispose(self) -> None: ...


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class SQLAlchemyExecutor:
    """프로세스 내부 SQLite 엔진 위에서 동작하는 실행기"""

    def __init__(self, database_path: Path, echo: bool = False):
        self.database_path = Path(database_path)
        self.echo = echo
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            ensure_data_dir(self.database_path)
            # 엔진 생성
            self._engine = create_engine(
                f"sqlite:///{self.database_path}",
                echo=self.echo,
                # 스레드 풀에서 커넥션을 공유
                connect_args={"check_same_thread": False},
            )
            event.listen(self._engine, "connect", _enable_foreign_keys)
        return self._engine

    def _execute_sync(self, statements: tuple) -> None:
        try:
            with self.engine.begin() as connection:
                for statement in statements:
                    logger.debug("execute: %s", statement)
                    connection.execute(statement)
        except SQLAlchemyError as e:
            raise QueryExecutionError(str(getattr(e, "orig", None) or e)) from e

    def _fetch_all_sync(self, statement: Any) -> list[dict]:
        try:
            with self.engine.connect() as connection:
                logger.debug("fetch: %s", statement)
                result = connection.execute(statement)
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            raise QueryExecutionError(str(getattr(e, "orig", None) or e)) from e

    async def execute(self, *statements: Any) -> None:
        """전달된 문장들을 하나의 트랜잭션으로 실행 (이벤트 루프 밖의 스레드에서)"""
        await asyncio.to_thread(self._execute_sync, statements)

    async def fetch_all(self, statement: Any) -> list[dict]:
        return await asyncio.to_thread(self._fetch_all_sync, statement)

    async def fetch_one(self, statement: Any) -> Optional[dict]:
        rows = await self.fetch_all(statement)
        return rows[0] if rows else None

    async def fetch_scalar(self, statement: Any) -> Any:
        row = await self.fetch_one(statement)
        if row is None:
            return None
        return next(iter(row.values()), None)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


def create_executor(settings: Settings) -> QueryExecutor:
    """설정에 맞는 실행기 생성"""
    if settings.database_backend == "sqlite3":
        from memento.core.sqlite_cli import SqliteCliExecutor

        return SqliteCliExecutor(settings.database_path, binary=settings.sqlite3_binary)
    return SQLAlchemyExecutor(settings.database_path, echo=settings.database_echo)


_executor: Optional[QueryExecutor] = None


def get_executor() -> QueryExecutor:
    """프로세스 전역 실행기 (시작 시 한 번 생성)"""
    global _executor
    if _executor is None:
        _executor = create_executor(get_settings())
    return _executor


def dispose_executor() -> None:
    global _executor
    if _executor is not None:
        _executor.dispose()
        _executor = None


async def init_db(executor: QueryExecutor) -> None:
    """필요한 테이블을 CREATE TABLE IF NOT EXISTS로 생성 (매 시작마다 호출 가능)"""
    # 모델 등록을 위해 import
    import memento.models  # noqa: F401

    statements = [
        CreateTable(table, if_not_exists=True) for table in Base.metadata.sorted_tables
    ]
    try:
        await executor.execute(*statements)
    except DatabaseError as e:
        raise DatabaseError(f"Failed to initialize database: {e}") from e
    logger.info("Database schema ready")
