# memento/core/sqlite_cli.py

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

from sqlalchemy.dialects import sqlite

from memento.core.exceptions import (
    ProcessLaunchError,
    QueryExecutionError,
    ResultParseError,
)
from memento.core.sql_literal import render_statement
from memento.utils.paths import ensure_data_dir

logger = logging.getLogger(__name__)

PREAMBLE = "PRAGMA foreign_keys = ON;"


class SqliteCliExecutor:
    """sqlite3 CLI를 자식 프로세스로 띄워 쿼리를 실행하는 실행기

    호출마다 프로세스를 새로 시작한다. 커넥션 풀이나 문장 캐시는 없다.
    """

    def __init__(self, database_path: Path, binary: str = "sqlite3"):
        self.database_path = Path(database_path)
        self.binary = binary
        self._dialect = sqlite.dialect(paramstyle="named")

    def compile(self, statement: Any) -> str:
        """SQLAlchemy 문장을 바인드 값이 채워진 SQL 텍스트로 변환"""
        if isinstance(statement, str):
            return statement.strip()
        compiled = statement.compile(
            dialect=self._dialect,
            compile_kwargs={"render_postcompile": True},
        )
        return render_statement(str(compiled), compiled.params).strip()

    def _script(self, statements: tuple) -> str:
        body = []
        for statement in statements:
            sql = self.compile(statement)
            body.append(sql if sql.endswith(";") else f"{sql};")
        return "\n".join(body)

    async def run_sql(self, sql: str, expect_json: bool = False) -> str:
        """PRAGMA 프리앰블 + 쿼리를 stdin으로 전달하고 stdout 반환"""
        database_path = ensure_data_dir(self.database_path)
        args = [self.binary, "-batch", "-bail"]
        if expect_json:
            args.append("-json")
        args.append(str(database_path))

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessLaunchError(f"Failed to start {self.binary}: {e}") from e

        logger.debug("sqlite3 input: %s", sql)
        stdout, stderr = await process.communicate(f"{PREAMBLE}\n{sql}\n".encode("utf-8"))

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise QueryExecutionError(message or "sqlite3 command failed")

        return stdout.decode("utf-8")

    async def execute(self, *statements: Any) -> None:
        """전달된 문장들을 BEGIN/COMMIT으로 감싸 한 번의 프로세스 호출로 실행"""
        if not statements:
            return
        await self.run_sql(f"BEGIN;\n{self._script(statements)}\nCOMMIT;")

    async def fetch_all(self, statement: Any) -> list[dict]:
        output = (await self.run_sql(self._script((statement,)), expect_json=True)).strip()
        if not output:
            return []
        try:
            rows = json.loads(output)
        except ValueError as e:
            raise ResultParseError("Failed to parse sqlite output.") from e
        if not isinstance(rows, list):
            raise ResultParseError("Unexpected sqlite output shape.")
        return rows

    async def fetch_one(self, statement: Any) -> Optional[dict]:
        rows = await self.fetch_all(statement)
        return rows[0] if rows else None

    async def fetch_scalar(self, statement: Any) -> Any:
        row = await self.fetch_one(statement)
        if row is None:
            return None
        return next(iter(row.values()), None)

    def dispose(self) -> None:
        pass
