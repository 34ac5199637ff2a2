import shutil

import pytest
from sqlalchemy import select, text

from memento.core.exceptions import (
    DatabaseError,
    ProcessLaunchError,
    QueryExecutionError,
    ResultParseError,
)
from memento.core.sqlite_cli import SqliteCliExecutor
from memento.models import MovieModel, PlaceModel
from tests.helpers import requires_sqlite3


def test_compile_renders_literals(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db")
    sql = executor.compile(select(MovieModel.id).where(MovieModel.title == "Schindler's List"))
    assert "'Schindler''s List'" in sql
    assert ":" not in sql


def test_compile_renders_booleans_as_integers(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db")
    sql = executor.compile(select(PlaceModel.id).where(PlaceModel.is_cinema == True))  # noqa: E712
    assert "= 1" in sql


async def test_missing_binary_raises_process_launch_error(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db", binary="definitely-not-sqlite3")
    with pytest.raises(ProcessLaunchError):
        await executor.fetch_all(text("SELECT 1"))


@pytest.mark.skipif(not shutil.which("false"), reason="false not available")
async def test_non_zero_exit_without_stderr_uses_generic_message(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db", binary="false")
    with pytest.raises(QueryExecutionError, match="sqlite3 command failed"):
        await executor.execute(text("SELECT 1"))


@pytest.mark.skipif(not shutil.which("echo"), reason="echo not available")
async def test_unparseable_output_raises_result_parse_error(tmp_path):
    # echo는 인자를 그대로 출력하므로 JSON이 아니다
    executor = SqliteCliExecutor(tmp_path / "memento.db", binary="echo")
    with pytest.raises(ResultParseError):
        await executor.fetch_all(text("SELECT 1"))


async def test_creates_missing_data_directory(tmp_path):
    database_path = tmp_path / "nested" / "dir" / "memento.db"
    executor = SqliteCliExecutor(database_path, binary="definitely-not-sqlite3")
    with pytest.raises(ProcessLaunchError):
        await executor.execute(text("SELECT 1"))
    assert database_path.parent.is_dir()


async def test_unwritable_data_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    executor = SqliteCliExecutor(blocker / "memento.db")
    with pytest.raises(DatabaseError):
        await executor.execute(text("SELECT 1"))


@requires_sqlite3
async def test_engine_error_carries_diagnostic_text(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db")
    with pytest.raises(QueryExecutionError, match="no such table"):
        await executor.fetch_all(text("SELECT * FROM nowhere"))


@requires_sqlite3
async def test_empty_result_is_empty_list(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db")
    await executor.execute(text("CREATE TABLE t (x INTEGER)"))
    assert await executor.fetch_all(text("SELECT x FROM t")) == []
    assert await executor.fetch_one(text("SELECT x FROM t")) is None


@requires_sqlite3
async def test_failed_statement_rolls_back_whole_batch(tmp_path):
    executor = SqliteCliExecutor(tmp_path / "memento.db")
    await executor.execute(text("CREATE TABLE t (x INTEGER NOT NULL)"))
    with pytest.raises(QueryExecutionError):
        await executor.execute(
            text("INSERT INTO t (x) VALUES (1)"),
            text("INSERT INTO t (x) VALUES (NULL)"),
        )
    assert await executor.fetch_scalar(text("SELECT COUNT(*) AS n FROM t")) == 0
