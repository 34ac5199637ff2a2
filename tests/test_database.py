import threading

import pytest
from sqlalchemy import event, text

from memento.core.exceptions import DatabaseError, QueryExecutionError
from memento.database import SQLAlchemyExecutor, create_executor, init_db
from memento.core.sqlite_cli import SqliteCliExecutor


async def test_init_db_is_idempotent(executor):
    await init_db(executor)
    await init_db(executor)
    rows = await executor.fetch_all(
        text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
    )
    names = {row["name"] for row in rows}
    assert {"movies", "persons", "credits", "watchlist", "places", "plays"} <= names


async def test_foreign_keys_are_enforced(executor):
    with pytest.raises(QueryExecutionError):
        await executor.execute(
            text("INSERT INTO plays (movie_id, watched_at, watch_order) VALUES (999, '2024-01-01', 1)")
        )


async def test_init_db_fails_on_unwritable_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    executor = SQLAlchemyExecutor(blocker / "memento.db")
    with pytest.raises(DatabaseError):
        await init_db(executor)


def test_create_executor_follows_backend_setting(settings):
    assert isinstance(create_executor(settings), SQLAlchemyExecutor)
    cli_settings = settings.model_copy(update={"database_backend": "sqlite3"})
    assert isinstance(create_executor(cli_settings), SqliteCliExecutor)


async def test_sqlalchemy_executor_runs_off_event_loop_thread(settings):
    executor = SQLAlchemyExecutor(settings.database_path)
    threads = []
    event.listen(
        executor.engine,
        "before_cursor_execute",
        lambda *args: threads.append(threading.get_ident()),
    )
    try:
        await init_db(executor)
        assert await executor.fetch_scalar(text("SELECT 1 AS ok")) == 1
    finally:
        executor.dispose()

    assert threads
    assert threading.get_ident() not in threads
