"""
공통 fixture

executor fixture는 프로세스 내부 SQLAlchemy 엔진과 sqlite3 CLI 두 가지로
같은 테스트를 실행한다. sqlite3(-json 지원 3.33 이상)이 없으면 CLI 쪽은 건너뛴다.
"""
import pytest

from memento.core.config import Settings
from memento.core.sqlite_cli import SqliteCliExecutor
from memento.database import SQLAlchemyExecutor, init_db
from tests.helpers import requires_sqlite3


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        data_dir=tmp_path / "data",
        tmdb_api_key="test-key",
        tmdb_base_url="https://tmdb.test/3",
        tmdb_image_base_url="https://images.test/t/p/",
        imdb_base_url="https://imdb.test",
    )


@pytest.fixture(
    params=[
        "sqlalchemy",
        pytest.param("sqlite3", marks=requires_sqlite3),
    ]
)
async def executor(request, settings):
    if request.param == "sqlite3":
        executor = SqliteCliExecutor(settings.database_path)
    else:
        executor = SQLAlchemyExecutor(settings.database_path)
    await init_db(executor)
    yield executor
    executor.dispose()
