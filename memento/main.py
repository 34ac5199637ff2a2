# memento/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from memento import __version__
from memento.api.v1 import api_router
from memento.core.config import get_settings
from memento.core.exceptions import (
    DatabaseError,
    MementoError,
    NotFoundError,
    RemoteServiceError,
    ValidationError,
)
from memento.database import dispose_executor, get_executor, init_db

# 설정 로드
settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시 스키마 생성
    await init_db(get_executor())
    logger.info("Memento store ready")

    yield

    # 종료 시
    dispose_executor()


# FastAPI 앱 생성
app = FastAPI(
    title="Memento",
    description="Personal movie-watching journal",
    version=__version__,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

ERROR_STATUS = [
    (ValidationError, 422),
    (NotFoundError, 404),
    (RemoteServiceError, 502),
    (DatabaseError, 500),
]


@app.exception_handler(MementoError)
async def memento_error_handler(request: Request, exc: MementoError):
    status_code = 500
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# API v1 라우터 등록
app.include_router(api_router, prefix="/v1")


@app.get("/")
def read_root():
    """서비스 루트"""
    return {
        "service": "memento",
        "description": "Personal movie-watching journal",
        "version": __version__,
        "docs": "/docs",
    }
