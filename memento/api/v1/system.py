# memento/api/v1/system.py

from fastapi import APIRouter
from sqlalchemy import text
from memento.database import get_executor

router = APIRouter()


@router.get("/health")
def health_check():
    """서비스 헬스체크"""
    return {"status": "healthy", "service": "memento"}


@router.get("/db-test")
async def test_db():
    """데이터베이스 연결 테스트"""
    result = await get_executor().fetch_scalar(text("SELECT 1 AS ok"))
    return {"status": "ok", "result": result}
