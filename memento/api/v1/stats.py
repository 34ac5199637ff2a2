# memento/api/v1/stats.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from memento.core.dependencies import get_stats_service
from memento.schemas import DashboardStats, PeopleSort, PersonAppearanceStat, PersonStat, RecentPlay, RoleType
from memento.services import StatsService

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats, summary="대시보드 통계")
async def get_dashboard_stats(stats_service: StatsService = Depends(get_stats_service)):
    return await stats_service.get_dashboard_stats()


@router.get("/top-people", response_model=List[PersonStat], summary="역할별 상위 인물")
async def get_top_people(
    role: RoleType = Query(default=RoleType.actor, description="역할"),
    limit: int = Query(default=6, ge=1, le=100, description="최대 인원"),
    stats_service: StatsService = Depends(get_stats_service),
):
    return await stats_service.get_top_people_by_role(role, limit)


@router.get("/people", response_model=List[PersonAppearanceStat], summary="인물별 관람 통계")
async def get_people_stats(
    role: Optional[RoleType] = Query(default=None, description="역할 (생략하면 전체)"),
    query: Optional[str] = Query(default=None, description="이름 검색어"),
    sort: PeopleSort = Query(default=PeopleSort.most_appearances, description="정렬 기준"),
    stats_service: StatsService = Depends(get_stats_service),
):
    return await stats_service.get_people_appearance_stats(role, query, sort)


@router.get("/recent-plays", response_model=List[RecentPlay], summary="최근 관람 영화")
async def get_recent_plays(
    limit: int = Query(default=6, ge=1, le=100, description="최대 편수"),
    stats_service: StatsService = Depends(get_stats_service),
):
    return await stats_service.get_recent_plays(limit)
