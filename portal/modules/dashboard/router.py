from fastapi import APIRouter, Depends, Query
from typing import Dict, List, Optional
from datetime import date
from portal.core.config import ACTIVITY_LIMIT
from portal.modules.auth.utility import require_roles
from portal.modules.dashboard.schemas import (
    TodayStats, OperationalFlag, ActivityItem, ScheduleSession, ScheduleViewType,
)
from portal.modules.dashboard.service import DashboardService
from portal.modules.dashboard.dependencies import get_dashboard_service
from portal.modules.teachers.schemas import TeacherOption
from portal.modules.teachers.service import TeacherService
from portal.modules.teachers.dependencies import get_teacher_service
from portal.modules.academics.schemas import BoardClassesOption
from portal.modules.academics.service import AcademicsService
from portal.modules.academics.dependencies import get_academics_service

dashboard_router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

@dashboard_router.get("/today", response_model=TodayStats)
async def get_today_stats(
    current_user: Dict = Depends(require_roles("admin")),
    service: DashboardService = Depends(get_dashboard_service)
    ):
    return await service.get_today_stats()

@dashboard_router.get("/flags", response_model=List[OperationalFlag])
async def get_operational_flags(
    current_user: Dict = Depends(require_roles("admin")),
    service: DashboardService = Depends(get_dashboard_service)
    ):
    return await service.get_operational_flags()

@dashboard_router.get("/activity", response_model=List[ActivityItem])
async def get_recent_activities(
    limit: int = Query(default=ACTIVITY_LIMIT, ge=1, le=100),
    current_user: Dict = Depends(require_roles("admin")),
    service: DashboardService = Depends(get_dashboard_service)
    ):
    return await service.get_recent_activities(limit)

@dashboard_router.get("/schedule", response_model=List[ScheduleSession])
async def get_schedule(
    start_date: date,
    end_date: date,
    view_type: ScheduleViewType = ScheduleViewType.teacher,
    teacher_id: Optional[str] = None,
    class_id: Optional[str] = None,
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    service: DashboardService = Depends(get_dashboard_service)
    ):
    return await service.get_schedule(view_type, start_date, end_date, teacher_id, class_id)

@dashboard_router.get("/filters/teachers", response_model=List[TeacherOption])
async def get_teachers_for_filter(
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.get_teachers_for_filter()

@dashboard_router.get("/filters/classes", response_model=List[BoardClassesOption])
async def get_classes_for_filter(
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.get_classes_for_filter()
