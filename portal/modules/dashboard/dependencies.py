from fastapi import Depends
from portal.modules.dashboard.service import DashboardService
from portal.modules.sessions.repository import SessionRepository
from portal.modules.calendar.repository import CalendarRepository
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.teachers.repository import TeacherRepository

def get_dashboard_service(
    session_repo: SessionRepository = Depends(),
    calendar_repo: CalendarRepository = Depends(),
    academics_repo: AcademicsRepository = Depends(),
    teacher_repo: TeacherRepository = Depends(),
) -> DashboardService:
    return DashboardService(
        session_repo=session_repo,
        calendar_repo=calendar_repo,
        academics_repo=academics_repo,
        teacher_repo=teacher_repo,
    )
