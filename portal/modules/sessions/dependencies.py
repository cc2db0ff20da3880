from fastapi import Depends
from portal.modules.sessions.repository import SessionRepository
from portal.modules.sessions.service import SessionService
from portal.modules.sessions.bulk_service import BulkSessionService
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.teachers.repository import TeacherRepository
from portal.modules.allocations.service import AllocationService
from portal.modules.allocations.dependencies import get_allocation_service

def get_session_service(
    session_repo: SessionRepository = Depends(),
    academics_repo: AcademicsRepository = Depends(),
) -> SessionService:
    return SessionService(session_repo, academics_repo)

def get_bulk_session_service(
    session_repo: SessionRepository = Depends(),
    teacher_repo: TeacherRepository = Depends(),
    allocation_service: AllocationService = Depends(get_allocation_service),
) -> BulkSessionService:
    return BulkSessionService(
        session_repo=session_repo,
        teacher_repo=teacher_repo,
        allocation_service=allocation_service,
    )
