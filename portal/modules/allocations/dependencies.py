from fastapi import Depends
from portal.modules.allocations.repository import AllocationRepository
from portal.modules.allocations.service import AllocationService
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.teachers.repository import TeacherRepository

def get_allocation_service(
    allocation_repo: AllocationRepository = Depends(),
    teacher_repo: TeacherRepository = Depends(),
    academics_repo: AcademicsRepository = Depends(),
) -> AllocationService:
    return AllocationService(
        allocation_repo=allocation_repo,
        teacher_repo=teacher_repo,
        academics_repo=academics_repo,
    )
