from fastapi import APIRouter, Depends
from typing import Dict, Optional
from portal.modules.auth.utility import require_roles
from portal.modules.students.schemas import StudentCreate
from portal.modules.students.service import StudentService
from portal.modules.students.dependencies import get_student_service

student_router = APIRouter(prefix="/students", tags=["Students"])

@student_router.get("/")
async def list_students(
    class_id: Optional[str] = None,
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    service: StudentService = Depends(get_student_service)
    ):
    return await service.list_students(class_id)

@student_router.post("/", status_code=201)
async def create_student(
    data: StudentCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: StudentService = Depends(get_student_service)
    ):
    return await service.create_student(data)

@student_router.delete("/{student_id}")
async def delete_student(
    student_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: StudentService = Depends(get_student_service)
    ):
    return await service.delete_student(student_id)
