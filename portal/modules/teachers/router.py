from fastapi import APIRouter, Depends
from typing import Dict
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.teachers.schemas import TeacherCreate
from portal.modules.teachers.service import TeacherService
from portal.modules.teachers.dependencies import get_teacher_service

teacher_router = APIRouter(prefix="/teachers", tags=["Teachers"])

@teacher_router.get("/")
async def list_teachers(
    current_user: Dict = Depends(get_current_user),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.list_teachers()

@teacher_router.post("/", status_code=201)
async def create_teacher(
    data: TeacherCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.create_teacher(data)

@teacher_router.get("/{teacher_id}")
async def get_teacher(
    teacher_id: str,
    current_user: Dict = Depends(get_current_user),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.get_teacher(teacher_id)

@teacher_router.put("/{teacher_id}")
async def update_teacher(
    teacher_id: str,
    data: TeacherCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.update_teacher(teacher_id, data)

@teacher_router.delete("/{teacher_id}")
async def delete_teacher(
    teacher_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: TeacherService = Depends(get_teacher_service)
    ):
    return await service.delete_teacher(teacher_id)
