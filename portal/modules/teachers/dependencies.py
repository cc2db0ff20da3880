from fastapi import Depends
from portal.modules.teachers.repository import TeacherRepository
from portal.modules.teachers.service import TeacherService

def get_teacher_service(
    teacher_repo: TeacherRepository = Depends(),
) -> TeacherService:
    return TeacherService(teacher_repo)
