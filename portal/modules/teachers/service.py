from fastapi import HTTPException
from typing import List
from portal.modules.teachers.repository import TeacherRepository
from portal.modules.teachers.models import TeacherProfile
from portal.modules.teachers.schemas import TeacherCreate, TeacherOption


class TeacherService:
    def __init__(self, teacher_repo: TeacherRepository):
        self.teacher_repo = teacher_repo

    async def create_teacher(self, data: TeacherCreate) -> TeacherProfile:
        teacher = TeacherProfile(**data.model_dump())
        await self.teacher_repo.create_teacher(teacher)
        return teacher

    async def list_teachers(self):
        return await self.teacher_repo.list_teachers()

    async def get_teacher(self, teacher_id: str):
        teacher = await self.teacher_repo.find_teacher(teacher_id)
        if not teacher:
            raise HTTPException(status_code=404, detail="Teacher not found")
        return teacher

    async def update_teacher(self, teacher_id: str, data: TeacherCreate) -> TeacherProfile:
        result = await self.teacher_repo.update_teacher(teacher_id, data.model_dump())
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Teacher not found")
        return TeacherProfile(id=teacher_id, **data.model_dump())

    async def delete_teacher(self, teacher_id: str):
        result = await self.teacher_repo.delete_teacher(teacher_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Teacher not found")
        return {"message": "Teacher deleted"}

    async def get_teachers_for_filter(self) -> List[TeacherOption]:
        roster = await self.teacher_repo.get_roster()
        return [TeacherOption(id=teacher_id, name=name) for teacher_id, name in roster.items()]
