from fastapi import HTTPException
import logging
from pymongo.errors import DuplicateKeyError
from portal.modules.allocations.repository import AllocationRepository
from portal.modules.allocations.models import TeacherAllocation
from portal.modules.allocations.schemas import AllocationCreate, AllocationResolution
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.teachers.repository import TeacherRepository
from portal.modules.teachers.models import TeacherProfile


class AllocationService:
    def __init__(self,
                 allocation_repo: AllocationRepository,
                 teacher_repo: TeacherRepository,
                 academics_repo: AcademicsRepository
                 ):
        self.allocation_repo = allocation_repo
        self.teacher_repo = teacher_repo
        self.academics_repo = academics_repo

    async def create_allocation(self, data: AllocationCreate) -> TeacherAllocation:
        if not await self.teacher_repo.find_teacher(data.teacher_id):
            raise HTTPException(status_code=404, detail="Teacher not found")
        if not await self.academics_repo.find_class(data.class_id):
            raise HTTPException(status_code=404, detail="Class not found")
        if not await self.academics_repo.find_subject(data.subject_id):
            raise HTTPException(status_code=404, detail="Subject not found")

        if await self.allocation_repo.find_allocation(data.class_id, data.subject_id):
            raise HTTPException(status_code=409, detail="A teacher is already assigned to this class and subject")

        allocation = TeacherAllocation(**data.model_dump())
        try:
            await self.allocation_repo.create_allocation(allocation)
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="A teacher is already assigned to this class and subject")
        return allocation

    async def list_allocations(self):
        return await self.allocation_repo.list_allocations()

    async def delete_allocation(self, allocation_id: str):
        result = await self.allocation_repo.delete_allocation(allocation_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Allocation not found")
        return {"message": "Allocation deleted"}

    async def resolve_teacher(self, class_id: str, subject_id: str) -> AllocationResolution:
        """Teacher standing-assigned to (class, subject), or Unassigned."""
        allocation = await self.allocation_repo.find_allocation(class_id, subject_id)
        if not allocation:
            return AllocationResolution()

        teacher = await self.teacher_repo.find_teacher(allocation["teacher_id"])
        if not teacher:
            logging.warning("Allocation %s points at missing teacher %s", allocation["id"], allocation["teacher_id"])
            return AllocationResolution(teacher_id=allocation["teacher_id"])

        return AllocationResolution(
            teacher_id=allocation["teacher_id"],
            teacher_name=TeacherProfile(**teacher).display_name,
        )
