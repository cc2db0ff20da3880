from fastapi import HTTPException
from typing import List, Optional
import logging
from pymongo.errors import DuplicateKeyError
from portal.modules.auth.utility import hash_password
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.academics.models import SchoolClass
from portal.modules.students.repository import StudentRepository
from portal.modules.students.models import StudentProfile
from portal.modules.students.schemas import StudentCreate, StudentResponse
from portal.modules.users.models import User, UserRole


class StudentService:
    def __init__(self,
                 student_repo: StudentRepository,
                 academics_repo: AcademicsRepository
                 ):
        self.student_repo = student_repo
        self.academics_repo = academics_repo

    async def create_student(self, data: StudentCreate) -> StudentResponse:
        school_class = await self.academics_repo.find_class(data.class_id)
        if not school_class:
            raise HTTPException(status_code=404, detail="Class not found")
        if await self.student_repo.email_taken(data.email):
            raise HTTPException(status_code=409, detail="Email already registered")

        user = User(
            name=data.name,
            email=data.email,
            role=UserRole.student,
            hashed_password=hash_password(data.password),
        )
        profile = StudentProfile(user_id=user.id, class_id=data.class_id, parent_phone=data.parent_phone)
        try:
            await self.student_repo.create_student(user, profile)
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="Email already registered")

        logging.info("Enrolled student %s in class %s", profile.id, data.class_id)
        return StudentResponse(
            **profile.model_dump(),
            name=user.name,
            email=user.email,
            class_name=SchoolClass(**school_class).label,
        )

    async def list_students(self, class_id: Optional[str] = None) -> List[StudentResponse]:
        profiles = await self.student_repo.list_students(class_id)
        users = {u["id"]: u for u in await self.student_repo.find_users(p["user_id"] for p in profiles)}
        classes = {
            c["id"]: SchoolClass(**c).label
            for c in await self.academics_repo.find_classes({p["class_id"] for p in profiles})
        }

        students = []
        for profile in profiles:
            user = users.get(profile["user_id"])
            if not user:
                logging.warning("Student profile %s has no user account", profile["id"])
                continue
            students.append(StudentResponse(
                **profile,
                name=user["name"],
                email=user["email"],
                class_name=classes.get(profile["class_id"]),
            ))
        return students

    async def delete_student(self, student_id: str):
        profile = await self.student_repo.find_student(student_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Student not found")
        await self.student_repo.delete_student(profile)
        return {"message": "Student deleted"}
