from fastapi import Depends
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.students.repository import StudentRepository
from portal.modules.students.service import StudentService

def get_student_service(
    student_repo: StudentRepository = Depends(),
    academics_repo: AcademicsRepository = Depends(),
) -> StudentService:
    return StudentService(student_repo, academics_repo)
