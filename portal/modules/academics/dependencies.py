from fastapi import Depends
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.academics.service import AcademicsService

def get_academics_service(
    academics_repo: AcademicsRepository = Depends(),
) -> AcademicsService:
    return AcademicsService(academics_repo)
