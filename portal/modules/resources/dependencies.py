from fastapi import Depends
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.resources.repository import ResourceRepository
from portal.modules.resources.service import ResourceService

def get_resource_service(
    resource_repo: ResourceRepository = Depends(),
    academics_repo: AcademicsRepository = Depends(),
) -> ResourceService:
    return ResourceService(resource_repo, academics_repo)
