from fastapi import APIRouter, Depends
from typing import Dict, Optional
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.academics.schemas import (
    BoardCreate, ClassCreate, SubjectCreate, ChapterCreate, TopicCreate, ChapterUpdate, TopicUpdate,
)
from portal.modules.academics.service import AcademicsService
from portal.modules.academics.dependencies import get_academics_service

academics_router = APIRouter(prefix="/academics", tags=["Academics"])

@academics_router.get("/boards")
async def list_boards(
    current_user: Dict = Depends(get_current_user),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.list_boards()

@academics_router.post("/boards", status_code=201)
async def create_board(
    data: BoardCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.create_board(data)

@academics_router.delete("/boards/{board_id}")
async def delete_board(
    board_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.delete_board(board_id)

@academics_router.get("/classes")
async def list_classes(
    board_id: Optional[str] = None,
    current_user: Dict = Depends(get_current_user),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.list_classes(board_id)

@academics_router.post("/classes", status_code=201)
async def create_class(
    data: ClassCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.create_class(data)

@academics_router.delete("/classes/{class_id}")
async def delete_class(
    class_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.delete_class(class_id)

@academics_router.get("/subjects")
async def list_subjects(
    class_id: Optional[str] = None,
    current_user: Dict = Depends(get_current_user),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.list_subjects(class_id)

@academics_router.post("/subjects", status_code=201)
async def create_subject(
    data: SubjectCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.create_subject(data)

@academics_router.put("/subjects/{subject_id}")
async def update_subject(
    subject_id: str,
    data: SubjectCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.update_subject(subject_id, data)

@academics_router.delete("/subjects/{subject_id}")
async def delete_subject(
    subject_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.delete_subject(subject_id)

@academics_router.get("/subjects/{subject_id}/chapters")
async def list_chapters(
    subject_id: str,
    current_user: Dict = Depends(get_current_user),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.list_chapters(subject_id)

@academics_router.post("/chapters", status_code=201)
async def create_chapter(
    data: ChapterCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.create_chapter(data)

@academics_router.put("/chapters/{chapter_id}")
async def update_chapter(
    chapter_id: str,
    data: ChapterUpdate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.update_chapter(chapter_id, data)

@academics_router.delete("/chapters/{chapter_id}")
async def delete_chapter(
    chapter_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.delete_chapter(chapter_id)

@academics_router.get("/chapters/{chapter_id}/topics")
async def list_topics(
    chapter_id: str,
    current_user: Dict = Depends(get_current_user),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.list_topics(chapter_id)

@academics_router.post("/topics", status_code=201)
async def create_topic(
    data: TopicCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.create_topic(data)

@academics_router.put("/topics/{topic_id}")
async def update_topic(
    topic_id: str,
    data: TopicUpdate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.update_topic(topic_id, data)

@academics_router.delete("/topics/{topic_id}")
async def delete_topic(
    topic_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AcademicsService = Depends(get_academics_service)
    ):
    return await service.delete_topic(topic_id)
