from fastapi import HTTPException
from collections import defaultdict
from typing import List
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.academics.models import Board, SchoolClass, Subject, Chapter, Topic
from portal.modules.academics.schemas import (
    BoardCreate, ClassCreate, SubjectCreate, ChapterCreate, TopicCreate, ChapterUpdate, TopicUpdate,
    BoardClassesOption, ClassOption,
)


class AcademicsService:
    def __init__(self, academics_repo: AcademicsRepository):
        self.academics_repo = academics_repo

    async def create_board(self, data: BoardCreate) -> Board:
        if await self.academics_repo.find_board_by_name(data.name):
            raise HTTPException(status_code=409, detail="Board already exists")
        board = Board(name=data.name)
        await self.academics_repo.create_board(board)
        return board

    async def list_boards(self):
        return await self.academics_repo.list_boards()

    async def delete_board(self, board_id: str):
        result = await self.academics_repo.delete_board(board_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Board not found")
        return {"message": "Board deleted"}

    async def create_class(self, data: ClassCreate) -> SchoolClass:
        if not await self.academics_repo.find_board(data.board_id):
            raise HTTPException(status_code=404, detail="Board not found")
        school_class = SchoolClass(**data.model_dump())
        await self.academics_repo.create_class(school_class)
        return school_class

    async def list_classes(self, board_id=None):
        return await self.academics_repo.list_classes(board_id)

    async def delete_class(self, class_id: str):
        result = await self.academics_repo.delete_class(class_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Class not found")
        return {"message": "Class deleted"}

    async def create_subject(self, data: SubjectCreate) -> Subject:
        if not await self.academics_repo.find_class(data.class_id):
            raise HTTPException(status_code=404, detail="Class not found")
        subject = Subject(**data.model_dump())
        await self.academics_repo.create_subject(subject)
        return subject

    async def list_subjects(self, class_id=None):
        return await self.academics_repo.list_subjects(class_id)

    async def update_subject(self, subject_id: str, data: SubjectCreate) -> Subject:
        if not await self.academics_repo.find_class(data.class_id):
            raise HTTPException(status_code=404, detail="Class not found")
        result = await self.academics_repo.update_subject(subject_id, data.model_dump())
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Subject not found")
        return Subject(id=subject_id, **data.model_dump())

    async def delete_subject(self, subject_id: str):
        result = await self.academics_repo.delete_subject(subject_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Subject not found")
        return {"message": "Subject deleted"}

    async def create_chapter(self, data: ChapterCreate) -> Chapter:
        if not await self.academics_repo.find_subject(data.subject_id):
            raise HTTPException(status_code=404, detail="Subject not found")
        chapter = Chapter(**data.model_dump())
        await self.academics_repo.create_chapter(chapter)
        return chapter

    async def list_chapters(self, subject_id: str):
        return await self.academics_repo.list_chapters(subject_id)

    async def update_chapter(self, chapter_id: str, data: ChapterUpdate) -> Chapter:
        result = await self.academics_repo.update_chapter(chapter_id, data.model_dump())
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Chapter not found")
        return Chapter(**await self.academics_repo.find_chapter(chapter_id))

    async def delete_chapter(self, chapter_id: str):
        result = await self.academics_repo.delete_chapter(chapter_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Chapter not found")
        return {"message": "Chapter deleted"}

    async def create_topic(self, data: TopicCreate) -> Topic:
        if not await self.academics_repo.find_chapter(data.chapter_id):
            raise HTTPException(status_code=404, detail="Chapter not found")
        topic = Topic(**data.model_dump())
        await self.academics_repo.create_topic(topic)
        return topic

    async def list_topics(self, chapter_id: str):
        return await self.academics_repo.list_topics(chapter_id)

    async def update_topic(self, topic_id: str, data: TopicUpdate) -> Topic:
        result = await self.academics_repo.update_topic(topic_id, data.model_dump())
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Topic not found")
        return Topic(**await self.academics_repo.find_topic(topic_id))

    async def delete_topic(self, topic_id: str):
        result = await self.academics_repo.delete_topic(topic_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Topic not found")
        return {"message": "Topic deleted"}

    async def get_classes_for_filter(self) -> List[BoardClassesOption]:
        """Classes grouped under their board, labelled for a picker."""
        boards = await self.academics_repo.list_boards()
        classes = await self.academics_repo.list_classes()

        by_board = defaultdict(list)
        for doc in classes:
            school_class = SchoolClass(**doc)
            by_board[school_class.board_id].append(
                ClassOption(id=school_class.id, name=school_class.label)
            )

        return [
            BoardClassesOption(id=board["id"], name=board["name"], classes=by_board[board["id"]])
            for board in boards
        ]
