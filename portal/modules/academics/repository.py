from fastapi import Depends
from typing import Iterable, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.academics.models import Board, SchoolClass, Subject, Chapter, Topic


class AcademicsRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    # Boards
    async def create_board(self, board: Board):
        return await self.db.boards.insert_one(board.model_dump())

    async def find_board(self, board_id: str) -> Optional[dict]:
        return await self.db.boards.find_one({"id": board_id}, {"_id": 0})

    async def find_board_by_name(self, name: str) -> Optional[dict]:
        return await self.db.boards.find_one({"name": name}, {"_id": 0})

    async def list_boards(self) -> List[dict]:
        return await self.db.boards.find({}, {"_id": 0}).sort("name", 1).to_list(None)

    async def delete_board(self, board_id: str):
        return await self.db.boards.delete_one({"id": board_id})

    # Classes
    async def create_class(self, school_class: SchoolClass):
        return await self.db.classes.insert_one(school_class.model_dump())

    async def find_class(self, class_id: str) -> Optional[dict]:
        return await self.db.classes.find_one({"id": class_id}, {"_id": 0})

    async def find_classes(self, class_ids: Iterable[str]) -> List[dict]:
        return await self.db.classes.find(
            {"id": {"$in": list(class_ids)}}, {"_id": 0}
        ).to_list(None)

    async def list_classes(self, board_id: Optional[str] = None) -> List[dict]:
        query = {"board_id": board_id} if board_id else {}
        return await self.db.classes.find(query, {"_id": 0}).sort("name", 1).to_list(None)

    async def delete_class(self, class_id: str):
        return await self.db.classes.delete_one({"id": class_id})

    # Subjects
    async def create_subject(self, subject: Subject):
        return await self.db.subjects.insert_one(subject.model_dump())

    async def find_subject(self, subject_id: str) -> Optional[dict]:
        return await self.db.subjects.find_one({"id": subject_id}, {"_id": 0})

    async def find_subjects(self, subject_ids: Iterable[str]) -> List[dict]:
        return await self.db.subjects.find(
            {"id": {"$in": list(subject_ids)}}, {"_id": 0}
        ).to_list(None)

    async def list_subjects(self, class_id: Optional[str] = None) -> List[dict]:
        query = {"class_id": class_id} if class_id else {}
        return await self.db.subjects.find(query, {"_id": 0}).sort("name", 1).to_list(None)

    async def update_subject(self, subject_id: str, data: dict):
        return await self.db.subjects.update_one({"id": subject_id}, {"$set": data})

    async def delete_subject(self, subject_id: str):
        return await self.db.subjects.delete_one({"id": subject_id})

    # Curriculum
    async def create_chapter(self, chapter: Chapter):
        return await self.db.chapters.insert_one(chapter.model_dump())

    async def list_chapters(self, subject_id: str) -> List[dict]:
        return await self.db.chapters.find({"subject_id": subject_id}, {"_id": 0}).to_list(None)

    async def find_chapter(self, chapter_id: str) -> Optional[dict]:
        return await self.db.chapters.find_one({"id": chapter_id}, {"_id": 0})

    async def update_chapter(self, chapter_id: str, data: dict):
        return await self.db.chapters.update_one({"id": chapter_id}, {"$set": data})

    async def delete_chapter(self, chapter_id: str):
        await self.db.topics.delete_many({"chapter_id": chapter_id})
        return await self.db.chapters.delete_one({"id": chapter_id})

    async def create_topic(self, topic: Topic):
        return await self.db.topics.insert_one(topic.model_dump())

    async def list_topics(self, chapter_id: str) -> List[dict]:
        return await self.db.topics.find({"chapter_id": chapter_id}, {"_id": 0}).to_list(None)

    async def find_topic(self, topic_id: str) -> Optional[dict]:
        return await self.db.topics.find_one({"id": topic_id}, {"_id": 0})

    async def update_topic(self, topic_id: str, data: dict):
        return await self.db.topics.update_one({"id": topic_id}, {"$set": data})

    async def delete_topic(self, topic_id: str):
        return await self.db.topics.delete_one({"id": topic_id})
