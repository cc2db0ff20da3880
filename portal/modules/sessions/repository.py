from fastapi import Depends
from typing import Dict, List, Optional
from datetime import datetime
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database, run_in_transaction
from portal.modules.sessions.models import SessionLog, SessionStatus


SESSION_REFERENCES = (
    ("class_id", "classes"),
    ("subject_id", "subjects"),
    ("teacher_id", "teachers"),
    ("chapter_id", "chapters"),
    ("topic_id", "topics"),
)


class InvalidReferenceError(Exception):
    """A staged session points at a document that does not exist."""


class SessionRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def add_session(self, session_doc: dict):
        return await self.db.sessions.insert_one(dict(session_doc))

    async def find_session(self, session_id: str) -> Optional[dict]:
        return await self.db.sessions.find_one({"id": session_id}, {"_id": 0})

    async def update_session(self, session_id: str, data: dict):
        return await self.db.sessions.update_one({"id": session_id}, {"$set": data})

    async def delete_session(self, session_id: str):
        await self.db.session_logs.delete_many({"session_id": session_id})
        return await self.db.sessions.delete_one({"id": session_id})

    async def list_sessions(self, limit: int = 100) -> List[dict]:
        return await self.db.sessions.find({}, {"_id": 0}).sort("start_time", -1).to_list(limit)

    async def sessions_in_range(
        self, start: datetime, end: datetime, filters: Optional[Dict] = None
    ) -> List[dict]:
        query = {"start_time": {"$gte": start, "$lte": end}, **(filters or {})}
        return await self.db.sessions.find(query, {"_id": 0}).sort("start_time", 1).to_list(None)

    async def vacant_sessions(self, start: datetime, end: datetime) -> List[dict]:
        return await self.db.sessions.find({
            "teacher_id": None,
            "status": {"$in": [SessionStatus.SCHEDULED.value, SessionStatus.IN_PROGRESS.value]},
            "start_time": {"$gte": start, "$lte": end},
        }, {"_id": 0}).sort("start_time", 1).to_list(None)

    async def unlogged_sessions(self, before: datetime, limit: int) -> List[dict]:
        return await self.db.sessions.find({
            "status": SessionStatus.PENDING_LOG.value,
            "end_time": {"$lt": before},
        }, {"_id": 0}).sort("end_time", -1).to_list(limit)

    async def recent_sessions(self, since: datetime, limit: int) -> List[dict]:
        return await self.db.sessions.find(
            {"start_time": {"$gte": since}}, {"_id": 0}
        ).sort("start_time", -1).to_list(limit)

    async def create_sessions_atomic(self, session_docs: List[dict]) -> int:
        """Insert every session or none of them.

        Every class, subject, teacher, chapter and topic a row points at is
        checked inside the transaction, so a single bad row aborts the batch.
        """
        async def check_references(db_session):
            missing = []
            for field, collection in SESSION_REFERENCES:
                ids = {doc[field] for doc in session_docs if doc.get(field)}
                if not ids:
                    continue
                found = await self.db[collection].distinct(
                    "id", {"id": {"$in": sorted(ids)}}, session=db_session
                )
                missing += [f"{field}={value}" for value in sorted(ids - set(found))]
            if missing:
                raise InvalidReferenceError(f"Unknown references: {', '.join(missing)}")

        async def insert(db_session):
            # insert_many adds _id to the dicts it is given
            result = await self.db.sessions.insert_many(
                [dict(doc) for doc in session_docs], ordered=True, session=db_session
            )
            return len(result.inserted_ids)

        _, inserted = await run_in_transaction(self.db, [check_references, insert])
        return inserted

    async def find_session_log(self, session_id: str) -> Optional[dict]:
        return await self.db.session_logs.find_one({"session_id": session_id}, {"_id": 0})

    async def upsert_session_log(self, log: SessionLog):
        data = log.model_dump(exclude={"id", "created_at"})
        return await self.db.session_logs.update_one(
            {"session_id": log.session_id},
            {"$set": data, "$setOnInsert": {"id": log.id, "created_at": log.created_at}},
            upsert=True,
        )
