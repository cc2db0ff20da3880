import logging
from contextlib import asynccontextmanager
from typing import Any, Awaitable, Callable, List
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from portal.core.config import MONGODB_URL, DATABASE_NAME


class MongoDB:
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

mongodb = MongoDB()

async def connect_to_mongo():
    mongodb.client = AsyncIOMotorClient(MONGODB_URL, tz_aware=True)
    mongodb.db = mongodb.client[DATABASE_NAME]

    # Test connection
    await mongodb.client.admin.command("ping")
    await create_indexes(mongodb.db)
    logging.info("MongoDB connected (%s)", DATABASE_NAME)

async def close_mongo_connection():
    if mongodb.client is not None:
        mongodb.client.close()
    mongodb.client = None
    mongodb.db = None
    logging.info("MongoDB disconnected")

async def create_indexes(db: AsyncIOMotorDatabase):
    await db.users.create_index("email", unique=True)
    await db.boards.create_index("name", unique=True)
    # At most one teacher per (class, subject)
    await db.teacher_allocations.create_index(
        [("class_id", ASCENDING), ("subject_id", ASCENDING)], unique=True
    )
    await db.sessions.create_index([("start_time", DESCENDING)])
    await db.sessions.create_index([("status", ASCENDING), ("end_time", DESCENDING)])
    await db.session_logs.create_index("session_id", unique=True)
    await db.academic_calendar.create_index([("date", ASCENDING)])
    await db.student_profiles.create_index("user_id", unique=True)
    await db.student_profiles.create_index([("class_id", ASCENDING)])
    await db.resources.create_index([("class_id", ASCENDING), ("subject_id", ASCENDING)])

def get_database() -> AsyncIOMotorDatabase:
    if mongodb.db is None:
        raise RuntimeError("Database is not connected")
    return mongodb.db


@asynccontextmanager
async def transaction(db: AsyncIOMotorDatabase):
    """Yield a client session bound to an open transaction.

    The transaction commits when the block exits normally and aborts when
    it raises, so writes made with the yielded session are all-or-nothing.
    """
    async with await db.client.start_session() as db_session:
        async with db_session.start_transaction():
            yield db_session


async def run_in_transaction(
    db: AsyncIOMotorDatabase,
    operations: List[Callable[[Any], Awaitable[Any]]],
) -> List[Any]:
    """Run each operation with the same transactional session, in order."""
    results = []
    async with transaction(db) as db_session:
        for operation in operations:
            results.append(await operation(db_session))
    return results
