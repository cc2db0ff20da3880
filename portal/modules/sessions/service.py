from fastapi import HTTPException
from typing import Dict
import logging
from portal.core.clock import to_school_time
from portal.modules.sessions.repository import SessionRepository
from portal.modules.sessions.models import Session, SessionLog, SessionStatus
from portal.modules.sessions.schemas import SessionCreate, SessionUpdate, SessionLogCreate
from portal.modules.academics.repository import AcademicsRepository


class SessionService:
    def __init__(self,
                 session_repo: SessionRepository,
                 academics_repo: AcademicsRepository
                 ):
        self.session_repo = session_repo
        self.academics_repo = academics_repo

    async def _get_or_404(self, session_id: str) -> Session:
        doc = await self.session_repo.find_session(session_id)
        if not doc:
            raise HTTPException(status_code=404, detail="Session not found.")
        return Session(**doc)

    async def _check_references(self, class_id: str, subject_id: str):
        if not await self.academics_repo.find_class(class_id):
            raise HTTPException(status_code=404, detail="Class not found")
        if not await self.academics_repo.find_subject(subject_id):
            raise HTTPException(status_code=404, detail="Subject not found")

    async def list_sessions(self, limit: int = 100):
        return await self.session_repo.list_sessions(limit)

    async def get_session(self, session_id: str) -> Dict:
        session = await self._get_or_404(session_id)
        log = await self.session_repo.find_session_log(session_id)
        return {**session.model_dump(), "session_log": log}

    async def create_session(self, data: SessionCreate) -> Session:
        await self._check_references(data.class_id, data.subject_id)

        session = Session(
            **data.model_dump(exclude={"start_time", "end_time"}),
            start_time=to_school_time(data.start_time),
            end_time=to_school_time(data.end_time),
            status=SessionStatus.SCHEDULED,
        )
        await self.session_repo.add_session(session.model_dump())
        return session

    async def update_session(self, session_id: str, data: SessionUpdate) -> Session:
        existing = await self._get_or_404(session_id)
        await self._check_references(data.class_id, data.subject_id)

        update = data.model_dump(exclude={"start_time", "end_time", "status", "teacher_id"})
        update["start_time"] = to_school_time(data.start_time)
        update["end_time"] = to_school_time(data.end_time)
        if data.teacher_id:
            update["teacher_id"] = data.teacher_id
        if data.status is not None:
            update["status"] = data.status.value
        await self.session_repo.update_session(session_id, update)
        return existing.model_copy(update=update)

    async def delete_session(self, session_id: str):
        result = await self.session_repo.delete_session(session_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Session not found.")
        return {"message": "Session deleted"}

    async def start_session(self, session_id: str):
        session = await self._get_or_404(session_id)
        if session.status != SessionStatus.SCHEDULED:
            raise HTTPException(status_code=400, detail="Only scheduled sessions can be started.")

        await self.session_repo.update_session(session_id, {"status": SessionStatus.IN_PROGRESS.value})
        return {"message": "Session started"}

    async def end_session(self, session_id: str):
        session = await self._get_or_404(session_id)
        if session.status != SessionStatus.IN_PROGRESS:
            raise HTTPException(status_code=400, detail="Only in-progress sessions can be ended.")

        # A teacher log is still required before the session counts as completed
        await self.session_repo.update_session(session_id, {"status": SessionStatus.PENDING_LOG.value})
        return {"message": "Session ended"}

    async def submit_session_log(self, session_id: str, data: SessionLogCreate):
        session = await self._get_or_404(session_id)
        if session.status == SessionStatus.CANCELLED:
            raise HTTPException(status_code=400, detail="Cannot log a cancelled session.")

        log = SessionLog(session_id=session_id, **data.model_dump())
        await self.session_repo.upsert_session_log(log)
        await self.session_repo.update_session(session_id, {"status": SessionStatus.COMPLETED.value})
        logging.info("Session %s logged by teacher %s", session_id, data.teacher_id)
        return {"message": "Session log submitted"}

    async def cancel_session(self, session_id: str, reason=None):
        session = await self._get_or_404(session_id)
        if session.status == SessionStatus.COMPLETED:
            raise HTTPException(status_code=400, detail="Cannot cancel a completed session.")

        description = session.description
        if reason:
            description = f"[CANCELLED] {reason}\n\n{session.description or ''}"

        await self.session_repo.update_session(session_id, {
            "status": SessionStatus.CANCELLED.value,
            "description": description,
        })
        return {"message": "Session cancelled"}
