"""Bulk scheduling: preview a batch of sessions, then commit it atomically."""

import logging
from datetime import date
from typing import Dict, List, Optional
from pymongo.errors import PyMongoError
from portal.core.clock import to_school_time
from portal.modules.sessions.models import Session, SessionStatus
from portal.modules.sessions.repository import SessionRepository, InvalidReferenceError
from portal.modules.sessions.schemas import (
    BulkSessionInput, BulkSessionPreview, BulkPreviewResult, BulkCommitResult,
)
from portal.modules.sessions.utility import generate_session_title, session_end_time
from portal.modules.allocations.service import AllocationService
from portal.modules.teachers.models import UNASSIGNED
from portal.modules.teachers.repository import TeacherRepository


def build_previews(
    inputs: List[BulkSessionInput],
    roster: Dict[str, str],
    today: Optional[date] = None,
) -> List[BulkSessionPreview]:
    """Enrich each input with its title, end time and teacher name.

    Output order and length match ``inputs``. Ids are ``preview-<index>``
    and never correspond to stored sessions.
    """
    previews = []
    for index, item in enumerate(inputs):
        start_time = to_school_time(item.start_time)
        teacher_name = roster.get(item.teacher_id, UNASSIGNED) if item.teacher_id else UNASSIGNED
        previews.append(BulkSessionPreview(
            **item.model_dump(exclude={"start_time"}),
            start_time=start_time,
            id=f"preview-{index}",
            title=generate_session_title(
                start_time, item.board_name, item.class_name,
                item.class_section, item.subject_name, today=today,
            ),
            end_time=session_end_time(start_time, item.duration),
            teacher_name=teacher_name,
        ))
    return previews


def stage_session(item: BulkSessionInput, today: Optional[date] = None) -> Session:
    start_time = to_school_time(item.start_time)
    return Session(
        title=generate_session_title(
            start_time, item.board_name, item.class_name,
            item.class_section, item.subject_name, today=today,
        ),
        start_time=start_time,
        end_time=session_end_time(start_time, item.duration),
        class_id=item.class_id,
        subject_id=item.subject_id,
        chapter_id=item.chapter_id or None,
        topic_id=item.topic_id or None,
        teacher_id=item.teacher_id or None,
        status=SessionStatus.SCHEDULED,
    )


class BulkSessionService:
    def __init__(self,
                 session_repo: SessionRepository,
                 teacher_repo: TeacherRepository,
                 allocation_service: AllocationService
                 ):
        self.session_repo = session_repo
        self.teacher_repo = teacher_repo
        self.allocation_service = allocation_service

    async def assign_teachers(self, inputs: List[BulkSessionInput]) -> List[BulkSessionInput]:
        """Fill in the allocated teacher wherever none was chosen."""
        assigned = []
        for item in inputs:
            if not item.teacher_id:
                resolution = await self.allocation_service.resolve_teacher(item.class_id, item.subject_id)
                item = item.model_copy(update={"teacher_id": resolution.teacher_id})
            assigned.append(item)
        return assigned

    async def preview(
        self, inputs: List[BulkSessionInput], auto_assign_teachers: bool = True
    ) -> BulkPreviewResult:
        try:
            if auto_assign_teachers:
                inputs = await self.assign_teachers(inputs)
            roster = await self.teacher_repo.get_roster(
                {item.teacher_id for item in inputs if item.teacher_id}
            )
            return BulkPreviewResult(success=True, sessions=build_previews(inputs, roster))
        except Exception as e:
            logging.error(f"Error building bulk session preview: {e}")
            return BulkPreviewResult(success=False, error=str(e) or "Failed to build preview")

    async def commit(self, inputs: List[BulkSessionInput]) -> BulkCommitResult:
        if not inputs:
            return BulkCommitResult(success=False, error="No sessions to create")

        try:
            # Titles and end times are recomputed here, never taken from a preview
            staged = [stage_session(item).model_dump() for item in inputs]
            count = await self.session_repo.create_sessions_atomic(staged)
        except InvalidReferenceError as e:
            logging.error(f"Bulk session commit rejected: {e}")
            return BulkCommitResult(success=False, error=str(e))
        except PyMongoError as e:
            logging.error(f"Bulk session commit failed: {e}")
            return BulkCommitResult(success=False, error="Failed to create sessions")
        except Exception as e:
            logging.exception(f"Unexpected error committing bulk sessions: {e}")
            return BulkCommitResult(success=False, error="Failed to create sessions")

        logging.info("Committed %d bulk sessions", count)
        return BulkCommitResult(success=True, count=count)
