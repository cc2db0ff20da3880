from fastapi import HTTPException
from typing import List, Optional
from datetime import date, datetime, timedelta
from portal.core import clock
from portal.core.config import UNLOGGED_FLAG_LIMIT, RECENT_CALENDAR_LIMIT, ACTIVITY_LIMIT
from portal.modules.sessions.repository import SessionRepository
from portal.modules.calendar.repository import CalendarRepository
from portal.modules.calendar.models import CalendarEntry
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.teachers.repository import TeacherRepository
from portal.modules.dashboard.schemas import (
    SessionDetail, TodayStats, OperationalFlag, ActivityItem, ScheduleSession, ScheduleViewType,
)
from portal.modules.dashboard.utility import (
    compute_today_stats, build_operational_flags, build_recent_activity, annotate_schedule,
)


class DashboardService:
    def __init__(self,
                 session_repo: SessionRepository,
                 calendar_repo: CalendarRepository,
                 academics_repo: AcademicsRepository,
                 teacher_repo: TeacherRepository
                 ):
        self.session_repo = session_repo
        self.calendar_repo = calendar_repo
        self.academics_repo = academics_repo
        self.teacher_repo = teacher_repo

    async def _with_details(self, docs: List[dict]) -> List[SessionDetail]:
        if not docs:
            return []

        classes = {c["id"]: c for c in await self.academics_repo.find_classes({d["class_id"] for d in docs})}
        subjects = {s["id"]: s for s in await self.academics_repo.find_subjects({d["subject_id"] for d in docs})}
        roster = await self.teacher_repo.get_roster({d["teacher_id"] for d in docs if d.get("teacher_id")})

        details = []
        for doc in docs:
            school_class = classes.get(doc["class_id"], {})
            details.append(SessionDetail(**{
                **doc,
                "class_name": school_class.get("name", "Unknown class"),
                "class_section": school_class.get("section"),
                "subject_name": subjects.get(doc["subject_id"], {}).get("name", "Unknown subject"),
                "teacher_name": roster.get(doc.get("teacher_id")),
            }))
        return details

    async def _calendar_entries(self, start: date, end: date) -> List[CalendarEntry]:
        return [CalendarEntry(**doc) for doc in await self.calendar_repo.entries_in_range(start, end)]

    async def get_today_stats(self, now: Optional[datetime] = None) -> TodayStats:
        now = now or clock.now()
        today = clock.school_date(now)
        start, end = clock.day_bounds(today)

        sessions = await self._with_details(await self.session_repo.sessions_in_range(start, end))
        entries = await self._calendar_entries(today, today)
        return compute_today_stats(sessions, entries, now)

    async def get_operational_flags(self, now: Optional[datetime] = None) -> List[OperationalFlag]:
        now = now or clock.now()
        today = clock.school_date(now)
        start, end = clock.day_bounds(today)

        vacant = await self._with_details(await self.session_repo.vacant_sessions(start, end))
        today_sessions = await self._with_details(await self.session_repo.sessions_in_range(start, end))
        entries = await self._calendar_entries(today, today)
        unlogged = await self._with_details(
            await self.session_repo.unlogged_sessions(now, UNLOGGED_FLAG_LIMIT)
        )
        return build_operational_flags(vacant, today_sessions, entries, unlogged, today)

    async def get_recent_activities(
        self, limit: int = ACTIVITY_LIMIT, now: Optional[datetime] = None
    ) -> List[ActivityItem]:
        now = now or clock.now()
        since = now - timedelta(days=1)

        sessions = await self._with_details(await self.session_repo.recent_sessions(since, limit))
        entries = [
            CalendarEntry(**doc)
            for doc in await self.calendar_repo.recent_entries(since, RECENT_CALENDAR_LIMIT)
        ]
        return build_recent_activity(sessions, entries, now, limit)

    async def get_schedule(
        self,
        view_type: ScheduleViewType,
        start_date: date,
        end_date: date,
        teacher_id: Optional[str] = None,
        class_id: Optional[str] = None,
    ) -> List[ScheduleSession]:
        if end_date < start_date:
            raise HTTPException(status_code=400, detail="End date must be after start date")

        filters = {}
        if view_type == ScheduleViewType.teacher and teacher_id:
            filters["teacher_id"] = teacher_id
        elif view_type == ScheduleViewType.class_ and class_id:
            filters["class_id"] = class_id

        range_start, _ = clock.day_bounds(start_date)
        _, range_end = clock.day_bounds(end_date)
        sessions = await self._with_details(
            await self.session_repo.sessions_in_range(range_start, range_end, filters)
        )
        entries = await self._calendar_entries(start_date, end_date)
        return annotate_schedule(sessions, entries)
