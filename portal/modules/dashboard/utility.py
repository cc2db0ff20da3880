"""Pure aggregations behind the admin dashboard.

Nothing here touches the database: callers fetch sessions and calendar
entries and pass them in together with the reference time.
"""

from datetime import date, datetime
from typing import Iterable, List
from portal.core.clock import school_date, to_school_time
from portal.modules.calendar.models import CalendarEntry
from portal.modules.sessions.models import SessionStatus
from portal.modules.dashboard.schemas import (
    SessionDetail, TodayStats, OperationalFlag, FlagType, FlagSeverity, SEVERITY_ORDER,
    ActivityItem, ActivityType, ScheduleSession, ConflictType,
)

CLOSED_STATUSES = (SessionStatus.COMPLETED, SessionStatus.CANCELLED)


def class_label(session: SessionDetail) -> str:
    # Flags and activity read "Class 10 (A)"; filter pickers use SchoolClass.label ("Class 10 A")
    if session.class_section:
        return f"{session.class_name} ({session.class_section})"
    return session.class_name

def conflicting_entries(entries: Iterable[CalendarEntry], day: date) -> List[CalendarEntry]:
    return [entry for entry in entries if entry.is_conflict and entry.covers(day)]


def compute_today_stats(
    sessions: List[SessionDetail], entries: List[CalendarEntry], now: datetime
) -> TodayStats:
    # at_risk overlaps with upcoming; the counts are independent, not a partition
    calendar_conflict = bool(conflicting_entries(entries, school_date(now)))

    def at_risk(session: SessionDetail) -> bool:
        vacant = session.teacher_id is None and session.status not in CLOSED_STATUSES
        blocked = calendar_conflict and session.status == SessionStatus.SCHEDULED
        return vacant or blocked

    return TodayStats(
        total=len(sessions),
        completed=sum(1 for s in sessions if s.status == SessionStatus.COMPLETED),
        in_progress=sum(1 for s in sessions if s.status == SessionStatus.IN_PROGRESS),
        upcoming=sum(1 for s in sessions if s.status == SessionStatus.SCHEDULED and s.start_time > now),
        at_risk=sum(1 for s in sessions if at_risk(s)),
    )


def build_operational_flags(
    vacant_sessions: List[SessionDetail],
    today_sessions: List[SessionDetail],
    entries: List[CalendarEntry],
    unlogged_sessions: List[SessionDetail],
    today: date,
) -> List[OperationalFlag]:
    flags = []

    for session in vacant_sessions:
        flags.append(OperationalFlag(
            id=f"vacant-{session.id}",
            type=FlagType.VACANT_SESSION,
            severity=FlagSeverity.critical,
            title="No Teacher Assigned",
            description=f"{class_label(session)} - {session.subject_name}",
            entity_id=session.id,
            time=session.start_time,
            class_name=session.class_name,
            subject_name=session.subject_name,
        ))

    scheduled_today = sum(1 for s in today_sessions if s.status == SessionStatus.SCHEDULED)
    if scheduled_today > 0:
        for entry in conflicting_entries(entries, today):
            flags.append(OperationalFlag(
                id=f"calendar-{entry.id}",
                type=FlagType.CALENDAR_CONFLICT,
                severity=FlagSeverity.warning,
                title=f"Sessions on {entry.type.replace('_', ' ')}",
                description=f'{scheduled_today} session(s) scheduled on "{entry.title}"',
                entity_id=entry.id,
            ))

    for session in unlogged_sessions:
        flags.append(OperationalFlag(
            id=f"unlogged-{session.id}",
            type=FlagType.UNLOGGED_SESSION,
            severity=FlagSeverity.info,
            title="Session Pending Log",
            description=f"{class_label(session)} - {session.subject_name}",
            entity_id=session.id,
            time=session.end_time,
            class_name=session.class_name,
            subject_name=session.subject_name,
        ))

    # sorted() is stable, so flags of equal severity keep their source order
    return sorted(flags, key=lambda flag: SEVERITY_ORDER[flag.severity])


def build_recent_activity(
    sessions: List[SessionDetail],
    entries: List[CalendarEntry],
    now: datetime,
    limit: int,
) -> List[ActivityItem]:
    activities = []

    for session in sessions:
        if session.status == SessionStatus.CANCELLED:
            kind, title = ActivityType.SESSION_CANCELLED, "Session Cancelled"
        elif session.start_time > now:
            kind, title = ActivityType.SESSION_CREATED, "Session Scheduled"
        else:
            kind, title = ActivityType.SESSION_UPDATED, "Session Completed"
        activities.append(ActivityItem(
            id=f"session-{session.id}",
            type=kind,
            title=title,
            description=f"{session.title} - {class_label(session)}",
            timestamp=session.start_time,
            entity_id=session.id,
        ))

    for entry in entries:
        activities.append(ActivityItem(
            id=f"calendar-{entry.id}",
            type=ActivityType.CALENDAR_ADDED,
            title="Calendar Entry Added",
            description=f"{entry.title} ({entry.type.replace('_', ' ')})",
            timestamp=entry.created_at,
            entity_id=entry.id,
        ))

    activities.sort(key=lambda item: item.timestamp, reverse=True)
    return activities[:limit]


def annotate_schedule(
    sessions: List[SessionDetail], entries: List[CalendarEntry]
) -> List[ScheduleSession]:
    """Attach one conflict reason per session; a missing teacher wins."""
    schedule = []
    for session in sessions:
        conflict_type = None
        if not session.teacher_id:
            conflict_type = ConflictType.NO_TEACHER
        else:
            clashes = conflicting_entries(entries, to_school_time(session.start_time).date())
            if clashes:
                conflict_type = ConflictType(clashes[0].type)

        schedule.append(ScheduleSession(
            id=session.id,
            title=session.title,
            start_time=session.start_time,
            end_time=session.end_time,
            status=session.status,
            class_name=session.class_name,
            class_section=session.class_section,
            subject_name=session.subject_name,
            teacher_name=session.teacher_name,
            teacher_id=session.teacher_id,
            has_conflict=conflict_type is not None,
            conflict_type=conflict_type,
        ))
    return schedule
