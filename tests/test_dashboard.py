from datetime import date, datetime, timedelta, timezone
from portal.modules.academics.models import SchoolClass
from portal.modules.calendar.models import CalendarEntry, CalendarEntryType
from portal.modules.dashboard.schemas import (
    SessionDetail, FlagSeverity, FlagType, ActivityType, ConflictType, ScheduleViewType,
)
from portal.modules.dashboard.service import DashboardService
from portal.modules.dashboard.utility import (
    compute_today_stats, build_operational_flags, build_recent_activity, annotate_schedule, class_label,
)
from portal.modules.sessions.models import SessionStatus
from tests.fakes import local
from tests.fakes import FakeCalendarRepository, FakeSessionRepository

NOW = local(2025, 6, 15, 12, 0)
TODAY = date(2025, 6, 15)


def detail(id, start, status=SessionStatus.SCHEDULED, teacher_id="t-1", minutes=60, **extra):
    return SessionDetail(
        id=id,
        title=f"title-{id}",
        start_time=start,
        end_time=start + timedelta(minutes=minutes),
        class_id="class-10a",
        subject_id="math",
        teacher_id=teacher_id,
        status=status,
        class_name="Class 10",
        class_section="A",
        subject_name="Math",
        **extra,
    )

def entry(id, day, type=CalendarEntryType.HOLIDAY, end_date=None, created_at=None):
    return CalendarEntry(
        id=id, date=day, end_date=end_date, type=type, title=f"entry-{id}",
        created_at=created_at or NOW,
    )


def test_dashboard_and_picker_class_labels_differ():
    session = detail("s1", local(2025, 6, 15, 9))
    school_class = SchoolClass(id="class-10a", board_id="board-1", name="Class 10", section="A")

    assert class_label(session) == "Class 10 (A)"
    assert school_class.label == "Class 10 A"
    assert class_label(session.model_copy(update={"class_section": None})) == "Class 10"


def test_calendar_entry_covers_inclusive_range():
    span = entry("e", date(2025, 6, 10), end_date=date(2025, 6, 12))
    assert span.covers(date(2025, 6, 10))
    assert span.covers(date(2025, 6, 12))
    assert not span.covers(date(2025, 6, 13))
    assert entry("single", date(2025, 6, 10)).covers(date(2025, 6, 10))


def test_today_stats_counts_each_bucket():
    sessions = [
        detail("done", local(2025, 6, 15, 8), SessionStatus.COMPLETED),
        detail("live", local(2025, 6, 15, 11, 30), SessionStatus.IN_PROGRESS),
        detail("later", local(2025, 6, 15, 15)),
        detail("missed", local(2025, 6, 15, 9)),
        detail("vacant", local(2025, 6, 15, 16), teacher_id=None),
        detail("cancelled", local(2025, 6, 15, 10), SessionStatus.CANCELLED, teacher_id=None),
    ]
    stats = compute_today_stats(sessions, [], NOW)

    assert stats.total == 6
    assert stats.completed == 1
    assert stats.in_progress == 1
    assert stats.upcoming == 2
    assert stats.at_risk == 1


def test_today_stats_holiday_puts_scheduled_sessions_at_risk():
    sessions = [
        detail("a", local(2025, 6, 15, 15)),
        detail("b", local(2025, 6, 15, 9)),
        detail("done", local(2025, 6, 15, 8), SessionStatus.COMPLETED, teacher_id=None),
    ]
    holiday = entry("h", TODAY)
    event = entry("ev", TODAY, type=CalendarEntryType.SCHOOL_EVENT)

    assert compute_today_stats(sessions, [event], NOW).at_risk == 0
    stats = compute_today_stats(sessions, [holiday], NOW)
    assert stats.at_risk == 2
    assert stats.upcoming == 1


def test_flags_are_ordered_by_severity():
    vacant = [detail("v1", local(2025, 6, 15, 14), teacher_id=None)]
    today_sessions = vacant + [detail("s1", local(2025, 6, 15, 15))]
    unlogged = [
        detail("u1", local(2025, 6, 14, 9), SessionStatus.PENDING_LOG),
        detail("u2", local(2025, 6, 13, 9), SessionStatus.PENDING_LOG),
    ]
    entries = [entry("h", TODAY), entry("x", TODAY, type=CalendarEntryType.EXAM_DAY)]

    flags = build_operational_flags(vacant, today_sessions, entries, unlogged, TODAY)

    assert [f.severity for f in flags] == [
        FlagSeverity.critical, FlagSeverity.warning, FlagSeverity.warning,
        FlagSeverity.info, FlagSeverity.info,
    ]
    assert [f.id for f in flags] == ["vacant-v1", "calendar-h", "calendar-x", "unlogged-u1", "unlogged-u2"]
    assert flags[0].description == "Class 10 (A) - Math"
    assert flags[1].description == '2 session(s) scheduled on "entry-h"'
    assert flags[2].title == "Sessions on EXAM DAY"
    assert flags[3].time == unlogged[0].end_time


def test_calendar_flag_needs_scheduled_sessions_today():
    today_sessions = [detail("done", local(2025, 6, 15, 8), SessionStatus.COMPLETED)]
    flags = build_operational_flags([], today_sessions, [entry("h", TODAY)], [], TODAY)
    assert flags == []


def test_calendar_flag_ignores_non_blocking_entry_types():
    today_sessions = [detail("s", local(2025, 6, 15, 15))]
    entries = [entry("half", TODAY, type=CalendarEntryType.HALF_DAY)]
    assert build_operational_flags([], today_sessions, entries, [], TODAY) == []


def test_recent_activity_classifies_and_sorts():
    sessions = [
        detail("future", local(2025, 6, 15, 18)),
        detail("past", local(2025, 6, 15, 9)),
        detail("cancelled", local(2025, 6, 15, 20), SessionStatus.CANCELLED),
    ]
    entries = [entry("cal", TODAY, created_at=local(2025, 6, 15, 10))]

    activity = build_recent_activity(sessions, entries, NOW, limit=10)

    assert [a.id for a in activity] == [
        "session-cancelled", "session-future", "calendar-cal", "session-past",
    ]
    types = {a.id: a.type for a in activity}
    assert types["session-cancelled"] == ActivityType.SESSION_CANCELLED
    assert types["session-future"] == ActivityType.SESSION_CREATED
    assert types["session-past"] == ActivityType.SESSION_UPDATED
    assert types["calendar-cal"] == ActivityType.CALENDAR_ADDED
    assert activity[2].description == "entry-cal (HOLIDAY)"


def test_recent_activity_truncates_to_limit():
    sessions = [detail(str(i), local(2025, 6, 15, 8 + i)) for i in range(6)]
    activity = build_recent_activity(sessions, [], NOW, limit=3)
    assert [a.entity_id for a in activity] == ["5", "4", "3"]


def test_schedule_missing_teacher_takes_precedence_over_holiday():
    sessions = [
        detail("vacant", local(2025, 6, 15, 9), teacher_id=None),
        detail("holiday", local(2025, 6, 15, 10)),
        detail("exam", local(2025, 6, 17, 10)),
        detail("clear", local(2025, 6, 16, 10)),
    ]
    entries = [
        entry("h", TODAY),
        entry("x", date(2025, 6, 17), type=CalendarEntryType.EXAM_DAY, end_date=date(2025, 6, 18)),
        entry("ev", date(2025, 6, 16), type=CalendarEntryType.SCHOOL_EVENT),
    ]
    schedule = {s.id: s for s in annotate_schedule(sessions, entries)}

    assert schedule["vacant"].conflict_type == ConflictType.NO_TEACHER
    assert schedule["holiday"].conflict_type == ConflictType.HOLIDAY
    assert schedule["exam"].conflict_type == ConflictType.EXAM_DAY
    assert schedule["clear"].conflict_type is None
    assert not schedule["clear"].has_conflict
    assert all(schedule[k].has_conflict for k in ("vacant", "holiday", "exam"))


def test_schedule_uses_school_date_of_session():
    # 20:00 UTC on the 14th is already the 15th on the school clock (UTC+5:30)
    start = datetime(2025, 6, 14, 20, 0, tzinfo=timezone.utc)
    schedule = annotate_schedule([detail("late", start)], [entry("h", TODAY)])
    assert schedule[0].conflict_type == ConflictType.HOLIDAY


def make_service(academics_repo, teacher_repo, sessions, entries):
    return DashboardService(
        session_repo=FakeSessionRepository(sessions=[s.model_dump() for s in sessions]),
        calendar_repo=FakeCalendarRepository(entries),
        academics_repo=academics_repo,
        teacher_repo=teacher_repo,
    )


async def test_service_joins_names_for_flags(academics_repo, teacher_repo):
    sessions = [
        detail("v", local(2025, 6, 15, 14), teacher_id=None),
        detail("yesterday", local(2025, 6, 14, 14), teacher_id=None),
        detail("u", local(2025, 6, 14, 9), SessionStatus.PENDING_LOG),
    ]
    service = make_service(academics_repo, teacher_repo, sessions, [])

    flags = await service.get_operational_flags(now=NOW)

    assert [f.id for f in flags] == ["vacant-v", "unlogged-u"]
    assert flags[0].class_name == "Class 10"
    assert flags[0].subject_name == "Math"


async def test_service_today_stats_only_counts_today(academics_repo, teacher_repo):
    sessions = [
        detail("today", local(2025, 6, 15, 0, 0)),
        detail("late", local(2025, 6, 15, 23, 59)),
        detail("tomorrow", local(2025, 6, 16, 0, 0)),
    ]
    service = make_service(academics_repo, teacher_repo, sessions, [entry("h", TODAY)])

    stats = await service.get_today_stats(now=NOW)
    assert stats.total == 2
    assert stats.at_risk == 2


async def test_service_schedule_filters_by_teacher(academics_repo, teacher_repo):
    sessions = [
        detail("mine", local(2025, 6, 15, 9), teacher_id="t-1"),
        detail("theirs", local(2025, 6, 15, 10), teacher_id="t-2"),
        detail("outside", local(2025, 6, 20, 10), teacher_id="t-1"),
    ]
    service = make_service(academics_repo, teacher_repo, sessions, [])

    schedule = await service.get_schedule(
        ScheduleViewType.teacher, date(2025, 6, 15), date(2025, 6, 16), teacher_id="t-1",
    )
    assert [s.id for s in schedule] == ["mine"]
    assert schedule[0].teacher_name == "Asha Rao"
    assert schedule[0].class_section == "A"


async def test_service_activity_uses_last_day(academics_repo, teacher_repo):
    sessions = [
        detail("recent", local(2025, 6, 15, 9)),
        detail("old", local(2025, 6, 13, 9)),
    ]
    old_entry = entry("old-cal", TODAY, created_at=NOW - timedelta(days=3))
    service = make_service(academics_repo, teacher_repo, sessions, [old_entry])

    activity = await service.get_recent_activities(limit=10, now=NOW)
    assert [a.id for a in activity] == ["session-recent"]
