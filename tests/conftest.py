import pytest
from datetime import datetime
from portal.modules.allocations.service import AllocationService
from portal.modules.sessions.bulk_service import BulkSessionService
from portal.modules.sessions.schemas import BulkSessionInput
from tests.fakes import (
    FakeAcademicsRepository, FakeAllocationRepository, FakeSessionRepository,
    FakeTeacherRepository,
)


@pytest.fixture
def academics_repo():
    return FakeAcademicsRepository(
        boards=[{"id": "board-1", "name": "CBSE"}],
        classes=[{"id": "class-10a", "board_id": "board-1", "name": "Class 10", "section": "A"}],
        subjects=[
            {"id": "math", "class_id": "class-10a", "name": "Math"},
            {"id": "science", "class_id": "class-10a", "name": "Science"},
        ],
        chapters=[{"id": "ch-1", "subject_id": "math", "name": "Algebra"}],
        topics=[{"id": "tp-1", "chapter_id": "ch-1", "name": "Quadratics", "description": None}],
    )

@pytest.fixture
def teacher_repo():
    return FakeTeacherRepository([
        {"id": "t-1", "first_name": "Asha", "last_name": "Rao"},
        {"id": "t-2", "first_name": "Vikram", "last_name": None},
    ])

@pytest.fixture
def allocation_repo():
    return FakeAllocationRepository([
        {"id": "alloc-1", "teacher_id": "t-1", "class_id": "class-10a", "subject_id": "math"},
    ])

@pytest.fixture
def session_repo():
    return FakeSessionRepository(
        class_ids={"class-10a"}, subject_ids={"math", "science"}, teacher_ids={"t-1", "t-2"},
    )

@pytest.fixture
def allocation_service(allocation_repo, teacher_repo, academics_repo):
    return AllocationService(allocation_repo, teacher_repo, academics_repo)

@pytest.fixture
def bulk_service(session_repo, teacher_repo, allocation_service):
    return BulkSessionService(session_repo, teacher_repo, allocation_service)

@pytest.fixture
def make_input():
    def factory(**overrides) -> BulkSessionInput:
        data = {
            "start_time": datetime(2025, 6, 15, 9, 5),
            "duration": 45,
            "class_id": "class-10a",
            "subject_id": "math",
            "board_name": "CBSE",
            "class_name": "Class 10",
            "class_section": "A",
            "subject_name": "Math",
        }
        data.update(overrides)
        return BulkSessionInput(**data)
    return factory
