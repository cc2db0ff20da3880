import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from pymongo.errors import OperationFailure
from portal.modules.auth.utility import verify_password
from portal.modules.students.models import StudentProfile
from portal.modules.students.repository import StudentRepository
from portal.modules.students.schemas import StudentCreate
from portal.modules.students.service import StudentService
from portal.modules.users.models import User, UserRole
from tests.fakes import FakeCollection, FakeDatabase, FakeStudentRepository


@pytest.fixture
def student_repo():
    return FakeStudentRepository()

@pytest.fixture
def student_service(student_repo, academics_repo):
    return StudentService(student_repo, academics_repo)

def enrolment(**overrides):
    data = {
        "name": "Meera Nair",
        "email": "meera@springfield-high.edu",
        "password": "first-day-2025",
        "class_id": "class-10a",
        "parent_phone": "+91 98450 12345",
    }
    data.update(overrides)
    return StudentCreate(**data)


async def test_create_student_makes_a_student_account(student_service, student_repo):
    student = await student_service.create_student(enrolment())

    assert student.class_name == "Class 10 A"
    user = student_repo.users[0]
    assert user["role"] == UserRole.student.value
    assert user["id"] == student.user_id
    assert verify_password("first-day-2025", user["hashed_password"])
    assert student_repo.profiles[0]["parent_phone"] == "+91 98450 12345"


async def test_create_student_needs_existing_class(student_service, student_repo):
    with pytest.raises(HTTPException) as exc:
        await student_service.create_student(enrolment(class_id="class-99"))
    assert exc.value.status_code == 404
    assert student_repo.users == []


async def test_duplicate_email_conflicts(student_service):
    await student_service.create_student(enrolment())
    with pytest.raises(HTTPException) as exc:
        await student_service.create_student(enrolment(name="Someone Else"))
    assert exc.value.status_code == 409


def test_short_password_is_rejected():
    with pytest.raises(ValidationError):
        enrolment(password="short")


async def test_list_students_joins_names_and_filters_by_class(student_service, academics_repo):
    academics_repo.classes.append({"id": "class-9b", "board_id": "board-1", "name": "Class 9", "section": "B"})
    await student_service.create_student(enrolment())
    await student_service.create_student(
        enrolment(name="Arjun Das", email="arjun@springfield-high.edu", class_id="class-9b"),
    )

    everyone = await student_service.list_students()
    assert {s.name for s in everyone} == {"Meera Nair", "Arjun Das"}

    tenth = await student_service.list_students("class-10a")
    assert [(s.name, s.email, s.class_name) for s in tenth] == [
        ("Meera Nair", "meera@springfield-high.edu", "Class 10 A"),
    ]


async def test_delete_student_removes_account(student_service, student_repo):
    student = await student_service.create_student(enrolment())
    await student_service.delete_student(student.id)

    assert student_repo.profiles == []
    assert student_repo.users == []

    with pytest.raises(HTTPException) as exc:
        await student_service.delete_student(student.id)
    assert exc.value.status_code == 404


def account_and_profile():
    user = User(name="Meera Nair", email="meera@springfield-high.edu", role=UserRole.student,
                hashed_password="x")
    return user, StudentProfile(user_id=user.id, class_id="class-10a")


async def test_repository_writes_account_and_profile_together():
    db = FakeDatabase(users=FakeCollection(), student_profiles=FakeCollection())
    user, profile = account_and_profile()

    await StudentRepository(db).create_student(user, profile)

    assert [u["id"] for u in db.users.docs] == [user.id]
    assert [p["user_id"] for p in db.student_profiles.docs] == [user.id]
    assert db.client.outcomes == ["committed"]


async def test_repository_failed_profile_leaves_no_orphan_account():
    db = FakeDatabase(users=FakeCollection(), student_profiles=FakeCollection(fail_at=0))
    user, profile = account_and_profile()

    with pytest.raises(OperationFailure):
        await StudentRepository(db).create_student(user, profile)

    assert db.users.docs == []
    assert db.client.outcomes == ["aborted"]


async def test_repository_deletes_profile_and_account():
    user, profile = account_and_profile()
    db = FakeDatabase(
        users=FakeCollection([user.model_dump()]),
        student_profiles=FakeCollection([profile.model_dump()]),
    )

    result = await StudentRepository(db).delete_student(profile.model_dump())

    assert result.deleted_count == 1
    assert db.users.docs == []
    assert db.student_profiles.docs == []
