import pytest
from fastapi import HTTPException
from portal.modules.allocations.schemas import AllocationCreate


async def test_resolve_returns_allocated_teacher(allocation_service):
    resolution = await allocation_service.resolve_teacher("class-10a", "math")
    assert resolution.teacher_id == "t-1"
    assert resolution.teacher_name == "Asha Rao"


async def test_resolve_without_allocation_is_unassigned(allocation_service):
    resolution = await allocation_service.resolve_teacher("class-10a", "science")
    assert resolution.teacher_id is None
    assert resolution.teacher_name == "Unassigned"


async def test_resolve_takes_first_of_duplicate_allocations(allocation_service, allocation_repo):
    allocation_repo.allocations.append(
        {"id": "alloc-2", "teacher_id": "t-2", "class_id": "class-10a", "subject_id": "math"}
    )
    resolution = await allocation_service.resolve_teacher("class-10a", "math")
    assert resolution.teacher_id == "t-1"


async def test_resolve_with_missing_teacher_keeps_id_but_no_name(allocation_service, allocation_repo):
    allocation_repo.allocations.append(
        {"id": "alloc-3", "teacher_id": "gone", "class_id": "class-10a", "subject_id": "science"}
    )
    resolution = await allocation_service.resolve_teacher("class-10a", "science")
    assert resolution.teacher_id == "gone"
    assert resolution.teacher_name == "Unassigned"


async def test_create_allocation_rejects_second_teacher_for_same_pair(allocation_service):
    with pytest.raises(HTTPException) as exc:
        await allocation_service.create_allocation(
            AllocationCreate(teacher_id="t-2", class_id="class-10a", subject_id="math")
        )
    assert exc.value.status_code == 409


async def test_create_allocation_checks_references(allocation_service):
    with pytest.raises(HTTPException) as exc:
        await allocation_service.create_allocation(
            AllocationCreate(teacher_id="t-2", class_id="class-10a", subject_id="art")
        )
    assert exc.value.status_code == 404


async def test_create_allocation_stores_mapping(allocation_service, allocation_repo):
    allocation = await allocation_service.create_allocation(
        AllocationCreate(teacher_id="t-2", class_id="class-10a", subject_id="science")
    )
    assert allocation_repo.allocations[-1]["id"] == allocation.id
    resolution = await allocation_service.resolve_teacher("class-10a", "science")
    assert resolution.teacher_name == "Vikram"
