from fastapi import APIRouter, Depends
from typing import Dict
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.sessions.schemas import (
    SessionCreate, SessionUpdate, SessionCancel, SessionLogCreate,
    BulkPreviewRequest, BulkCommitRequest, BulkPreviewResult, BulkCommitResult,
)
from portal.modules.sessions.service import SessionService
from portal.modules.sessions.bulk_service import BulkSessionService
from portal.modules.sessions.dependencies import get_session_service, get_bulk_session_service

session_router = APIRouter(prefix="/sessions", tags=["Sessions"])

@session_router.post("/bulk/preview", response_model=BulkPreviewResult)
async def preview_bulk_sessions(
    data: BulkPreviewRequest,
    current_user: Dict = Depends(require_roles("admin")),
    bulk_service: BulkSessionService = Depends(get_bulk_session_service)
    ):
    return await bulk_service.preview(data.sessions, data.auto_assign_teachers)

@session_router.post("/bulk/commit", response_model=BulkCommitResult)
async def commit_bulk_sessions(
    data: BulkCommitRequest,
    current_user: Dict = Depends(require_roles("admin")),
    bulk_service: BulkSessionService = Depends(get_bulk_session_service)
    ):
    return await bulk_service.commit(data.sessions)

@session_router.get("/")
async def list_sessions(
    limit: int = 100,
    current_user: Dict = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.list_sessions(limit)

@session_router.post("/", status_code=201)
async def create_session(
    data: SessionCreate,
    current_user: Dict = Depends(require_roles("admin")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.create_session(data)

@session_router.get("/{session_id}")
async def get_session(
    session_id: str,
    current_user: Dict = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.get_session(session_id)

@session_router.put("/{session_id}")
async def update_session(
    session_id: str,
    data: SessionUpdate,
    current_user: Dict = Depends(require_roles("admin")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.update_session(session_id, data)

@session_router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.delete_session(session_id)

@session_router.post("/{session_id}/start")
async def start_session(
    session_id: str,
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.start_session(session_id)

@session_router.post("/{session_id}/end")
async def end_session(
    session_id: str,
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.end_session(session_id)

@session_router.post("/{session_id}/log")
async def submit_session_log(
    session_id: str,
    data: SessionLogCreate,
    current_user: Dict = Depends(require_roles("admin", "teacher")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.submit_session_log(session_id, data)

@session_router.post("/{session_id}/cancel")
async def cancel_session(
    session_id: str,
    data: SessionCancel,
    current_user: Dict = Depends(require_roles("admin")),
    session_service: SessionService = Depends(get_session_service)
    ):
    return await session_service.cancel_session(session_id, data.reason)
