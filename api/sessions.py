"""
Session API Endpoints

職責：
1. 建立 Session
2. 查詢 Session 目前的畫面狀態
3. 刪除 Session
"""
from fastapi import APIRouter, HTTPException, Response
import logging

from schemas import SessionResponse
from core.session_manager import SessionManager
from core.exceptions import SessionNotFound

router = APIRouter(prefix="/api/sessions", tags=["sessions"])
logger = logging.getLogger(__name__)


@router.post("", response_model=SessionResponse, status_code=201)
def create_session():
    """建立新的空白 Session，前端之後都用返回的 session_id 操作"""
    try:
        session = SessionManager.create_session()
        return SessionResponse.from_session(session)

    except Exception as e:
        logger.error(f"Failed to create session: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str):
    try:
        session = SessionManager.get_session(session_id)
        return SessionResponse.from_session(session)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str):
    try:
        SessionManager.delete_session(session_id)
        return Response(status_code=204)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
