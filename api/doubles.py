"""
Doubles API Endpoints

重點：
1. 抽籤失敗（名單空的、人數奇數）回 200，錯誤訊息放在 error 欄位
2. 有錯誤訊息時 doubles 一律是空的
"""
from fastapi import APIRouter, HTTPException
import logging

from schemas import SessionResponse
from core.session_manager import SessionManager
from core.exceptions import SessionNotFound

router = APIRouter(prefix="/api/sessions", tags=["doubles"])
logger = logging.getLogger(__name__)


@router.post("/{session_id}/doubles", response_model=SessionResponse)
def draw_doubles(session_id: str):
    """
    對目前名單抽籤

    返回：
        - doubles: 抽出的隊伍（每次抽籤都會取代上一次的結果）
        - error: 名單不符合條件時的訊息，原樣顯示給使用者
    """
    try:
        session = SessionManager.draw(session_id)
        return SessionResponse.from_session(session)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    except Exception as e:
        logger.error(f"Failed to draw doubles: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{session_id}/doubles", response_model=SessionResponse)
def get_doubles(session_id: str):
    try:
        session = SessionManager.get_session(session_id)
        return SessionResponse.from_session(session)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
