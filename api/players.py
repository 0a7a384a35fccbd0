"""
Player API Endpoints

職責：
1. 把玩家加入名單
2. 從名單移除玩家
"""
from fastapi import APIRouter, HTTPException
import logging

from schemas import PlayerAdd, SessionResponse
from core.session_manager import SessionManager
from core.exceptions import SessionNotFound, PlayerNotFound

router = APIRouter(prefix="/api/sessions", tags=["players"])
logger = logging.getLogger(__name__)


@router.post("/{session_id}/players", response_model=SessionResponse)
def add_player(session_id: str, player_data: PlayerAdd):
    """
    加入玩家

    流程：
    1. 找到 Session
    2. 名稱正規化後加到名單最前面
    3. 返回更新後的名單

    注意：
    - 空白名稱和重複名稱不會報錯，名單維持原樣
    """
    try:
        session = SessionManager.add_player(session_id, player_data.name)
        return SessionResponse.from_session(session)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    except Exception as e:
        logger.error(f"Failed to add player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/{session_id}/players/{index}", response_model=SessionResponse)
def remove_player(session_id: str, index: int):
    """
    移除名單上第 index 位玩家（0 起算，依目前名單顯示順序）
    """
    try:
        session = SessionManager.remove_player(session_id, index)
        return SessionResponse.from_session(session)

    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    except PlayerNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to remove player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
