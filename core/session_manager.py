"""
Session Manager：管理 DrawSession 的完整生命週期

職責：
1. 建立 / 查詢 / 刪除 Session
2. 把使用者動作（加入、移除、抽籤）轉交給 Roster 和抽籤服務
3. 把抽籤結果或錯誤訊息存回 Session

原則：
- 名單與抽籤邏輯不在這裡，這裡只負責狀態
- 抽籤失敗是正常狀態（使用者修正名單後再抽），不是例外
- Session 儲存的讀寫都在 sessions_lock 內，單一 Session 的「檢查再修改」都在該 Session 的鎖內
"""
import random
import logging

from config import get_settings
from models import DrawSession
from core.locks import sessions_lock, with_session_lock
from core.exceptions import (
    SessionNotFound,
    PlayerNotFound,
    RosterValidationError
)
from services.doubles_service import draw_doubles
from services.naming_service import generate_session_code

logger = logging.getLogger(__name__)

# 全域狀態（in-memory，process 結束就消失），讀寫前必須持有 sessions_lock
_sessions: dict[str, DrawSession] = {}


class SessionManager:
    """DrawSession 生命週期管理器"""

    @staticmethod
    def create_session() -> DrawSession:
        """
        建立新的空白 Session

        流程：
        1. 生成唯一的 session 代碼
        2. 超過容量時淘汰最舊的 Session
        3. 建立 Session（設定 seed 時用固定 seed 的亂數產生器）

        注意：
            - 三個步驟都在同一把鎖內，並發建立時代碼不會重複、淘汰不會重複刪除
        """
        settings = get_settings()

        with sessions_lock:
            # 1. 生成唯一的 session 代碼
            code = generate_session_code()
            while code in _sessions:
                code = generate_session_code()
                logger.warning(f"Session code collision detected, regenerating: {code}")

            # 2. 容量控制（dict 保留插入順序，第一個就是最舊的）
            while _sessions and len(_sessions) >= settings.max_sessions:
                oldest = next(iter(_sessions))
                _sessions.pop(oldest, None)
                logger.info(f"Evicted session {oldest} (limit {settings.max_sessions})")

            # 3. 建立 Session
            session = DrawSession(id=code, rng=random.Random(settings.random_seed))
            _sessions[code] = session

        logger.info(f"Created session {code}")
        return session

    @staticmethod
    def get_session(session_id: str) -> DrawSession:
        """
        異常：
            SessionNotFound: Session 不存在
        """
        with sessions_lock:
            session = _sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    @staticmethod
    def delete_session(session_id: str) -> None:
        with sessions_lock:
            removed = _sessions.pop(session_id, None)
        if removed is None:
            raise SessionNotFound(session_id)
        logger.info(f"Deleted session {session_id}")

    @staticmethod
    def add_player(session_id: str, name: str) -> DrawSession:
        """
        加入玩家（空白和重複的名稱會被默默忽略）

        異常：
            SessionNotFound: Session 不存在
        """
        session = SessionManager.get_session(session_id)
        with with_session_lock(session):
            if session.roster.add(name):
                logger.info(f"Session {session_id}: added player {session.roster.names[0]}")
        return session

    @staticmethod
    def remove_player(session_id: str, index: int) -> DrawSession:
        """
        移除名單上第 index 位玩家

        異常：
            SessionNotFound: Session 不存在
            PlayerNotFound: index 不在名單範圍內
        """
        session = SessionManager.get_session(session_id)

        with with_session_lock(session):
            if not 0 <= index < len(session.roster):
                raise PlayerNotFound(index)

            name = session.roster.names[index]
            session.roster.remove(index)

        logger.info(f"Session {session_id}: removed player {name}")
        return session

    @staticmethod
    def draw(session_id: str) -> DrawSession:
        """
        對目前名單抽籤

        流程：
        1. 取名單快照交給抽籤服務
        2. 成功：存下隊伍並清掉錯誤訊息
        3. 失敗：只存錯誤訊息，名單和上一次的隊伍都不動

        異常：
            SessionNotFound: Session 不存在
        """
        session = SessionManager.get_session(session_id)

        with with_session_lock(session):
            try:
                doubles = draw_doubles(session.roster.names, session.rng)
            except RosterValidationError as e:
                session.error = e.message
                logger.info(f"Session {session_id}: draw rejected ({e.message})")
                return session

            session.doubles = doubles
            session.error = None

        logger.info(f"Session {session_id}: drew {len(doubles)} doubles")
        return session

    @staticmethod
    def session_count() -> int:
        with sessions_lock:
            return len(_sessions)

    @staticmethod
    def reset() -> None:
        """清空所有 Session（測試和關機時使用）"""
        with sessions_lock:
            _sessions.clear()
