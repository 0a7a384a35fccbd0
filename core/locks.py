"""
並發控制工具

FastAPI 的同步 endpoint 跑在 threadpool 上，同一時間可能有多個請求
操作同一份 in-memory 狀態，這裡提供 process 內的鎖來防止競態條件（Race Condition）

- sessions_lock：保護 Session 儲存（建立、淘汰、刪除、查詢）
- with_session_lock：保護單一 Session 的名單與抽籤結果
"""
import threading

from models import DrawSession

sessions_lock = threading.RLock()


def with_session_lock(session: DrawSession) -> threading.Lock:
    """
    鎖定一個 Session

    使用場景：
    - 先檢查名單再修改名單時（例如檢查 index 後移除玩家）
    - 抽籤並寫回結果時

    範例：
        session = SessionManager.get_session(session_id)
        with with_session_lock(session):
            if not 0 <= index < len(session.roster):
                raise PlayerNotFound(index)
            session.roster.remove(index)

    注意：
        - 不可重入，鎖內不要再呼叫會取同一把鎖的方法
        - 不要在持有 Session 鎖時去取 sessions_lock（避免 deadlock）
    """
    return session.lock
