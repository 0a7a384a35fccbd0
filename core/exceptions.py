"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理
"""


class DoublesDrawException(Exception):
    """所有抽籤異常的基類"""
    pass


# ============ Roster 驗證異常 ============

class RosterValidationError(DoublesDrawException):
    """名單不符合抽籤條件（訊息會原樣顯示給使用者）"""
    message = "Invalid roster"

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)


class EmptyRosterError(RosterValidationError):
    """名單是空的"""
    message = "Add players to draw the doubles"


class OddRosterError(RosterValidationError):
    """名單人數是奇數"""
    message = "Add an even number of players to draw the doubles"


# ============ Session 相關異常 ============

class SessionNotFound(DoublesDrawException):
    """Session 不存在"""
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")


# ============ Player 相關異常 ============

class PlayerNotFound(DoublesDrawException):
    """名單上沒有這個位置"""
    def __init__(self, index):
        self.index = index
        super().__init__(f"No player at position {index}")
