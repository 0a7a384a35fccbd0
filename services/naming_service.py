"""
命名服務：生成 Session Code 和正規化玩家名稱

純計算邏輯，不涉及狀態轉換
"""
import random
import string


def generate_session_code() -> str:
    """
    生成隨機的 6 位大寫字母 session 代碼

    範例：ABCDEF, XYZABC

    注意：
    - 不檢查唯一性（由呼叫者負責）
    - 26^6 = 308,915,776 種可能，碰撞機率極低
    """
    return ''.join(random.choices(string.ascii_uppercase, k=6))


def normalize_player_name(raw_name: str) -> str:
    """
    正規化玩家名稱（顯示和判斷重複都用這個結果）

    範例：
        normalize_player_name("ana")     -> "ANA"
        normalize_player_name("  Bo ")   -> "BO"
        normalize_player_name("   ")     -> ""

    注意：
    - 只去頭尾空白並用 str.upper() 轉大寫，不處理重音符號（JOSÉ 和 JOSE 是不同名稱）
    - 返回空字串表示這個輸入應該被忽略
    """
    return raw_name.strip().upper()
