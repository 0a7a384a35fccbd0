"""
抽籤服務：把名單隨機分成兩兩一組的雙打隊伍

純計算邏輯，不修改傳入的名單，也不記得上一次的抽籤結果
"""
import random
from typing import List, Optional, Sequence, Tuple

from core.exceptions import EmptyRosterError, OddRosterError

Pair = Tuple[str, str]


def draw_doubles(names: Sequence[str], rng: Optional[random.Random] = None) -> List[Pair]:
    """
    隨機抽出雙打隊伍

    前置條件（依序檢查，任何亂數都還沒用到）：
    1. 名單不可為空
    2. 名單人數必須是偶數

    流程：
    1. 複製名單成抽籤池
    2. 每一組從池中隨機抽一人當第一位、再從剩下的池中隨機抽一人當第二位
    3. 每抽走一人池子就少一人，下一次抽的範圍也跟著縮小
    4. 池子抽完就回傳所有隊伍

    參數：
        names: 名單快照
        rng: 任何提供 randrange(n) 的亂數產生器，預設使用 random 模組

    返回：
        [(第一位, 第二位), ...]，長度為 len(names) // 2

    異常：
        EmptyRosterError: 名單是空的
        OddRosterError: 名單人數是奇數
    """
    if len(names) == 0:
        raise EmptyRosterError()

    if len(names) % 2 != 0:
        raise OddRosterError()

    rng = rng if rng is not None else random
    pool = list(names)
    doubles: List[Pair] = []

    while pool:
        first = pool.pop(rng.randrange(len(pool)))
        second = pool.pop(rng.randrange(len(pool)))
        doubles.append((first, second))

    return doubles
