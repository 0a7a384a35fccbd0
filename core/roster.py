"""
Roster：一場抽籤的玩家名單

規則：
- 名稱一律正規化（去頭尾空白、轉大寫）後才比較
- 同名只保留一份，重複加入不報錯、也不改變原本的位置
- 新玩家加在最前面（最新加入的顯示在最上方）
- 名單順序只影響顯示，不影響抽籤
"""
from typing import Iterable, Iterator, List, Optional, Tuple
import logging

from services.naming_service import normalize_player_name

logger = logging.getLogger(__name__)


class Roster:
    """有序、不重複的玩家名單"""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names: List[str] = []
        # 初始名單依給定順序保留（第一次出現的為準）
        for raw_name in names or []:
            name = normalize_player_name(raw_name)
            if name and name not in self._names:
                self._names.append(name)

    def add(self, raw_name: str) -> bool:
        """
        加入一位玩家

        流程：
        1. 正規化名稱
        2. 空字串直接忽略
        3. 已經在名單上就忽略（位置不變）
        4. 否則加在名單最前面

        返回：
            True 如果真的加入了，False 如果被忽略
        """
        name = normalize_player_name(raw_name)
        if not name:
            return False

        if name in self._names:
            logger.debug(f"Player {name} already on roster, ignoring")
            return False

        self._names.insert(0, name)
        return True

    def remove(self, index: int) -> None:
        """
        移除指定位置的玩家，後面的玩家往前移一格

        異常：
            IndexError: index 不在名單範圍內（呼叫者的程式錯誤）
        """
        if not 0 <= index < len(self._names):
            raise IndexError(f"Roster index {index} out of range")
        del self._names[index]

    @property
    def names(self) -> Tuple[str, ...]:
        """目前名單的唯讀快照"""
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, raw_name: object) -> bool:
        if not isinstance(raw_name, str):
            return False
        return normalize_player_name(raw_name) in self._names

    def __repr__(self) -> str:
        return f"Roster({list(self._names)!r})"
