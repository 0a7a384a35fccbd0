"""
In-memory 狀態模型

一個 DrawSession 就是一個使用者畫面背後的完整狀態：
名單、最後一次抽籤結果、最後一次的錯誤訊息
"""
import random
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.roster import Roster
from services.doubles_service import Pair


@dataclass
class DrawSession:
    id: str
    roster: Roster = field(default_factory=Roster)
    doubles: list[Pair] = field(default_factory=list)
    error: str | None = None  # 最後一次抽籤失敗的訊息，成功後清空
    rng: random.Random = field(default_factory=random.Random, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def visible_doubles(self) -> list[Pair]:
        """有錯誤訊息時不顯示隊伍"""
        return [] if self.error else list(self.doubles)
