"""
排行榜
"""

import logging
import math
from typing import List, Optional

from .interfaces import PrefsStore

logger = logging.getLogger(__name__)

LEADERBOARD_KEY = "BD_LEADERBOARD"
DEFAULT_CAPACITY = 5
SEPARATOR = "|"
PRECISION = 3


class Scoreboard:
    """降序、有容量上限的生存時間排行榜"""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = max(1, int(capacity))
        self._scores: List[float] = []

    def __len__(self) -> int:
        return len(self._scores)

    @property
    def scores(self) -> List[float]:
        """已記錄的分數（副本）"""
        return list(self._scores)

    def record(self, score: float) -> bool:
        """
        記錄一個分數

        Args:
            score: 生存時間（秒）

        Returns:
            分數是否留在榜上
        """
        score = float(score)
        if not math.isfinite(score):
            return False

        self._scores.append(score)
        self._normalize()
        return score in self._scores

    def clear(self):
        """清空排行榜"""
        self._scores.clear()

    def top_n(self) -> List[Optional[float]]:
        """固定 capacity 個欄位，未填滿的欄位為 None"""
        slots: List[Optional[float]] = list(self._scores)
        slots.extend([None] * (self.capacity - len(slots)))
        return slots

    def format_rows(self, placeholder: str = "---") -> List[str]:
        """顯示用的排行文字"""
        rows = []
        for rank, score in enumerate(self.top_n(), start=1):
            if score is None:
                rows.append(f"{rank}. {placeholder}")
            else:
                rows.append(f"{rank}. {score:.1f}s")
        return rows

    def serialize(self) -> str:
        """編碼為 "|" 分隔的定點小數字串"""
        return SEPARATOR.join(f"{score:.{PRECISION}f}" for score in self._scores)

    def deserialize(self, blob: Optional[str]):
        """
        從字串還原排行榜

        無法解析的片段會被略過，不影響其他分數。
        """
        self._scores.clear()
        if not blob:
            return

        for part in blob.split(SEPARATOR):
            try:
                value = float(part)
            except ValueError:
                logger.debug(f"略過無法解析的排行資料: {part!r}")
                continue
            if not math.isfinite(value):
                logger.debug(f"略過非有限值的排行資料: {part!r}")
                continue
            self._scores.append(value)

        self._normalize()

    def load(self, prefs: PrefsStore, key: str = LEADERBOARD_KEY):
        """從持久化存儲載入"""
        self.deserialize(prefs.get_string(key, ""))

    def save(self, prefs: PrefsStore, key: str = LEADERBOARD_KEY):
        """寫入持久化存儲"""
        prefs.set_string(key, self.serialize())
        prefs.save()

    def _normalize(self):
        # 降序排列並截斷
        self._scores.sort(reverse=True)
        del self._scores[self.capacity:]
