"""
HUD 文字
"""

from typing import List, Optional

from .config.constants import LIFE_ICON, LIFE_ICON_MAX


def format_lives(lives: int) -> str:
    """生命數與愛心圖示（最多 10 個）"""
    if lives <= 0:
        return "Life : 0"
    hearts = LIFE_ICON * min(lives, LIFE_ICON_MAX)
    return f"Life : {lives}  {hearts}"


def format_time(elapsed: float) -> str:
    return f"Time : {elapsed:.1f}s"


def format_game_over(score: Optional[float]) -> str:
    if score is None:
        return "Survived: ---"
    return f"Survived: {score:.1f}s"


def format_ranking(rows: List[str], capacity: int) -> List[str]:
    """排行榜標題加各列"""
    return [f"TOP {capacity}"] + rows
