"""
碰撞檢測系統
"""

from typing import Tuple


class CollisionDetector:
    """碰撞檢測器（圓形判定）"""

    @staticmethod
    def circles_overlap(a: Tuple[float, float], radius_a: float,
                        b: Tuple[float, float], radius_b: float) -> bool:
        """
        檢測兩個圓是否重疊

        Args:
            a: 圓 A 中心
            radius_a: 圓 A 半徑
            b: 圓 B 中心
            radius_b: 圓 B 半徑

        Returns:
            是否重疊（相切不算）
        """
        dx = a[0] - b[0]
        dy = a[1] - b[1]
        reach = radius_a + radius_b
        return dx * dx + dy * dy < reach * reach

