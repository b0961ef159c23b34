"""
難度曲線
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DifficultyCurve:
    """隨經過時間變化的生成間隔與彈速"""

    base_interval: float = 1.0
    min_interval: float = 0.2
    decay_rate: float = 0.01
    base_speed: float = 5.0
    accel_rate: float = 0.1

    def interval_at(self, elapsed: float) -> float:
        """
        計算當前生成間隔

        時間越長間隔越短，但不低於最小間隔。
        """
        return max(self.min_interval, self.base_interval - elapsed * self.decay_rate)

    def speed_at(self, elapsed: float) -> float:
        """計算當前彈速（不設上限）"""
        return self.base_speed + elapsed * self.accel_rate
