"""
正交相機可視區域
"""

from typing import Tuple

from ..core.interfaces import Vector2, Viewport


class CameraViewport(Viewport):
    """以原點為中心、y 軸向上的正交相機"""

    def __init__(self, half_height: float, aspect: float):
        self._half_height = float(half_height)
        self._aspect = float(aspect)

    @classmethod
    def for_window(cls, width: int, height: int, half_height: float) -> "CameraViewport":
        """依視窗尺寸建立"""
        return cls(half_height, width / height)

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def aspect(self) -> float:
        return self._aspect

    def to_screen(self, point: Vector2, width: int, height: int) -> Tuple[int, int]:
        """世界座標轉螢幕像素"""
        scale = height / (2 * self._half_height)
        x = width / 2 + point[0] * scale
        y = height / 2 - point[1] * scale
        return int(round(x)), int(round(y))

    def pixels_per_unit(self, height: int) -> float:
        return height / (2 * self._half_height)
