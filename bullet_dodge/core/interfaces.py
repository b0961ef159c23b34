"""
外部協作者接口
"""

import random
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

Vector2 = Tuple[float, float]


class ActorView(ABC):
    """角色表現接口（移動、朝向、動畫狀態）"""

    @abstractmethod
    def move_by(self, vector: Vector2):
        """按向量移動角色"""
        pass

    @abstractmethod
    def set_facing(self, flipped: bool):
        """設置朝向（True 為水平翻轉）"""
        pass

    @abstractmethod
    def set_animation_state(self, name: str, value: bool):
        """切換動畫狀態"""
        pass


class Viewport(ABC):
    """可視區域接口（正交相機）"""

    @property
    @abstractmethod
    def half_height(self) -> float:
        """可視區域半高"""
        pass

    @property
    @abstractmethod
    def aspect(self) -> float:
        """寬高比"""
        pass

    @property
    def half_width(self) -> float:
        """可視區域半寬"""
        return self.half_height * self.aspect

    def random_point(self, rng: random.Random, scale: float = 1.0) -> Vector2:
        """
        在可視區域內取隨機點

        Args:
            rng: 隨機數生成器
            scale: 相對半寬/半高的縮放比例

        Returns:
            世界座標 (x, y)
        """
        half_w = self.half_width * scale
        half_h = self.half_height * scale
        return (rng.uniform(-half_w, half_w), rng.uniform(-half_h, half_h))


class EntityFactory(ABC):
    """實體工廠接口"""

    @abstractmethod
    def spawn_projectile(self, position: Vector2, direction: Vector2, speed: float) -> Any:
        """生成彈幕，返回句柄"""
        pass

    @abstractmethod
    def spawn_pickup(self, position: Vector2, lifetime: float) -> Any:
        """生成回復道具，返回句柄"""
        pass

    @abstractmethod
    def remove(self, handle: Any):
        """移除實體（已移除時為空操作）"""
        pass


class PrefsStore(ABC):
    """鍵值持久化接口"""

    @abstractmethod
    def get_string(self, key: str, default: str = "") -> str:
        pass

    @abstractmethod
    def set_string(self, key: str, value: str):
        pass

    @abstractmethod
    def save(self):
        pass


def has_lifetime(handle: Optional[Any]) -> bool:
    """句柄是否支援自行計時過期"""
    return handle is not None and callable(getattr(handle, "configure", None))
