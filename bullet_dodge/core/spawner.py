"""
生成器：彈幕與回復道具
"""

from abc import ABC, abstractmethod
import heapq
import logging
import random
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .difficulty import DifficultyCurve
from .interfaces import EntityFactory, Vector2, Viewport, has_lifetime

logger = logging.getLogger(__name__)

# 邊界編號 -> 向內方向
EDGE_LEFT, EDGE_RIGHT, EDGE_TOP, EDGE_BOTTOM = range(4)
EDGE_DIRECTIONS = {
    EDGE_LEFT: (1.0, 0.0),
    EDGE_RIGHT: (-1.0, 0.0),
    EDGE_TOP: (0.0, -1.0),
    EDGE_BOTTOM: (0.0, 1.0),
}


@dataclass
class SpawnTimer:
    """生成計時器"""

    interval: float
    accumulated: float = 0.0

    def advance(self, delta_time: float, interval: Optional[float] = None) -> bool:
        """
        累加時間並檢查是否到達生成時機

        Args:
            delta_time: 本幀經過時間
            interval: 當前間隔（None 時沿用原間隔）

        Returns:
            本幀是否應生成；生成時累加器歸零
        """
        if interval is not None:
            self.interval = interval

        self.accumulated += delta_time
        if self.accumulated < self.interval:
            return False

        self.accumulated = 0.0
        return True

    def reset(self):
        self.accumulated = 0.0


class Spawner(ABC):
    """生成器基類"""

    def __init__(self, interval: float, factory: Optional[EntityFactory] = None,
                 viewport: Optional[Viewport] = None,
                 rng: Optional[random.Random] = None):
        self.factory = factory
        self.viewport = viewport
        self.rng = rng or random.Random()
        self.timer = SpawnTimer(interval)
        self.enabled = True
        self.emitted = 0
        self.session = None
        # 未綁定會話時使用自身運行時間
        self._run_time = 0.0

    def bind(self, session):
        """綁定會話控制器"""
        self.session = session

    @property
    def elapsed(self) -> float:
        if self.session is not None:
            return self.session.elapsed_time
        return self._run_time

    def is_active(self) -> bool:
        """啟用中且遊戲進行中"""
        if not self.enabled:
            return False
        return self.session is None or self.session.is_running()

    def reset(self):
        """重置計時"""
        self.timer.reset()
        self._run_time = 0.0

    @abstractmethod
    def tick(self, delta_time: float):
        """每幀更新"""
        pass

    def _collaborators_ready(self) -> bool:
        if self.factory is None or self.viewport is None:
            logger.warning(f"{type(self).__name__}: 未設置實體工廠或可視區域，略過本次生成")
            return False
        return True


class ThreatSpawner(Spawner):
    """
    從畫面邊界生成彈幕

    生成間隔與彈速依經過時間由 DifficultyCurve 決定。
    """

    def __init__(self, curve: Optional[DifficultyCurve] = None,
                 factory: Optional[EntityFactory] = None,
                 viewport: Optional[Viewport] = None,
                 spawn_offset: float = 1.0,
                 rng: Optional[random.Random] = None):
        self.curve = curve or DifficultyCurve()
        super().__init__(self.curve.interval_at(0.0), factory, viewport, rng)
        self.spawn_offset = spawn_offset

    def tick(self, delta_time: float):
        """每幀更新"""
        if not self.is_active():
            return

        self._run_time += delta_time
        elapsed = self.elapsed
        if not self.timer.advance(delta_time, self.curve.interval_at(elapsed)):
            return

        self.emit(self.curve.speed_at(elapsed))

    def emit(self, speed: float) -> Optional[Any]:
        """在隨機邊界外生成一顆彈幕"""
        if not self._collaborators_ready():
            return None

        edge = self.rng.randrange(4)
        position = self.edge_position(edge)
        direction = EDGE_DIRECTIONS[edge]

        handle = self.factory.spawn_projectile(position, direction, speed)
        self.emitted += 1
        return handle

    def edge_position(self, edge: int) -> Vector2:
        """邊界外的生成座標"""
        half_h = self.viewport.half_height
        half_w = self.viewport.half_width
        offset = self.spawn_offset

        if edge == EDGE_LEFT:
            return (-half_w - offset, self.rng.uniform(-half_h, half_h))
        if edge == EDGE_RIGHT:
            return (half_w + offset, self.rng.uniform(-half_h, half_h))
        if edge == EDGE_TOP:
            return (self.rng.uniform(-half_w, half_w), half_h + offset)
        return (self.rng.uniform(-half_w, half_w), -half_h - offset)


class PickupSpawner(Spawner):
    """
    定時在畫面內生成回復道具

    道具支援 configure(lifetime) 時由其自行過期，
    否則由生成器記錄到期時間並在到期時移除。
    """

    def __init__(self, factory: Optional[EntityFactory] = None,
                 viewport: Optional[Viewport] = None,
                 interval: float = 15.0,
                 lifetime: float = 6.0,
                 spread: float = 0.8,
                 rng: Optional[random.Random] = None):
        super().__init__(interval, factory, viewport, rng)
        self.lifetime = lifetime
        self.spread = spread
        self._expiries: List[Tuple[float, int, Any]] = []
        self._sequence = 0

    @property
    def pending_expiries(self) -> int:
        return len(self._expiries)

    def tick(self, delta_time: float):
        """每幀更新"""
        if not self.is_active():
            return

        self._run_time += delta_time
        self._expire_due()

        if not self.timer.advance(delta_time):
            return

        self.emit()

    def emit(self) -> Optional[Any]:
        """在畫面內隨機位置生成一個道具"""
        if not self._collaborators_ready():
            return None

        position = self.viewport.random_point(self.rng, self.spread)
        handle = self.factory.spawn_pickup(position, self.lifetime)
        self.emitted += 1

        if has_lifetime(handle):
            handle.configure(self.lifetime)
        elif handle is not None:
            self._sequence += 1
            heapq.heappush(self._expiries, (self._run_time + self.lifetime, self._sequence, handle))
        return handle

    def reset(self):
        """重置計時並移除尚未到期的道具"""
        while self._expiries:
            _, _, handle = heapq.heappop(self._expiries)
            if self.factory is not None:
                self.factory.remove(handle)
        super().reset()

    def _expire_due(self):
        while self._expiries and self._expiries[0][0] <= self._run_time:
            _, _, handle = heapq.heappop(self._expiries)
            if self.factory is not None:
                self.factory.remove(handle)
