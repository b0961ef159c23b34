"""
遊戲世界：實體容器、移動與碰撞
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from ..core.collision import CollisionDetector
from ..core.interfaces import EntityFactory, Vector2
from .actors import Pickup, Player, Projectile
from .viewport import CameraViewport

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """單幀內發生的碰撞（世界座標）"""
    hits: List[Tuple[float, float]] = field(default_factory=list)
    collected: List[Tuple[float, float]] = field(default_factory=list)


class World(EntityFactory):
    """
    實體工廠與物理協作者

    負責移動玩家與彈幕、處理過期，並把碰撞回報給會話控制器。
    會話未綁定時碰撞仍會移除實體，但不會影響生命。
    """

    def __init__(self, viewport: CameraViewport, player: Optional[Player] = None):
        self.viewport = viewport
        self.player = player or Player(bounds=(viewport.half_width, viewport.half_height))
        self.projectiles: List[Projectile] = []
        self.pickups: List[Pickup] = []
        self.session = None
        self.collision = CollisionDetector()

    def bind(self, session):
        """綁定會話控制器"""
        self.session = session

    def is_running(self) -> bool:
        return self.session is None or self.session.is_running()

    # ---------- EntityFactory ----------

    def spawn_projectile(self, position: Vector2, direction: Vector2, speed: float) -> Projectile:
        projectile = Projectile(
            position=np.asarray(position, dtype=np.float64),
            direction=np.asarray(direction, dtype=np.float64),
            speed=float(speed),
        )
        self.projectiles.append(projectile)
        return projectile

    def spawn_pickup(self, position: Vector2, lifetime: float) -> Pickup:
        # 存在時間由生成器透過 configure 設定
        pickup = Pickup(position=np.asarray(position, dtype=np.float64))
        self.pickups.append(pickup)
        return pickup

    def remove(self, handle):
        """移除實體，重複移除為空操作"""
        if isinstance(handle, Projectile) and handle in self.projectiles:
            self.projectiles.remove(handle)
        elif isinstance(handle, Pickup) and handle in self.pickups:
            self.pickups.remove(handle)
        else:
            return
        handle.alive = False

    def clear(self):
        """清空所有實體並重置玩家"""
        self.projectiles.clear()
        self.pickups.clear()
        self.player.reset()

    # ---------- 更新 ----------

    def step(self, delta_time: float, move_axis: Vector2 = (0.0, 0.0)) -> StepResult:
        """
        物理更新

        Args:
            delta_time: 已套用時間倍率的經過時間
            move_axis: 玩家輸入軸

        Returns:
            本幀的碰撞結果
        """
        result = StepResult()
        if not self.is_running() or delta_time <= 0:
            return result

        self.player.apply_input(move_axis, delta_time)

        for projectile in list(self.projectiles):
            projectile.update(delta_time)
            if not projectile.alive:
                self.remove(projectile)

        for pickup in list(self.pickups):
            pickup.update(delta_time)
            if not pickup.alive:
                self.remove(pickup)

        self._check_projectiles(result)
        self._check_pickups(result)
        return result

    def _check_projectiles(self, result: StepResult):
        player = self.player
        for projectile in list(self.projectiles):
            if not self.is_running():
                return
            if not self.collision.circles_overlap(player.position, player.radius,
                                                  projectile.position, projectile.radius):
                continue

            if self.session is not None:
                self.session.apply_damage()
            result.hits.append(tuple(projectile.position))
            self.remove(projectile)

    def _check_pickups(self, result: StepResult):
        player = self.player
        for pickup in list(self.pickups):
            if not self.is_running():
                return
            if pickup.collected:
                continue
            if not self.collision.circles_overlap(player.position, player.radius,
                                                  pickup.position, pickup.radius):
                continue

            pickup.collected = True
            self.remove(pickup)
            if self.session is not None:
                self.session.add_life(1)
            result.collected.append(tuple(pickup.position))
            logger.debug("拾取回復道具")
