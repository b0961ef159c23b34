"""
遊戲角色：玩家、彈幕、回復道具
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from ..config.constants import (PICKUP_MIN_LIFETIME, PICKUP_RADIUS, PLAYER_RADIUS,
                                PROJECTILE_LIFETIME, PROJECTILE_RADIUS)
from ..core.interfaces import ActorView, Vector2

WALK_ANIMATION = "isWalking"


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=np.float64).reshape(2).copy()


class Player(ActorView):
    """玩家角色"""

    def __init__(self, move_speed: float = 5.0, radius: float = PLAYER_RADIUS,
                 bounds: Optional[Tuple[float, float]] = None):
        """
        初始化玩家

        Args:
            move_speed: 每秒移動距離
            radius: 碰撞半徑
            bounds: 可移動範圍的半寬、半高（None 為不限制）
        """
        self.move_speed = move_speed
        self.radius = radius
        self.bounds = bounds
        self.position = np.zeros(2)
        self.facing_left = False
        self.animation: Dict[str, bool] = {}

    def reset(self):
        self.position = np.zeros(2)
        self.facing_left = False
        self.animation.clear()

    def move_by(self, vector: Vector2):
        """移動並限制在範圍內"""
        self.position = self.position + _vec(vector)
        if self.bounds is not None:
            limit = np.maximum(np.asarray(self.bounds, dtype=np.float64) - self.radius, 0.0)
            self.position = np.clip(self.position, -limit, limit)

    def set_facing(self, flipped: bool):
        self.facing_left = bool(flipped)

    def set_animation_state(self, name: str, value: bool):
        self.animation[name] = bool(value)

    def is_animating(self, name: str) -> bool:
        return self.animation.get(name, False)

    def apply_input(self, axis: Vector2, delta_time: float):
        """
        依輸入軸移動

        斜向輸入會被正規化，避免斜走更快。
        """
        movement = _vec(axis)
        if movement.dot(movement) > 1.0:
            movement = movement / np.linalg.norm(movement)

        self.set_facing(bool(movement[0] < 0))
        self.move_by(movement * self.move_speed * delta_time)
        self.set_animation_state(WALK_ANIMATION, bool(np.any(movement != 0)))


@dataclass(eq=False)
class Projectile:
    """彈幕"""
    position: np.ndarray
    direction: np.ndarray
    speed: float
    radius: float = PROJECTILE_RADIUS
    remaining: float = PROJECTILE_LIFETIME
    alive: bool = True

    @property
    def facing_left(self) -> bool:
        return bool(self.direction[0] < 0)

    def update(self, delta_time: float):
        self.position = self.position + self.direction * self.speed * delta_time
        self.remaining -= delta_time
        if self.remaining <= 0:
            self.alive = False


@dataclass(eq=False)
class Pickup:
    """回復道具，configure 後才開始倒數"""
    position: np.ndarray
    radius: float = PICKUP_RADIUS
    remaining: Optional[float] = None
    alive: bool = True
    collected: bool = False

    def configure(self, lifetime: float):
        """設定存在時間（最少 0.5 秒）"""
        self.remaining = max(PICKUP_MIN_LIFETIME, lifetime)

    def update(self, delta_time: float):
        if self.remaining is None:
            return
        self.remaining -= delta_time
        if self.remaining <= 0:
            self.alive = False
