"""
效果管理系統
"""

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config.constants import (COLLISION_EFFECT_ALPHA_DECAY, COLLISION_EFFECT_COLOR,
                                COLLISION_EFFECT_RADIUS_GROW, COLLISION_EFFECT_RADIUS_INIT,
                                PICKUP_EFFECT_COLOR, PICKUP_PARTICLE_COUNT,
                                PICKUP_PARTICLE_LIFETIME, PICKUP_PARTICLE_SPEED)


@dataclass
class Effect:
    """效果基類（螢幕座標，時間單位為秒）"""
    x: float
    y: float
    active: bool = True

    def update(self, dt: float):
        """更新效果"""
        pass

    def is_alive(self) -> bool:
        """檢查效果是否還活著"""
        return self.active


@dataclass
class CollisionEffect(Effect):
    """受擊擴散圈"""
    radius: float = COLLISION_EFFECT_RADIUS_INIT
    alpha: float = 255.0
    color: Tuple[int, int, int] = COLLISION_EFFECT_COLOR

    def update(self, dt: float):
        self.radius += COLLISION_EFFECT_RADIUS_GROW * dt
        self.alpha -= COLLISION_EFFECT_ALPHA_DECAY * dt

        if self.alpha <= 0:
            self.alpha = 0
            self.active = False

    def render_data(self) -> Dict:
        """獲取渲染數據"""
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'alpha': int(self.alpha),
            'color': self.color
        }


@dataclass
class ParticleEffect(Effect):
    """拾取道具時的粒子"""
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    lifetime: float = PICKUP_PARTICLE_LIFETIME
    size: float = 3.0
    color: Tuple[int, int, int] = PICKUP_EFFECT_COLOR

    def update(self, dt: float):
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        self.lifetime -= dt

        if self.lifetime <= 0:
            self.active = False

    def render_data(self) -> Dict:
        alpha = max(0.0, min(1.0, self.lifetime / PICKUP_PARTICLE_LIFETIME))
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.size,
            'alpha': int(255 * alpha),
            'color': self.color
        }


class EffectManager:
    """效果管理器"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.collision_effects: List[CollisionEffect] = []
        self.particle_effects: List[ParticleEffect] = []

    def add_collision(self, x: float, y: float):
        """添加受擊效果"""
        self.collision_effects.append(CollisionEffect(x=x, y=y))

    def add_burst(self, x: float, y: float, count: int = PICKUP_PARTICLE_COUNT):
        """添加一圈向外飛散的粒子"""
        for i in range(count):
            angle = 2 * math.pi * i / count + self.rng.uniform(-0.2, 0.2)
            speed = PICKUP_PARTICLE_SPEED * self.rng.uniform(0.6, 1.0)
            self.particle_effects.append(ParticleEffect(
                x=x, y=y,
                velocity_x=math.cos(angle) * speed,
                velocity_y=math.sin(angle) * speed,
            ))

    def update(self, dt: float):
        """更新所有效果並清理死亡的效果"""
        for effect in self.collision_effects:
            effect.update(dt)
        for effect in self.particle_effects:
            effect.update(dt)

        self.collision_effects = [e for e in self.collision_effects if e.is_alive()]
        self.particle_effects = [e for e in self.particle_effects if e.is_alive()]

    def render_data(self) -> List[Dict]:
        """獲取所有效果的渲染數據"""
        return ([e.render_data() for e in self.collision_effects]
                + [e.render_data() for e in self.particle_effects])

    def clear(self):
        """清空所有效果"""
        self.collision_effects.clear()
        self.particle_effects.clear()

    def active_count(self) -> Dict[str, int]:
        """獲取活躍效果數量"""
        return {
            'total': len(self.collision_effects) + len(self.particle_effects),
            'collisions': len(self.collision_effects),
            'particles': len(self.particle_effects)
        }
