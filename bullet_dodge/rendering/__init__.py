"""渲染系統模組"""

from .renderer import Renderer
from .effects import EffectManager, CollisionEffect, ParticleEffect

__all__ = ['Renderer', 'EffectManager', 'CollisionEffect', 'ParticleEffect']
