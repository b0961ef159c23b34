"""遊戲世界模組"""

from .actors import Player, Projectile, Pickup
from .viewport import CameraViewport
from .world import World, StepResult

__all__ = ['Player', 'Projectile', 'Pickup', 'CameraViewport', 'World', 'StepResult']
