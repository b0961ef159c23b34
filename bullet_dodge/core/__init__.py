"""核心遊戲系統"""

from .interfaces import ActorView, Viewport, EntityFactory, PrefsStore
from .difficulty import DifficultyCurve
from .scoreboard import Scoreboard, LEADERBOARD_KEY
from .spawner import SpawnTimer, ThreatSpawner, PickupSpawner
from .session import SessionController, SessionConfig, SessionState, SessionSummary
from .collision import CollisionDetector

__all__ = [
    'ActorView', 'Viewport', 'EntityFactory', 'PrefsStore',
    'DifficultyCurve', 'Scoreboard', 'LEADERBOARD_KEY',
    'SpawnTimer', 'ThreatSpawner', 'PickupSpawner',
    'SessionController', 'SessionConfig', 'SessionState', 'SessionSummary',
    'CollisionDetector',
]
