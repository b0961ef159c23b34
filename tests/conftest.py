import random

import pytest

from bullet_dodge.core.interfaces import ActorView, EntityFactory, Viewport


class FixedViewport(Viewport):
    """半高 5、寬高比 2 的可視區域"""

    def __init__(self, half_height=5.0, aspect=2.0):
        self._half_height = half_height
        self._aspect = aspect

    @property
    def half_height(self):
        return self._half_height

    @property
    def aspect(self):
        return self._aspect


class Handle:
    def __init__(self, kind, position, **params):
        self.kind = kind
        self.position = position
        self.params = params


class ConfigurableHandle(Handle):
    def __init__(self, kind, position, **params):
        super().__init__(kind, position, **params)
        self.lifetime = None

    def configure(self, lifetime):
        self.lifetime = lifetime


class RecordingFactory(EntityFactory):
    """記錄生成與移除請求的工廠"""

    def __init__(self, configurable_pickups=True):
        self.configurable_pickups = configurable_pickups
        self.projectiles = []
        self.pickups = []
        self.removed = []

    def spawn_projectile(self, position, direction, speed):
        handle = Handle("projectile", position, direction=direction, speed=speed)
        self.projectiles.append(handle)
        return handle

    def spawn_pickup(self, position, lifetime):
        cls = ConfigurableHandle if self.configurable_pickups else Handle
        handle = cls("pickup", position, lifetime=lifetime)
        self.pickups.append(handle)
        return handle

    def remove(self, handle):
        self.removed.append(handle)


class RecordingActor(ActorView):
    def __init__(self):
        self.moves = []
        self.flipped = False
        self.states = {}
        self.history = []

    def move_by(self, vector):
        self.moves.append(vector)

    def set_facing(self, flipped):
        self.flipped = flipped

    def set_animation_state(self, name, value):
        self.states[name] = value
        self.history.append((name, value))


@pytest.fixture()
def viewport():
    return FixedViewport()


@pytest.fixture()
def factory():
    return RecordingFactory()


@pytest.fixture()
def actor():
    return RecordingActor()


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def plain_factory():
    return RecordingFactory(configurable_pickups=False)
