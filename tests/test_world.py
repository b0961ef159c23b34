import numpy as np
import pytest

from bullet_dodge.core.collision import CollisionDetector
from bullet_dodge.core.session import HIT_ANIMATION, SessionConfig, SessionController
from bullet_dodge.world import CameraViewport, Pickup, Player, Projectile, World
from bullet_dodge.world.actors import WALK_ANIMATION


@pytest.fixture()
def world():
    return World(CameraViewport(half_height=5.0, aspect=2.0))


@pytest.fixture()
def session(world):
    session = SessionController(SessionConfig(starting_lives=3, invincibility_duration=1.5),
                                player=world.player)
    world.bind(session)
    return session


class TestCollisionDetector:

    def test_overlap(self):
        assert CollisionDetector.circles_overlap((0, 0), 1.0, (1.5, 0), 1.0)
        assert not CollisionDetector.circles_overlap((0, 0), 1.0, (2.0, 0), 1.0)
        assert not CollisionDetector.circles_overlap((0, 0), 0.5, (3, 4), 1.0)


class TestCameraViewport:

    def test_extents(self):
        viewport = CameraViewport.for_window(960, 540, half_height=5.0)
        assert viewport.half_height == 5.0
        assert viewport.half_width == pytest.approx(5.0 * 960 / 540)

    def test_to_screen(self):
        viewport = CameraViewport(half_height=5.0, aspect=2.0)
        assert viewport.to_screen((0, 0), 200, 100) == (100, 50)
        assert viewport.to_screen((10, 5), 200, 100) == (200, 0)
        assert viewport.to_screen((-10, -5), 200, 100) == (0, 100)


class TestPlayer:

    def test_diagonal_input_is_normalized(self):
        player = Player(move_speed=5.0)
        player.apply_input((1, 1), 1.0)

        assert np.linalg.norm(player.position) == pytest.approx(5.0)
        assert player.is_animating(WALK_ANIMATION)
        assert not player.facing_left

    def test_facing_and_idle(self):
        player = Player(move_speed=5.0)
        player.apply_input((-1, 0), 0.1)
        assert player.facing_left

        player.apply_input((0, 0), 0.1)
        assert not player.is_animating(WALK_ANIMATION)

    def test_clamped_to_bounds(self):
        player = Player(move_speed=5.0, radius=0.5, bounds=(10.0, 5.0))
        player.apply_input((0, 1), 10.0)

        assert player.position[1] == pytest.approx(4.5)


class TestWorld:

    def test_factory_tracks_entities(self, world):
        projectile = world.spawn_projectile((1, 2), (0, -1), 7.0)
        pickup = world.spawn_pickup((0, 0), 6.0)

        assert isinstance(projectile, Projectile)
        assert isinstance(pickup, Pickup)
        assert projectile.speed == 7.0
        assert pickup.remaining is None

        world.remove(projectile)
        world.remove(projectile)
        assert world.projectiles == []
        assert not projectile.alive

    def test_projectile_moves_and_expires(self, world):
        projectile = world.spawn_projectile((-9, 4), (1, 0), 2.0)

        world.step(0.5)
        assert projectile.position[0] == pytest.approx(-8.0)
        assert projectile.facing_left is False

        for _ in range(10):
            world.step(0.5)
        assert projectile not in world.projectiles

    def test_projectile_hit_damages_and_is_removed(self, world, session):
        world.spawn_projectile((2.0, 0.0), (-1, 0), 10.0)

        result = world.step(0.1)
        assert result.hits == []

        result = world.step(0.1)
        assert len(result.hits) == 1
        assert world.projectiles == []
        assert session.life_count == 2
        assert world.player.is_animating(HIT_ANIMATION)

    def test_hit_during_invincibility_still_removes_projectile(self, world, session):
        session.apply_damage()
        world.spawn_projectile((0.0, 0.0), (1, 0), 1.0)

        world.step(0.01)

        assert world.projectiles == []
        assert session.life_count == 2

    def test_pickup_adds_life_once(self, world, session):
        pickup = world.spawn_pickup((0.1, 0.0), 6.0)
        pickup.configure(6.0)

        result = world.step(0.01)
        world.step(0.01)

        assert len(result.collected) == 1
        assert session.life_count == 4
        assert pickup.collected
        assert world.pickups == []

    def test_pickup_expires(self, world):
        pickup = world.spawn_pickup((5.0, 3.0), 0.1)
        pickup.configure(0.1)
        assert pickup.remaining == 0.5

        world.step(0.3)
        assert pickup in world.pickups

        world.step(0.3)
        assert pickup not in world.pickups

    def test_unconfigured_pickup_never_expires_on_its_own(self, world):
        pickup = world.spawn_pickup((5.0, 3.0), 1.0)
        for _ in range(20):
            world.step(0.5)
        assert pickup in world.pickups

    def test_world_freezes_after_game_over(self, world):
        session = SessionController(SessionConfig(starting_lives=1), player=world.player)
        world.bind(session)
        world.spawn_projectile((0.0, 0.0), (1, 0), 1.0)
        world.step(0.01)
        assert not session.is_running()

        projectile = world.spawn_projectile((-5.0, 0.0), (1, 0), 1.0)
        world.step(1.0, move_axis=(1, 0))

        assert projectile.position[0] == pytest.approx(-5.0)
        assert world.player.position[0] == pytest.approx(0.0)

    def test_clear(self, world):
        world.spawn_projectile((3, 3), (1, 0), 1.0)
        world.spawn_pickup((1, 1), 1.0)
        world.player.move_by((2, 2))

        world.clear()

        assert world.projectiles == []
        assert world.pickups == []
        assert world.player.position.tolist() == [0.0, 0.0]
