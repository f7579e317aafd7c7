import contextlib
import random
from dataclasses import dataclass, field

import pytest

from starfleet.bullets import EnemyBullet, PlayerBullet
from starfleet.enemy import Enemy
from starfleet.player import Player


@dataclass(eq=False)
class Arena:
    """Stand-in scene that counts damage reports."""

    items: list = field(default_factory=list)
    hits: int = 0

    def add_item(self, item):
        self.items.append(item)
        item.scene = self

    def remove_item(self, item):
        with contextlib.suppress(ValueError):
            self.items.remove(item)
        item.scene = None

    def player_took_damage(self):
        self.hits += 1

    def launch(self, bullet):
        self.add_item(bullet)
        bullet.move()
        return bullet


def _fly(item, step=16, limit=2000):
    for _ in range(limit):
        if not item.alive:
            break
        item.advance(step)


@pytest.mark.parametrize(
    "make, speed, end",
    [
        (lambda: EnemyBullet(12.0, 34.0), 5, 500),
        (lambda: PlayerBullet(12.0, 34.0, 1000.0), 1000.0, -500),
    ],
)
def test_bullet_parameters(make, speed, end):
    bullet = make()
    assert bullet.move_speed == speed
    assert bullet.end_point == end
    assert (bullet.x, bullet.y) == (12.0, 34.0)


def test_enemy_bullet_bounds():
    assert EnemyBullet(12.0, 34.0).bounds == (7.0, 24.0, 17.0, 34.0)


def test_enemy_bullet_without_target_ends_at_550_and_leaves_scene():
    arena = Arena()
    bullet = arena.launch(EnemyBullet(300.0, 100.0))
    bullet.advance(100000)
    assert bullet.y == 550.0
    assert bullet not in arena.items
    assert not bullet.alive


def test_enemy_bullet_hits_player():
    arena = Arena()
    player = Player()
    player.x, player.y = 0.0, 350.0
    arena.add_item(player)
    bullet = EnemyBullet(0.0, 100.0)
    bullet.on_hit = arena.player_took_damage
    arena.launch(bullet)
    _fly(bullet)
    assert arena.hits == 1
    assert bullet not in arena.items
    assert bullet.y < 550.0
    assert player in arena.items


def test_player_bullet_without_target_ends_at_top():
    arena = Arena()
    bullet = arena.launch(PlayerBullet(300.0, 350.0, 1000.0))
    bullet.advance(999)
    assert bullet.alive
    bullet.advance(1)
    assert bullet.y == -500.0
    assert bullet not in arena.items


def _enemy_at_origin(arena):
    enemy = Enemy(arena, 0.0, rng=random.Random(0))
    enemy.y = 0.0
    return enemy


@pytest.mark.parametrize("make_target", [_enemy_at_origin, lambda arena: EnemyBullet(0.0, 0.0)])
def test_player_bullet_destroys_target(make_target):
    arena = Arena()
    target = make_target(arena)
    arena.add_item(target)
    bullet = arena.launch(PlayerBullet(0.0, 350.0, 1000.0))
    _fly(bullet)
    assert not target.alive
    assert arena.items == []
    assert bullet.y > -500.0
    assert arena.hits == 0


def test_player_bullet_ignores_player():
    arena = Arena()
    player = Player()
    player.x, player.y = 0.0, 350.0
    arena.add_item(player)
    bullet = PlayerBullet(0.0, 350.0, 1000.0)
    arena.add_item(bullet)
    bullet.set_y(350.0)
    assert bullet.alive
    assert player.alive