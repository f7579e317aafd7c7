import random

import pytest

from starfleet.bullets import EnemyBullet
from starfleet.enemy import Enemy
from starfleet.player import Player


class Field:
    """Stand-in scene that logs every damage report."""

    def __init__(self):
        self.items = []
        self.reports = []

    def add_item(self, item):
        self.items.append(item)
        item.scene = self

    def remove_item(self, item):
        while item in self.items:
            self.items.remove(item)
        item.scene = None

    def player_took_damage(self):
        self.reports.append("damage")

    def bullets(self):
        return [item for item in self.items if isinstance(item, EnemyBullet)]


@pytest.fixture
def guarded():
    field = Field()
    pilot = Player()
    pilot.x, pilot.y = 0.0, 350.0
    field.add_item(pilot)
    return field


@pytest.mark.parametrize("seed", range(20))
def test_enemy_random_setup_within_bounds(seed):
    field = Field()
    enemy = Enemy(field, 25.0, rng=random.Random(seed))
    assert enemy.image in {f"images/enemy{n}.png" for n in range(1, 5)}
    assert 1000 <= enemy.timer.interval <= 3000
    assert (enemy.x, enemy.y) == (25.0, -600.0)
    assert enemy.scene is field


def test_enemy_shoots_when_timer_fires():
    field = Field()
    enemy = Enemy(field, 0.0, rng=random.Random(3))
    field.add_item(enemy)
    enemy.advance(enemy.timer.interval)
    shots = field.bullets()
    assert len(shots) == 1
    assert (shots[0].x, shots[0].y) == (enemy.x, enemy.y)


def test_shot_bullet_reports_damage_to_scene():
    field = Field()
    enemy = Enemy(field, 0.0, rng=random.Random(3))
    field.add_item(enemy)
    bullet = enemy.shoot_bullet()
    assert bullet.on_hit == field.player_took_damage
    bullet.on_hit()
    assert field.reports == ["damage"]


def test_enemy_ramming_player_deals_damage_and_vanishes(guarded):
    enemy = Enemy(guarded, 0.0, rng=random.Random(5))
    guarded.add_item(enemy)
    enemy.on_hit = guarded.player_took_damage
    enemy.set_y(360.0)
    assert guarded.reports == ["damage"]
    assert enemy not in guarded.items
    assert not enemy.alive
    assert enemy.timer.active is False


def test_enemy_descends_and_leaves_scene():
    field = Field()
    enemy = Enemy(field, 0.0, rng=random.Random(7))
    field.add_item(enemy)
    enemy.move()
    enemy.advance(15000)
    assert enemy.y == 500.0
    assert enemy not in field.items
    assert field.bullets() == []


def test_enemy_far_from_player_does_not_collide(guarded):
    enemy = Enemy(guarded, 300.0, rng=random.Random(1))
    guarded.add_item(enemy)
    enemy.set_y(360.0)
    assert enemy.alive
    assert guarded.reports == []