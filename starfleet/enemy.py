"""Enemy ships that descend the screen and shoot at random intervals."""

from __future__ import annotations

import random
from typing import Any, Callable, Optional

from starfleet.bullets import EnemyBullet, _settle
from starfleet.motion import Animation, Item
from starfleet.player import Player

# start height, end height, duration in ms
_DESCENT = (-600.0, 500.0, 15000)


class Enemy(Item):
    """An enemy ship; ramming the player hurts it."""

    def __init__(self, scene: Any, x_pos: float, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        super().__init__(
            x_pos,
            _DESCENT[0],
            width=60,
            height=60,
            offset_x=-30,
            offset_y=-60,
            image=f"images/enemy{rng.randint(1, 4)}.png",
        )
        self.scene = scene
        self.x_pos = float(x_pos)
        self.on_hit: Optional[Callable[[], None]] = None
        self.animation: Optional[Animation] = None
        self.timer = self._every(rng.randint(1000, 3000), self.shoot_bullet)

    def set_y(self, y: float) -> None:
        _settle(self, y, Player, self.on_hit)

    def move(self) -> None:
        self.animation = self._animate(self.set_y, *_DESCENT, self._discard)

    def shoot_bullet(self) -> EnemyBullet:
        scene = self._require_scene()
        bullet = EnemyBullet(self.x, self.y)
        scene.add_item(bullet)
        bullet.on_hit = scene.player_took_damage
        bullet.move()
        return bullet

    def advance(self, dt):
        """Run the descent and the shooting timer forward by ``dt`` milliseconds."""
        return Item.advance(self, dt)