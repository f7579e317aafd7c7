"""Bullets fired by enemies and by the player."""

from __future__ import annotations

from typing import Callable, Optional

from starfleet.motion import Bullet, Item

_BULLET_SIZE = 10


def _settle(
    item: Item,
    y: float,
    kinds,
    on_contact: Optional[Callable[[], None]] = None,
) -> bool:
    """Put ``item`` at height ``y``; if it touches one of ``kinds``, run ``on_contact`` and discard it."""
    item.y = float(y)
    touched = any(isinstance(other, kinds) for other in item.colliding_items())
    if touched:
        if on_contact is not None:
            on_contact()
        item._discard()
    return touched


class _Shot(Bullet):
    """A small square projectile drawn with its pivot at the bottom centre."""

    def __init__(self, start_x: float, start_y: float, speed: float, end_y: float, image: str) -> None:
        super().__init__(
            start_x,
            start_y,
            speed,
            end_y,
            width=_BULLET_SIZE,
            height=_BULLET_SIZE,
            offset_x=-_BULLET_SIZE / 2,
            offset_y=-_BULLET_SIZE,
            image=image,
        )


class EnemyBullet(_Shot):
    """A slow bullet falling towards the player; hurts the player on contact."""

    def __init__(self, start_x: float, start_y: float) -> None:
        super().__init__(start_x, start_y, 5, 500, "images/enemy bullet.png")
        self.on_hit: Optional[Callable[[], None]] = None

    def set_y(self, y: float) -> None:
        from starfleet.player import Player

        _settle(self, y, Player, self.on_hit)

    def move(self) -> None:
        # constant speed: duration grows with the distance to the bottom
        duration = int(abs(600 - self.y) * self.move_speed)
        self._animate(self.set_y, self.y_pos, 550.0, duration, self._discard)


class PlayerBullet(_Shot):
    """A fast bullet rising from the player; destroys enemies and their bullets."""

    def __init__(self, start_x: float, start_y: float, speed: float) -> None:
        super().__init__(start_x, start_y, speed, -500, "images/player bullet.png")

    def set_y(self, y: float) -> None:
        from starfleet.enemy import Enemy

        self.y = float(y)
        victim = next(
            (item for item in self.colliding_items() if isinstance(item, (Enemy, EnemyBullet))),
            None,
        )
        if victim is not None:
            victim._discard()
            self._discard()

    def move(self) -> None:
        self._animate(self.set_y, self.y_pos, -500.0, self.move_speed, self._discard)