"""The player's ship and its hearts."""

from __future__ import annotations

from typing import Callable, Optional

from starfleet.bullets import PlayerBullet
from starfleet.motion import Animation, Item

_MAX_HEALTH = 10
_HEART_X = -375.0
_HEART_TOP = -350
_HEART_SPACING = 40
_NORMAL_SPEED = 2
_BOOSTED_SPEED = 1
_BUFF_DURATION = 5000
_RAPID_FIRE_INTERVAL = 10
_BULLET_FLIGHT_TIME = 1000.0


def _heart_y(index: int) -> float:
    return float(_HEART_TOP + _HEART_SPACING * index)


class Health(Item):
    """One heart of the player's health display."""

    def __init__(self) -> None:
        super().__init__(width=40, height=40, offset_x=-20, offset_y=-20, image="images/heart.png")


class Player(Item):
    """The ship: slides sideways, shoots, and loses hearts when hit."""

    def __init__(self, image: str = "images/spaceship.png") -> None:
        super().__init__(width=40, height=40, offset_x=-20, offset_y=-20, image=image)
        self.speed = _NORMAL_SPEED  # milliseconds per pixel: lower is faster
        self.focusable = True
        self.health = [Health() for _ in range(_MAX_HEALTH)]
        self.animation: Optional[Animation] = None
        self.on_died: Optional[Callable[[], None]] = None

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def move(self, x_pos: float) -> None:
        """Slide to ``x_pos``, taking longer the further away it is."""
        duration = int(abs(x_pos - self.x) * self.speed)
        if self.animation is not None:
            self.animation.running = False
        self.animation = self._animate(self.set_x, self.x, x_pos, duration)

    def shoot(self) -> PlayerBullet:
        scene = self._require_scene()
        bullet = PlayerBullet(self.x, self.y, _BULLET_FLIGHT_TIME)
        scene.add_item(bullet)
        bullet.move()
        return bullet

    def display_health(self) -> None:
        scene = self._require_scene()
        for index, heart in enumerate(self.health):
            scene.add_item(heart)
            heart.x, heart.y = _HEART_X, _heart_y(index)

    def receive_damage(self) -> None:
        """Lose a heart; losing the last one reports death instead."""
        if len(self.health) > 1:
            self.health.pop()._discard()
        elif self.on_died is not None:
            self.on_died()

    def receive_heal(self) -> None:
        """Gain a heart, up to the maximum."""
        if len(self.health) >= _MAX_HEALTH:
            return
        heart = Health()
        self.health.append(heart)
        if self.scene is not None:
            self.scene.add_item(heart)
        heart.x, heart.y = _HEART_X, _heart_y(len(self.health) - 1)

    def rapid_fire(self) -> None:
        """Shoot continuously for a few seconds."""
        rapid = self._every(_RAPID_FIRE_INTERVAL, self.shoot)
        self._after(_BUFF_DURATION, rapid.stop)

    def speed_boost(self) -> None:
        """Move faster for a few seconds."""
        self.speed = _BOOSTED_SPEED
        self._after(_BUFF_DURATION, self._end_speed_boost)

    def advance(self, dt):
        """Run the ship's movement and buff timers forward by ``dt`` milliseconds."""
        return super().advance(dt)

    def _end_speed_boost(self) -> None:
        self.speed = _NORMAL_SPEED