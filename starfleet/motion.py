"""Scene items, property animations and timers driven by explicit time steps.

Time is measured in milliseconds. Nothing moves on its own: whoever owns the
items calls ``advance`` with the elapsed time, and animations and timers
belonging to an item run from there.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


def _check_step(dt: float) -> None:
    if dt < 0:
        raise ValueError(f"time step must not be negative: {dt}")


class Animation:
    """Linear interpolation of one property from ``start`` to ``end``."""

    def __init__(
        self,
        setter: Callable[[float], None],
        start: float,
        end: float,
        duration: float,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        if duration < 0:
            raise ValueError(f"duration must not be negative: {duration}")
        self.setter = setter
        self.start = float(start)
        self.end = float(end)
        self.duration = int(duration)
        self.on_finished = on_finished
        self.elapsed = 0.0
        self.running = True

    @property
    def value(self) -> float:
        """The property value for the time elapsed so far."""
        if self.duration == 0:
            return self.end
        fraction = min(self.elapsed / self.duration, 1.0)
        return self.start + (self.end - self.start) * fraction

    def advance(self, dt: float) -> None:
        """Move the animation on by ``dt`` milliseconds and apply the value."""
        _check_step(dt)
        if not self.running:
            return
        self.elapsed = min(self.elapsed + dt, float(self.duration))
        self.setter(self.value)
        # The setter may have destroyed the animated item, which stops us.
        if self.running and self.elapsed >= self.duration:
            self.running = False
            if self.on_finished is not None:
                self.on_finished()


class Timer:
    """Calls ``callback`` every ``interval`` milliseconds, or once if single-shot."""

    def __init__(self, callback: Callable[[], Any], single_shot: bool = False) -> None:
        self.callback = callback
        self.single_shot = single_shot
        self.interval = 0.0
        self.elapsed = 0.0
        self.active = False

    def start(self, interval: float) -> None:
        if interval < 0:
            raise ValueError(f"interval must not be negative: {interval}")
        self.interval = float(interval)
        self.elapsed = 0.0
        self.active = True

    def stop(self) -> None:
        self.active = False

    def advance(self, dt: float) -> None:
        """Let ``dt`` milliseconds pass, firing the callback as often as due."""
        _check_step(dt)
        if not self.active:
            return
        self.elapsed += dt
        if self.interval == 0:
            self.elapsed = 0.0
            if self.single_shot:
                self.active = False
            self.callback()
            return
        while self.active and self.elapsed >= self.interval:
            self.elapsed -= self.interval
            if self.single_shot:
                self.active = False
            self.callback()


class Item:
    """A rectangular thing placed in a scene, owning its animations and timers.

    The bounding rectangle spans ``width`` by ``height`` starting at the
    position shifted by the offset. The scene is any object with ``items``,
    ``add_item`` and ``remove_item``; it assigns itself to ``scene``.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        *,
        width: float = 0.0,
        height: float = 0.0,
        offset_x: float = 0.0,
        offset_y: float = 0.0,
        image: Optional[str] = None,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)
        self.image = image
        self.scene: Any = None
        self.alive = True
        self.animations: list[Animation] = []
        self.timers: list[Timer] = []

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Left, top, right and bottom edges in scene coordinates."""
        left = self.x + self.offset_x
        top = self.y + self.offset_y
        return left, top, left + self.width, top + self.height

    def collides_with(self, other: "Item") -> bool:
        left, top, right, bottom = self.bounds
        o_left, o_top, o_right, o_bottom = other.bounds
        return left < o_right and o_left < right and top < o_bottom and o_top < bottom

    def colliding_items(self) -> list["Item"]:
        if self.scene is None:
            return []
        return [
            item
            for item in list(self.scene.items)
            if item is not self and item.alive and self.collides_with(item)
        ]

    def advance(self, dt: float) -> None:
        """Run this item's animations, then its timers, for ``dt`` milliseconds."""
        _check_step(dt)
        for animation in list(self.animations):
            if not self.alive:
                return
            animation.advance(dt)
        self.animations = [a for a in self.animations if a.running]
        for timer in list(self.timers):
            if not self.alive:
                return
            timer.advance(dt)
        self.timers = [t for t in self.timers if t.active]

    def _animate(
        self,
        setter: Callable[[float], None],
        start: float,
        end: float,
        duration: float,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> Animation:
        animation = Animation(setter, start, end, duration, on_finished)
        self.animations.append(animation)
        return animation

    def _every(self, interval: float, callback: Callable[[], Any]) -> Timer:
        timer = Timer(callback)
        timer.start(interval)
        self.timers.append(timer)
        return timer

    def _after(self, delay: float, callback: Callable[[], Any]) -> Timer:
        timer = Timer(callback, single_shot=True)
        timer.start(delay)
        self.timers.append(timer)
        return timer

    def _require_scene(self) -> Any:
        if self.scene is None:
            raise RuntimeError(f"{type(self).__name__} is not in a scene")
        return self.scene

    def _discard(self) -> None:
        """Stop everything this item runs and take it out of its scene."""
        if not self.alive:
            return
        self.alive = False
        for timer in self.timers:
            timer.stop()
        for animation in self.animations:
            animation.running = False
        scene, self.scene = self.scene, None
        if scene is not None:
            scene.remove_item(self)


class Bullet(Item, ABC):
    """A projectile travelling vertically from its start towards ``end_point``."""

    def __init__(
        self,
        start_x: float,
        start_y: float,
        speed: float,
        end_point: float,
        **geometry: Any,
    ) -> None:
        super().__init__(start_x, start_y, **geometry)
        self.x_pos = float(start_x)
        self.y_pos = float(start_y)
        self.move_speed = float(speed)
        self.end_point = float(end_point)
        self.on_destroyed: Optional[Callable[[], None]] = None

    @abstractmethod
    def move(self) -> None:
        """Start the bullet's flight."""

    @abstractmethod
    def _collide(self) -> bool:
        """Whether the bullet currently hits something it reacts to."""