"""The play field: background, player, and timed waves of enemies and power-ups."""

from __future__ import annotations

import random
from typing import Callable, Optional

from starfleet.enemy import Enemy
from starfleet.motion import Item, Timer
from starfleet.player import Player
from starfleet.powerup import PowerUp

_LEFT_X = -350.0
_WAVE_WIDTH = 700.0
_ENEMY_INTERVAL = 3000
_POWER_UP_INTERVAL = 12000
_PLAYER_START = (0.0, 350.0)
_BACKGROUND_SIZE = (800.0, 900.0)
_SPAWN_Y = -600.0


class Scene:
    """Holds every item in play and drives the game's spawning timers.

    Coordinates are centred on the middle of the view.
    """

    SPACE = "space"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: float = 800.0,
        height: float = 800.0,
    ) -> None:
        self.rng = rng or random.Random()
        self.rect = (-width / 2, -height / 2, float(width), float(height))
        self.items: list[Item] = []
        self.player: Optional[Player] = None
        self.on_game_ended: Optional[Callable[[], None]] = None
        self.enemy_timer = Timer(self.spawn_enemy)
        self.power_up_timer = Timer(self.spawn_buff)

    def add_item(self, item: Item) -> None:
        if item not in self.items:
            self.items.append(item)
        item.scene = self

    def remove_item(self, item: Item) -> None:
        if item in self.items:
            self.items.remove(item)
        if item.scene is self:
            item.scene = None

    def set_player(self) -> None:
        player = Player("images/spaceship.png")
        self.player = player
        self.add_item(player)
        player.on_died = self.game_stop
        player.x, player.y = _PLAYER_START
        player.display_health()

    def game_start(self) -> None:
        width, height = _BACKGROUND_SIZE
        background = Item(
            -width / 2,
            -height / 2,
            width=width,
            height=height,
            image="images/space background.png",
        )
        self.add_item(background)
        self.set_player()
        self.enemy_timer.start(_ENEMY_INTERVAL)
        self.power_up_timer.start(_POWER_UP_INTERVAL)

    def game_stop(self) -> None:
        """Stop spawning, clear the field and report the end of the game."""
        self.enemy_timer.stop()
        self.power_up_timer.stop()
        for item in list(self.items):
            item._discard()
        self.items.clear()
        self.player = None
        if self.on_game_ended is not None:
            self.on_game_ended()

    def player_took_damage(self) -> None:
        if self.player is None:
            return
        self.player.receive_damage()

    def mouse_press(self, x: float) -> None:
        """Send the player sliding towards the clicked horizontal position."""
        self._require_player().move(x)

    def key_press(self, key: str, auto_repeat: bool) -> None:
        if key == self.SPACE and not auto_repeat:
            self._require_player().shoot()

    def spawn_enemy(self) -> None:
        """Launch a row of evenly spaced enemies across the field."""
        total = self.rng.randint(5, 14)
        spacing = _WAVE_WIDTH / (total + 1)
        for position in range(1, total + 1):
            enemy = Enemy(self, _LEFT_X + spacing * position, rng=self.rng)
            self.add_item(enemy)
            enemy.on_hit = self.player_took_damage
            enemy.move()

    def spawn_buff(self) -> None:
        offset = self.rng.randint(0, 700)
        power_up = PowerUp(self.player, rng=self.rng)
        self.add_item(power_up)
        power_up.x, power_up.y = offset - 350.0, _SPAWN_Y
        power_up.move()

    def advance(self, dt: float) -> None:
        """Let ``dt`` milliseconds pass for every item, then for the spawners."""
        if dt < 0:
            raise ValueError(f"time step must not be negative: {dt}")
        for item in list(self.items):
            if item.scene is self:
                item.advance(dt)
        self.enemy_timer.advance(dt)
        self.power_up_timer.advance(dt)

    def _require_player(self) -> Player:
        if self.player is None:
            raise RuntimeError("no game is running")
        return self.player