"""Falling power-ups that buff the player on contact."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from starfleet.bullets import _settle
from starfleet.motion import Animation, Item
from starfleet.player import Player

# start height, end height, duration in ms
_FALL = (-600.0, 500.0, 8000)


class PowerType(Enum):
    """Kinds of power-up, each with its image."""

    REPAIR = "images/Repair Kit.png"
    RAPID_FIRE = "images/Rapid Fire.png"
    SPEED_BOOST = "images/Velocity Boost.png"


class PowerUp(Item):
    """A power-up of random kind unless one is given."""

    def __init__(
        self,
        player: Optional[Player] = None,
        power: Optional[PowerType] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if power is None:
            power = list(PowerType)[(rng or random.Random()).randint(0, 2)]
        super().__init__(width=50, height=50, image=power.value)
        self.player = player
        self.power = power
        self.animation: Optional[Animation] = None

    def set_y(self, y: float) -> None:
        _settle(self, y, Player, self.buff_effect)

    def buff_effect(self) -> None:
        player = self.player
        if player is None:
            raise RuntimeError("power-up has no player to affect")
        effects = {
            PowerType.REPAIR: player.receive_heal,
            PowerType.RAPID_FIRE: player.rapid_fire,
            PowerType.SPEED_BOOST: player.speed_boost,
        }
        effects[self.power]()

    def move(self) -> None:
        self.animation = self._animate(self.set_y, *_FALL, self._discard)

    def advance(self, dt):
        """Run the fall forward by ``dt`` milliseconds."""
        return super().advance(dt)