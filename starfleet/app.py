"""Menu pages and the window that plays the game."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from starfleet.bullets import EnemyBullet, PlayerBullet
from starfleet.enemy import Enemy
from starfleet.motion import Item
from starfleet.player import Health, Player
from starfleet.powerup import PowerUp
from starfleet.scene import Scene

MENU_MUSIC = "sounds/waludu dan dan danali.mp3"
GAME_MUSIC = "sounds/linggang guli guli.mp3"

_SCREEN_SIZE = 800
_FPS = 60


class Page(Enum):
    """Pages of the window, in stacking order."""

    MENU = 0
    GAME = 1
    GAME_OVER = 2
    HOW_TO_PLAY = 3


@dataclass
class _Button:
    label: str
    x: int
    y: int
    width: int
    height: int
    shown: bool = False

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


class Menu:
    """Which page is showing, which buttons are live and what music plays."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.scene = Scene(rng)
        self.scene.on_game_ended = self.game_end_page
        self.page = Page.MENU
        self.volume = 0.5
        self.music: Optional[str] = MENU_MUSIC
        self.buttons = {
            "play": _Button("START GAME", 300, 300, 200, 50),
            "how_to_play": _Button("How To Play", 300, 400, 200, 50),
            "back": _Button("back", 50, 700, 100, 50),
            "main_menu": _Button("MAIN MENU", 300, 500, 200, 50),
        }
        self._actions = {
            "play": self.start_game,
            "how_to_play": self.go_how_to_play,
            "back": self.go_back,
            "main_menu": self.go_main_menu,
        }
        self._show("play", "how_to_play")

    def _show(self, *names: str) -> None:
        for name, button in self.buttons.items():
            button.shown = name in names

    def _click(self, x: float, y: float) -> bool:
        for name, button in self.buttons.items():
            if button.shown and button.contains(x, y):
                self._actions[name]()
                return True
        return False

    def start_game(self) -> None:
        self._show()
        self.page = Page.GAME
        self.scene.game_start()
        self.music = GAME_MUSIC

    def go_main_menu(self) -> None:
        self.page = Page.MENU
        self.music = MENU_MUSIC
        self._show("play", "how_to_play")

    def go_back(self) -> None:
        self.page = Page.MENU
        self._show("play", "how_to_play")

    def go_how_to_play(self) -> None:
        self.page = Page.HOW_TO_PLAY
        self._show("back")

    def game_end_page(self) -> None:
        self.page = Page.GAME_OVER
        self.music = None
        self._show("main_menu")


_PAGE_IMAGES = {
    Page.MENU: "images/menu background.png",
    Page.HOW_TO_PLAY: "images/how to play.png",
    Page.GAME_OVER: "images/game over.png",
}
_LOGO = "images/galaga png.png"

_FALLBACK_COLOURS = (
    (Player, (80, 160, 255)),
    (Enemy, (220, 60, 60)),
    (EnemyBullet, (255, 140, 0)),
    (PlayerBullet, (255, 255, 120)),
    (Health, (230, 40, 90)),
    (PowerUp, (90, 220, 120)),
)


class _Images:
    def __init__(self, pygame, assets: Path) -> None:
        self._pygame = pygame
        self._assets = assets
        self._cache: dict = {}

    def get(self, path: Optional[str], width: float, height: float):
        if path is None or width <= 0 or height <= 0:
            return None
        key = (path, int(width), int(height))
        if key not in self._cache:
            self._cache[key] = self._load(path, key[1], key[2])
        return self._cache[key]

    def _load(self, path: str, width: int, height: int):
        file = self._assets / path
        if not file.is_file():
            return None
        try:
            surface = self._pygame.image.load(str(file)).convert_alpha()
        except self._pygame.error:
            return None
        return self._pygame.transform.smoothscale(surface, (width, height))


class _Music:
    def __init__(self, pygame, assets: Path, enabled: bool) -> None:
        self._pygame = pygame
        self._assets = assets
        self._current: Optional[str] = None
        self._enabled = False
        if enabled:
            try:
                pygame.mixer.init()
                self._enabled = True
            except pygame.error:
                pass

    def sync(self, track: Optional[str], volume: float) -> None:
        if track == self._current:
            return
        self._current = track
        if not self._enabled:
            return
        music = self._pygame.mixer.music
        music.stop()
        if track is None or not (self._assets / track).is_file():
            return
        try:
            music.load(str(self._assets / track))
            music.set_volume(volume)
            music.play()
        except self._pygame.error:
            pass


def _fallback_colour(item: Item):
    for kind, colour in _FALLBACK_COLOURS:
        if isinstance(item, kind):
            return colour
    return None


def _draw(pygame, screen, font, images: _Images, menu: Menu) -> None:
    screen.fill((0, 0, 0))
    if menu.page is Page.GAME:
        left, top = menu.scene.rect[0], menu.scene.rect[1]
        for item in menu.scene.items:
            item_left, item_top, _, _ = item.bounds
            rect = pygame.Rect(
                int(item_left - left), int(item_top - top), int(item.width), int(item.height)
            )
            image = images.get(item.image, item.width, item.height)
            if image is not None:
                screen.blit(image, rect)
            else:
                colour = _fallback_colour(item)
                if colour is not None:
                    pygame.draw.rect(screen, colour, rect)
        return
    background = images.get(_PAGE_IMAGES[menu.page], _SCREEN_SIZE, _SCREEN_SIZE)
    if background is not None:
        screen.blit(background, (0, 0))
    if menu.page is Page.MENU:
        logo = images.get(_LOGO, 300, 300)
        if logo is not None:
            screen.blit(logo, (250, 0))
    for button in menu.buttons.values():
        if not button.shown:
            continue
        rect = pygame.Rect(button.x, button.y, button.width, button.height)
        pygame.draw.rect(screen, (225, 225, 225), rect)
        pygame.draw.rect(screen, (60, 60, 60), rect, 2)
        label = font.render(button.label, True, (20, 20, 20))
        screen.blit(label, label.get_rect(center=rect.center))


def _run(assets: Path, mute: bool) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((_SCREEN_SIZE, _SCREEN_SIZE))
        pygame.display.set_caption("Starfleet")
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 28)
        images = _Images(pygame, assets)
        music = _Music(pygame, assets, enabled=not mute)
        menu = Menu()
        running = True
        while running:
            dt = clock.tick(_FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if menu.page is Page.GAME:
                        menu.scene.mouse_press(event.pos[0] + menu.scene.rect[0])
                    elif event.button == 1:
                        menu._click(*event.pos)
                elif event.type == pygame.KEYDOWN:
                    if menu.page is Page.GAME and event.key == pygame.K_SPACE:
                        menu.scene.key_press(Scene.SPACE, False)
            if menu.page is Page.GAME:
                menu.scene.advance(dt)
            music.sync(menu.music, menu.volume)
            _draw(pygame, screen, font, images, menu)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="starfleet", description="A vertical space shooter.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("assets"),
        help="directory holding the images/ and sounds/ folders",
    )
    parser.add_argument("--mute", action="store_true", help="play without music")
    args = parser.parse_args(argv)
    _run(args.assets, args.mute)
    return 0