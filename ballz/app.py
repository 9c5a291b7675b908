"""The main loop: routing input and frame ticks between the game's screens."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

import pygame

from ballz.config import RESOURCE_DIR, SAVE_FILE, SHOP_FILE
from ballz.engine import (
    Sound,
    advance_rows,
    aim_preview,
    finish_game,
    launch,
    move_balls,
    start_round,
)
from ballz.menu import (
    VolumeChange,
    buy_item,
    circle_option,
    open_shop,
    save_game,
    save_shop,
    select_option,
    shop_option,
)
from ballz.render import (
    draw_board,
    draw_game_over,
    draw_help,
    draw_menu,
    draw_pause,
    draw_shop,
)
from ballz.resources import Resources, load_resources
from ballz.state import Cannon, Game, Screen, Shop, load_cannon, new_game

FPS = 60
SETUP_FRAMES = 50


def _in_circle(pos, center, radius_sq) -> bool:
    return (center[0] - pos[0]) ** 2 + (center[1] - pos[1]) ** 2 <= radius_sq


class BallzApp:
    """Holds the running game and reacts to events and frame ticks."""

    def __init__(
        self,
        surface: pygame.Surface,
        resources: Resources,
        cannon: Optional[Cannon] = None,
        game: Optional[Game] = None,
        save_path=SAVE_FILE,
        shop_path=SHOP_FILE,
    ):
        self.surface = surface
        self.resources = resources
        self.save_path = Path(save_path)
        self.shop_path = Path(shop_path)
        self.cannon = cannon if cannon is not None else self._load_cannon()
        self.game = game if game is not None else new_game()
        self.shop = Shop()
        self.screen = Screen.MENU
        self.last_screen = Screen.SETUP
        self.option = 0
        self.drag_start: Optional[tuple[float, float]] = None
        self.drag_current: Optional[tuple[float, float]] = None
        self.new_record = False
        self.running = True

    def _load_cannon(self) -> Cannon:
        return load_cannon(self.save_path) if self.save_path.is_file() else Cannon()

    def _play(self, sounds) -> None:
        for sound in sounds:
            loud = sound in (Sound.RECORD, Sound.END)
            self.resources.play(sound, self.cannon.volume * (2 if loud else 1))

    def _pause(self) -> None:
        self.last_screen = self.screen
        self.screen = Screen.PAUSE

    def _choose(self, pos) -> None:
        self.screen, change = select_option(*pos, self.last_screen, self.screen, self.cannon)
        if change is VolumeChange.MUTE:
            self.resources.stop_all()
        elif change is VolumeChange.UNMUTE:
            track = "cheat" if self.game.cheat else "background"
            self.resources.play(track, self.cannon.volume, loop=True)

    def handle_event(self, event) -> None:
        """React to one input event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
            return
        down = kind == pygame.MOUSEBUTTONDOWN
        pos = getattr(event, "pos", None)
        if down and 180 <= pos[0] <= 290 and pos[1] >= 575:
            self.game.cheat = True
            self.resources.stop_all()
            self.resources.play("cheat", self.cannon.volume, loop=True)

        screen = self.screen
        pause_hit = down and _in_circle(pos, (25, 25), 400)
        if screen == Screen.SETUP and pause_hit:
            self._pause()
        elif screen == Screen.AIM:
            if pause_hit:
                self._pause()
            elif down:
                self.drag_start = self.drag_current = pos
            elif kind == pygame.MOUSEMOTION and self.drag_start is not None:
                self.drag_current = pos
            elif kind == pygame.MOUSEBUTTONUP and self.drag_start is not None:
                self.screen = launch(self.cannon, self.game, self.drag_start, pos)
                self.drag_start = self.drag_current = None
        elif screen == Screen.MOVING:
            if down and self.game.frames >= 360 and _in_circle(pos, (375, 75), 400):
                if self.game.speed == 1:
                    self.game.speed = 2
                if self.game.speed == 2 and self.game.frames >= 720:
                    self.game.speed = 5
            if pause_hit:
                self._pause()
        elif screen == Screen.GAME_OVER and kind == pygame.KEYDOWN:
            self.screen = Screen.RESET
        elif screen == Screen.PAUSE:
            if kind == pygame.MOUSEMOTION:
                self.option = circle_option(*pos)
            elif down:
                self._choose(pos)
        elif screen == Screen.MENU:
            if kind == pygame.KEYDOWN:
                self.screen = self.last_screen
                self.game.tick = 0
            elif kind == pygame.MOUSEMOTION:
                self.option = circle_option(*pos)
            elif down:
                self._choose(pos)
                if self.screen == Screen.SHOP:
                    try:
                        self.shop = open_shop(self.shop_path)
                    except FileNotFoundError:
                        self.shop = Shop()
        elif screen == Screen.HELP and kind == pygame.KEYDOWN:
            self.screen = Screen.MENU
            self.game.tick = 0
        elif screen == Screen.SHOP:
            if kind == pygame.MOUSEMOTION:
                self.option = shop_option(*pos)
            elif down:
                self.screen = buy_item(*pos, self.shop, self.cannon)
                if self.screen != Screen.SHOP:
                    save_shop(self.shop, self.shop_path)

    def _draw_perfect(self, step: int) -> None:
        image = self.resources.images["perfect"]
        if image is None:
            return
        part = image.subsurface(pygame.Rect(0, 0, 400, 400).clip(image.get_rect()))
        scaled = pygame.transform.scale(part, (225 + 2 * step, 275 + 2 * step))
        self.surface.blit(scaled, (125 - step, 175 - step))

    def tick(self) -> None:
        """Advance one frame and redraw the current screen."""
        game, cannon, surface, res = self.game, self.cannon, self.surface, self.resources
        game.frames += 1
        screen = self.screen
        if screen == Screen.SETUP:
            if game.tick == 0:
                self._play(start_round(cannon, game))
            if game.tick < SETUP_FRAMES:
                draw_board(surface, res, cannon, game, game.tick, Screen.SETUP)
                if game.perfect:
                    self._draw_perfect(game.tick)
                game.tick += 1
            else:
                self.screen, sounds = advance_rows(cannon, game)
                self._play(sounds)
                if self.screen == Screen.GAME_OVER:
                    self.new_record = finish_game(cannon, game)
        elif screen == Screen.AIM:
            draw_board(surface, res, cannon, game, 0, Screen.AIM)
            if self.drag_start is not None:
                for x, y, r in aim_preview(cannon, self.drag_start, self.drag_current):
                    pygame.draw.circle(surface, (255, 255, 255), (x, y), max(r, 1))
        elif screen == Screen.MOVING:
            draw_board(surface, res, cannon, game, 0, Screen.MOVING)
            self.screen, sounds = move_balls(cannon, game)
            self._play(sounds)
        elif screen == Screen.RESET:
            self.game = new_game()
            self.cannon = self._load_cannon()
            self.new_record = False
            self.screen = Screen.SETUP
        elif screen == Screen.GAME_OVER:
            draw_game_over(surface, res, cannon, game, self.new_record)
            save_game(cannon, self.save_path)
        elif screen == Screen.PAUSE:
            draw_board(surface, res, cannon, game, game.tick, Screen.PAUSE)
            draw_pause(surface, res, self.option)
        elif screen == Screen.MENU:
            draw_menu(surface, res, game, self.option, cannon)
            save_game(cannon, self.save_path)
        elif screen == Screen.HELP:
            draw_menu(surface, res, game, self.option, cannon)
            draw_help(surface, res, game)
        elif screen == Screen.SHOP:
            draw_menu(surface, res, game, self.option, cannon)
            draw_shop(surface, res, self.shop, self.option)

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    return
            self.tick()
            pygame.display.flip()
            clock.tick(FPS)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="ballz", description="Ballz arcade game.")
    parser.add_argument("--resources", default=str(RESOURCE_DIR), help="asset directory")
    args = parser.parse_args(argv)
    base = Path(args.resources)
    pygame.init()
    try:
        surface = pygame.display.set_mode((450, 600))
        pygame.display.set_caption("Ballz")
        resources = load_resources(base)
        app = BallzApp(surface, resources, save_path=base / "save.txt", shop_path=base / "loja.txt")
        resources.play("background", app.cannon.volume, loop=True)
        app.run()
    finally:
        pygame.quit()
    return 0