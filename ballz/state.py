"""Game state: the cannon, its balls, the block board and the colour shop."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Union

from ballz.config import COLUMNS, INITIAL_CAPACITY, RADIUS, ROWS, SAVE_FILE

PathArg = Union[str, "PathLike[str]"]

CANNON_X = 225
CANNON_Y = 500 - RADIUS

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(text: str) -> int:
    """Read a leading integer from ``text``; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_float(text: str) -> float:
    """Read a leading decimal number from ``text``; 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


class Screen(IntEnum):
    """The screens the main loop moves between."""

    SETUP = 0
    AIM = 1
    MOVING = 2
    RESET = 3
    GAME_OVER = 4
    PAUSE = 5
    MENU = 6
    HELP = 7
    SHOP = 8


@dataclass
class Vector:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Ball:
    center: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)


def _resting_balls(count: int, x: float, y: float) -> list[Ball]:
    return [Ball(Vector(x, y), Vector(0.0, 0.0)) for _ in range(count)]


@dataclass
class Cannon:
    """The launcher, the balls it owns and the player's saved progress."""

    position: Vector = field(default_factory=lambda: Vector(CANNON_X, CANNON_Y))
    total: int = INITIAL_CAPACITY
    new_balls: int = 0
    active: int = 1
    coins: int = 0
    record: int = 0
    red: int = 255
    green: int = 255
    blue: int = 255
    volume: float = 0.5
    balls: list[Ball] = field(
        default_factory=lambda: _resting_balls(INITIAL_CAPACITY, CANNON_X, CANNON_Y)
    )


def _empty_grid() -> list[list[int]]:
    return [[0] * COLUMNS for _ in range(ROWS)]


@dataclass
class Game:
    """Block board and per-round counters."""

    board: list[list[int]] = field(default_factory=_empty_grid)
    max_values: list[list[int]] = field(default_factory=_empty_grid)
    round: int = 0
    frames: int = 0
    speed: int = 1
    tick: int = 0
    cheat: bool = False
    perfect: bool = False


@dataclass
class ShopItem:
    red: int = 0
    green: int = 0
    blue: int = 0
    price: int = 0
    bought: bool = False


@dataclass
class Shop:
    items: list[ShopItem] = field(default_factory=list)
    in_use: int = 0


def random_between(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    return random.randint(low, high)


def load_cannon(path: PathArg = SAVE_FILE) -> Cannon:
    """Build a fresh cannon, taking coins, record, colour and volume from a save file."""
    lines = Path(path).read_text().splitlines()
    fields = (lines + [""] * 6)[:6]
    return Cannon(
        coins=parse_int(fields[0]),
        record=parse_int(fields[1]),
        red=parse_int(fields[2]),
        green=parse_int(fields[3]),
        blue=parse_int(fields[4]),
        volume=parse_float(fields[5]),
    )


def new_game() -> Game:
    """Return an empty board at round zero."""
    return Game()