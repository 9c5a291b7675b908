"""Round setup, aiming, ball physics and the end-of-game check."""

from __future__ import annotations

import math
from enum import Enum

from ballz.config import CELL_SIZE, COLUMNS, RADIUS, ROWS
from ballz.state import Ball, Cannon, Game, Screen, Vector, random_between

COIN = -2
EXTRA_BALL = -1

_LAST_ROW = ROWS - 2
_LEFT_WALL = 50 + RADIUS
_RIGHT_WALL = 400 - RADIUS
_TOP_WALL = 50 + RADIUS
_FLOOR = 500 - RADIUS
_BALL_SPEED = 5
_LAUNCH_GAP = 5
_PREVIEW_DOTS = 8


class Sound(Enum):
    """Effects the engine asks to be played."""

    PERFECT = "perfect"
    RECORD = "record"
    END = "end"
    EXTRA = "extra"
    COIN = "coin"


def _inner_columns() -> range:
    return range(1, COLUMNS - 1)


def _cell(board: list[list[int]], row: int, col: int) -> int:
    if 0 <= row < len(board) and 0 <= col < len(board[row]):
        return board[row][col]
    return 0


def check_perfect(game: Game) -> bool:
    """True when no block is left inside the playfield."""
    return not any(
        game.board[row][col] > 0
        for row in range(1, ROWS - 1)
        for col in _inner_columns()
    )


def _fill_top_row(game: Game) -> None:
    top = game.board[1]
    top_max = game.max_values[1]
    remaining = random_between(3, 5)
    coin_placed = False
    while remaining:
        pos = random_between(1, 7)
        if top[pos] != 0:
            continue
        if random_between(1, 4) > 1:
            value = game.round if random_between(1, 5) != 1 else game.round * 2
            top[pos] = value
            top_max[pos] = value
            remaining -= 1
        elif game.round != 1 and not coin_placed:
            top[pos] = COIN
            coin_placed = True
            remaining -= 1

    while True:
        pos = random_between(1, 7)
        if top[pos] != 0:
            continue
        if game.round != 1:
            top[pos] = EXTRA_BALL
        else:
            top[pos] = game.round
            top_max[pos] = game.round
        break


def start_round(cannon: Cannon, game: Game) -> list[Sound]:
    """Begin a new round: add collected balls and fill the top row with blocks."""
    game.round += 1
    game.speed = 1
    if game.round != 1:
        game.perfect = check_perfect(game)

    cannon.active += cannon.new_balls
    while cannon.active > cannon.total:
        cannon.total += 2 * cannon.total
    if len(cannon.balls) < cannon.total:
        cannon.balls.extend(
            Ball(Vector(cannon.position.x, cannon.position.y), Vector())
            for _ in range(cannon.total - len(cannon.balls))
        )
    for ball in cannon.balls[cannon.active - cannon.new_balls : cannon.active]:
        ball.center.x = cannon.position.x
    cannon.new_balls = 0

    _fill_top_row(game)
    return [Sound.PERFECT] if game.perfect else []


def advance_rows(cannon: Cannon, game: Game) -> tuple[Screen, list[Sound]]:
    """Move every block one row down; the game ends when one reaches the bottom row."""
    game.perfect = False
    game.tick = 0
    board, maxima = game.board, game.max_values
    for row in range(_LAST_ROW, 1, -1):
        for col in _inner_columns():
            board[row][col] = board[row - 1][col]
            maxima[row][col] = maxima[row - 1][col]
    for col in _inner_columns():
        board[1][col] = 0

    if any(board[_LAST_ROW][col] > 0 for col in _inner_columns()):
        sound = Sound.RECORD if cannon.record < game.round else Sound.END
        return Screen.GAME_OVER, [sound]
    return Screen.AIM, []


def aim_preview(
    cannon: Cannon, start: tuple[float, float], current: tuple[float, float]
) -> list[tuple[float, float, int]]:
    """Dots (x, y, radius) showing the aim while the pointer is dragged downwards."""
    start_x, start_y = start
    cur_x, cur_y = current
    if cur_y <= start_y:
        return []
    step_x = (start_x - cur_x) / _PREVIEW_DOTS
    step_y = (start_y - cur_y) / _PREVIEW_DOTS
    return [
        (
            cannon.position.x + step_x * n,
            cannon.position.y + step_y * n,
            4 - n // 2,
        )
        for n in range(1, _PREVIEW_DOTS + 1)
    ]


def launch(
    cannon: Cannon, game: Game, start: tuple[float, float], end: tuple[float, float]
) -> Screen:
    """Fire all active balls opposite to the drag from ``start`` to ``end``."""
    start_x, start_y = start
    end_x, end_y = end
    if not start_y < end_y:
        return Screen.AIM
    dx = start_x - end_x
    dy = start_y - end_y
    length = math.hypot(dx, dy)
    vx = _BALL_SPEED * dx / length
    vy = _BALL_SPEED * dy / length
    for ball in cannon.balls[: cannon.active]:
        ball.center = Vector(cannon.position.x, cannon.position.y)
        ball.velocity = Vector(vx, vy)
    cannon.position.x = 0
    game.speed = 1
    game.frames = 0
    return Screen.MOVING


def _hit(game: Game, row: int, col: int) -> None:
    if game.cheat:
        game.board[row][col] = 0
    else:
        game.board[row][col] -= 1


def _collect(
    cannon: Cannon, game: Game, row: int, col: int, sounds: list[Sound]
) -> None:
    kind = game.board[row][col]
    game.board[row][col] = 0
    if kind == EXTRA_BALL:
        cannon.new_balls += 1
        sounds.append(Sound.EXTRA)
    else:
        cannon.coins += 1
        sounds.append(Sound.COIN)


def _step_ball(cannon: Cannon, game: Game, ball: Ball, sounds: list[Sound]) -> None:
    c, v = ball.center, ball.velocity
    board = game.board

    if c.x + v.x < _LEFT_WALL:
        v.x = -v.x
    if c.x + v.x > _RIGHT_WALL:
        v.x = -v.x
    if c.y + v.y < _TOP_WALL:
        v.y = -v.y
    if c.y + v.y > _FLOOR:
        c.y = _FLOOR
        v.x = 0
        v.y = 0
        if cannon.position.x == 0:
            cannon.position.x = c.x

    sx = 1 if v.x >= 0 else -1
    sy = 1 if v.y >= 0 else -1
    col = int((c.x + RADIUS * sx) / CELL_SIZE)
    row = int((c.y + RADIUS * sy) / CELL_SIZE)

    if _cell(board, row, col) > 0:
        v.x = -v.x
        v.y = -v.y
        _hit(game, row, col)

    side = col + sx
    if _cell(board, row, side) > 0 and math.floor(
        (c.x + v.x + RADIUS * sx) / CELL_SIZE
    ) == side:
        v.x = -v.x
        _hit(game, row, side)
    for pickup in (EXTRA_BALL, COIN):
        if _cell(board, row, side) == pickup and math.floor(
            (c.x + v.x + RADIUS * sx) / CELL_SIZE
        ) == side:
            _collect(cannon, game, row, side, sounds)

    below = row + sy
    if _cell(board, below, col) > 0 and math.floor(
        (c.y + v.y + RADIUS * sy) / CELL_SIZE
    ) == below:
        v.y = -v.y
        _hit(game, below, col)
    for pickup in (EXTRA_BALL, COIN):
        if _cell(board, below, col) == pickup and math.floor(
            (c.y + v.y + RADIUS * sy) / CELL_SIZE
        ) == below:
            _collect(cannon, game, below, col, sounds)

    corner_reach = math.sqrt(RADIUS)
    if (
        _cell(board, below, side) > 0
        and math.floor((c.x + v.x - corner_reach * sx) / CELL_SIZE) == side
        and math.floor((c.y + v.y - corner_reach * sy) / CELL_SIZE) == below
    ):
        ox = c.x - col * CELL_SIZE
        oy = c.y - row * CELL_SIZE
        length = math.hypot(ox, oy)
        v.x = _BALL_SPEED * ox / length
        v.y = _BALL_SPEED * oy / length
        _hit(game, below, side)
    for pickup in (EXTRA_BALL, COIN):
        if (
            _cell(board, below, side) == pickup
            and math.floor((c.x + v.x + RADIUS * sx) / CELL_SIZE) == side
            and math.floor((c.y + v.y + RADIUS * sy) / CELL_SIZE) == below
        ):
            _collect(cannon, game, below, side, sounds)

    c.x += v.x
    c.y += v.y


def move_balls(cannon: Cannon, game: Game) -> tuple[Screen, list[Sound]]:
    """Advance every launched ball, bouncing off walls and blocks.

    Balls leave the cannon one every few frames; the speed setting adds
    extra steps per frame. Returns ``Screen.SETUP`` once every ball rests.
    """
    sounds: list[Sound] = []
    for _ in range(game.speed + 1):
        for index, ball in enumerate(cannon.balls[: cannon.active]):
            if index * _LAUNCH_GAP > game.frames:
                break
            _step_ball(cannon, game, ball, sounds)

    if any(ball.velocity.y != 0 for ball in cannon.balls[: cannon.active]):
        return Screen.MOVING, sounds
    return Screen.SETUP, sounds


def finish_game(cannon: Cannon, game: Game) -> bool:
    """Record the score if it beats the record; True when it did."""
    if game.round > cannon.record:
        cannon.record = game.round
        return True
    return False