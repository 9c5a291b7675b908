import math
import random

import pytest

from ballz.config import COLUMNS, ROWS
from ballz.engine import (
    COIN,
    EXTRA_BALL,
    Sound,
    advance_rows,
    aim_preview,
    check_perfect,
    finish_game,
    launch,
    move_balls,
    start_round,
)
from ballz.state import Ball, Cannon, Game, Screen, Vector


def _single_ball(x, y, vx, vy):
    cannon = Cannon()
    cannon.balls[0] = Ball(Vector(x, y), Vector(vx, vy))
    game = Game()
    game.speed = 0
    return cannon, game


def test_check_perfect_empty_board():
    assert check_perfect(Game()) is True


def test_check_perfect_with_block():
    game = Game()
    game.board[3][4] = 2
    assert check_perfect(game) is False


def test_check_perfect_ignores_border_rows():
    game = Game()
    game.board[ROWS - 1][4] = 2
    game.board[0][4] = 2
    assert check_perfect(game) is True


@pytest.mark.parametrize("seed", range(10))
def test_first_round_fills_top_row_with_blocks(seed):
    random.seed(seed)
    cannon, game = Cannon(), Game()
    sounds = start_round(cannon, game)
    assert game.round == 1
    assert sounds == []
    top = game.board[1]
    positives = [v for v in top if v > 0]
    assert 4 <= len(positives) <= 6
    assert all(v in (1, 2) for v in positives)
    assert not any(v < 0 for v in top)
    assert game.max_values[1] == top
    assert top[0] == 0 and top[COLUMNS - 1] == 0


@pytest.mark.parametrize("seed", range(10))
def test_later_round_adds_extra_ball_and_maybe_coin(seed):
    random.seed(seed)
    cannon, game = Cannon(), Game()
    game.round = 1
    game.board[5][3] = 4
    start_round(cannon, game)
    top = game.board[1]
    assert top.count(EXTRA_BALL) == 1
    assert top.count(COIN) <= 1
    assert all(v in (game.round, 2 * game.round) for v in top if v > 0)
    assert game.perfect is False


def test_start_round_reports_perfect_clear():
    random.seed(1)
    cannon, game = Cannon(), Game()
    game.round = 1
    sounds = start_round(cannon, game)
    assert game.perfect is True
    assert sounds == [Sound.PERFECT]


def test_start_round_adds_new_balls_at_cannon():
    random.seed(2)
    cannon, game = Cannon(), Game()
    cannon.position.x = 180
    cannon.new_balls = 3
    start_round(cannon, game)
    assert cannon.active == 4
    assert cannon.new_balls == 0
    assert all(ball.center.x == 180 for ball in cannon.balls[1:4])


def test_start_round_grows_ball_capacity():
    random.seed(3)
    cannon, game = Cannon(), Game()
    old_total = cannon.total
    cannon.active = old_total
    cannon.new_balls = 1
    start_round(cannon, game)
    assert cannon.active == old_total + 1
    assert cannon.total == 3 * old_total
    assert len(cannon.balls) >= cannon.active


def test_advance_rows_shifts_blocks_down():
    cannon, game = Cannon(), Game()
    game.board[1][3] = 7
    game.max_values[1][3] = 7
    game.tick = 50
    game.perfect = True
    screen, sounds = advance_rows(cannon, game)
    assert screen == Screen.AIM
    assert sounds == []
    assert game.board[2][3] == 7
    assert game.max_values[2][3] == 7
    assert game.board[1][3] == 0
    assert game.tick == 0
    assert game.perfect is False


def test_advance_rows_game_over_without_record():
    cannon, game = Cannon(), Game()
    cannon.record = 10
    game.round = 5
    game.board[ROWS - 3][2] = 3
    screen, sounds = advance_rows(cannon, game)
    assert screen == Screen.GAME_OVER
    assert sounds == [Sound.END]


def test_advance_rows_game_over_with_record():
    cannon, game = Cannon(), Game()
    cannon.record = 4
    game.round = 5
    game.board[ROWS - 3][6] = 3
    screen, sounds = advance_rows(cannon, game)
    assert screen == Screen.GAME_OVER
    assert sounds == [Sound.RECORD]


def test_aim_preview_empty_when_dragging_up():
    assert aim_preview(Cannon(), (100, 200), (120, 150)) == []
    assert aim_preview(Cannon(), (100, 200), (120, 200)) == []


def test_aim_preview_dots_follow_drag():
    cannon = Cannon()
    start, current = (100, 100), (60, 180)
    dots = aim_preview(cannon, start, current)
    assert len(dots) == 8
    last_x, last_y, _ = dots[-1]
    assert last_x == pytest.approx(cannon.position.x + start[0] - current[0])
    assert last_y == pytest.approx(cannon.position.y + start[1] - current[1])
    radii = [r for _, _, r in dots]
    assert radii == sorted(radii, reverse=True)
    assert radii[0] == 4


def test_launch_upward_drag_does_nothing():
    cannon, game = Cannon(), Game()
    x_before = cannon.position.x
    assert launch(cannon, game, (100, 200), (100, 150)) == Screen.AIM
    assert cannon.position.x == x_before


def test_launch_fires_active_balls():
    cannon, game = Cannon(), Game()
    cannon.active = 3
    game.frames = 99
    game.speed = 5
    origin = (cannon.position.x, cannon.position.y)
    assert launch(cannon, game, (100, 100), (130, 140)) == Screen.MOVING
    for ball in cannon.balls[:3]:
        assert (ball.center.x, ball.center.y) == origin
        assert math.hypot(ball.velocity.x, ball.velocity.y) == pytest.approx(5)
        assert ball.velocity.x < 0 and ball.velocity.y < 0
    assert cannon.balls[3].velocity.y == 0
    assert cannon.position.x == 0
    assert game.frames == 0
    assert game.speed == 1


def test_move_balls_lands_and_sets_cannon():
    cannon, game = _single_ball(200, 493, 0, 5)
    cannon.position.x = 0
    screen, sounds = move_balls(cannon, game)
    assert screen == Screen.SETUP
    assert sounds == []
    assert cannon.position.x == 200
    assert cannon.balls[0].center.y == cannon.position.y


def test_move_balls_bounces_off_left_wall():
    cannon, game = _single_ball(57, 300, -5, 0)
    move_balls(cannon, game)
    assert cannon.balls[0].velocity.x == 5
    assert cannon.balls[0].center.x > 57


def test_move_balls_hits_block():
    cannon, game = _single_ball(225, 200, 0, -5)
    game.board[3][4] = 2
    screen, _ = move_balls(cannon, game)
    assert screen == Screen.MOVING
    assert game.board[3][4] == 1
    assert cannon.balls[0].velocity.y == 5


def test_move_balls_cheat_clears_block():
    cannon, game = _single_ball(225, 200, 0, -5)
    game.cheat = True
    game.board[3][4] = 9
    move_balls(cannon, game)
    assert game.board[3][4] == 0


def test_move_balls_collects_coin():
    cannon, game = _single_ball(225, 205, 0, -5)
    coins = cannon.coins
    game.board[3][4] = COIN
    _, sounds = move_balls(cannon, game)
    assert game.board[3][4] == 0
    assert cannon.coins == coins + 1
    assert sounds == [Sound.COIN]


def test_move_balls_collects_extra_ball():
    cannon, game = _single_ball(225, 205, 0, -5)
    game.board[3][4] = EXTRA_BALL
    _, sounds = move_balls(cannon, game)
    assert game.board[3][4] == 0
    assert cannon.new_balls == 1
    assert sounds == [Sound.EXTRA]


def test_move_balls_releases_balls_gradually():
    cannon, game = _single_ball(225, 300, 0, -5)
    cannon.active = 2
    cannon.balls[1] = Ball(Vector(225, 400), Vector(0, -5))
    game.frames = 0
    move_balls(cannon, game)
    assert cannon.balls[1].center.y == 400
    assert cannon.balls[0].center.y < 300


def test_finish_game_new_record():
    cannon, game = Cannon(), Game()
    cannon.record = 3
    game.round = 8
    assert finish_game(cannon, game) is True
    assert cannon.record == 8


def test_finish_game_no_record():
    cannon, game = Cannon(), Game()
    cannon.record = 12
    game.round = 8
    assert finish_game(cannon, game) is False
    assert cannon.record == 12