"""Drawing of the board, menus, shop, pause, help and game-over screens."""

from __future__ import annotations

from typing import Optional

import pygame

from ballz.config import CELL_SIZE, COLUMNS, RADIUS, ROWS
from ballz.engine import COIN, EXTRA_BALL
from ballz.resources import Resources
from ballz.state import Cannon, Game, Screen, Shop

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
_FOOTER = "Ballz"


def _rgb(red: int, green: int, blue: int) -> tuple[int, int, int]:
    return red % 256, green % 256, blue % 256


def block_color(value: int) -> tuple[int, int, int]:
    """Fill colour of a block holding ``value`` hits."""
    k = value - 1
    return _rgb(255 - 10 * k, 255 - 20 * k, 5 * k)


def _text(surface, font, text, color, x, y, center=True) -> None:
    image = font.render(text, True, color)
    rect = image.get_rect(midtop=(x, y)) if center else image.get_rect(topleft=(x, y))
    surface.blit(image, rect)


def _blit(surface, image: Optional[pygame.Surface], x, y) -> None:
    if image is not None:
        surface.blit(image, (x, y))


def _shade(surface, rect, alpha: float = 0.75) -> None:
    veil = pygame.Surface((rect[2], rect[3]), pygame.SRCALPHA)
    veil.fill((0, 0, 0, round(255 * alpha)))
    surface.blit(veil, (rect[0], rect[1]))


def _ellipse(surface, color, cx, cy, rx, ry, width) -> None:
    pygame.draw.ellipse(surface, color, pygame.Rect(cx - rx, cy - ry, 2 * rx, 2 * ry), width)


def _footer(surface, resources: Resources, game: Game) -> None:
    color = (240, 0, 0) if game.cheat else WHITE
    _text(surface, resources.fonts["arial_small"], _FOOTER, color, 225, 575)


def _pulse(frames: int) -> int:
    return frames % 20 + 1 if frames % 40 < 20 else 20 - frames % 20


def draw_board(surface, resources: Resources, cannon: Cannon, game: Game, offset: int, screen: Screen) -> None:
    """Draw the playfield, balls and score bar; shifts blocks down by ``offset``."""
    surface.fill(BLACK)
    images, fonts = resources.images, resources.fonts
    for row in range(1, ROWS - 1):
        for col in range(1, COLUMNS - 1):
            value = game.board[row][col]
            x, y = col * CELL_SIZE, row * CELL_SIZE + offset
            if value > 0:
                pygame.draw.rect(surface, block_color(value), (x, y, CELL_SIZE, CELL_SIZE))
                top = game.max_values[row][col]
                if value <= top // 5:
                    frame = images["frame_low"]
                elif value <= top // 2:
                    frame = images["frame_half"]
                else:
                    frame = images["frame_full"]
                _blit(surface, frame, x, y)
                _text(surface, fonts["arial_small"], str(value), BLACK, x + 25, y + 20)
            elif value == EXTRA_BALL:
                _ellipse(surface, (0, 200, 0), x + 25, y + 25, _pulse(game.frames), 20, 4)
                pygame.draw.circle(surface, (0, 200, 0), (x + 25, y + 25), 10)
            elif value == COIN:
                _ellipse(surface, (255, 123, 0), x + 25, y + 25, _pulse(game.frames), 20, 3)

    if screen == Screen.MOVING and game.frames >= 360:
        shade = {1: (25, 25, 25), 2: (123, 0, 0)}.get(game.speed, (255, 0, 0))
        pygame.draw.circle(surface, shade, (375, 75), 20)
        _blit(surface, images["speed"], 355, 55)

    color = _rgb(cannon.red, cannon.green, cannon.blue)
    for ball in cannon.balls[: cannon.active]:
        pygame.draw.circle(surface, color, (ball.center.x, ball.center.y), RADIUS)

    pos = cannon.position
    if screen == Screen.SETUP:
        pygame.draw.circle(surface, (0, 255, 0), (pos.x, pos.y), RADIUS, 2)
        for ball in cannon.balls[: cannon.active]:
            if ball.center.x != pos.x and ball.center.y == pos.y:
                ball.center.x = pos.x + (ball.center.x - pos.x) / 2

    _blit(surface, images["border"], 0, 0)
    if screen in (Screen.SETUP, Screen.AIM):
        _text(surface, fonts["arial_small"], f"x{cannon.active}", WHITE, pos.x + 3 * RADIUS, pos.y - 3 * RADIUS)
    _blit(surface, images["pause"], 5, 5)

    pygame.draw.circle(surface, (255, 123, 0), (325, 25), 20, 2)
    _text(surface, fonts["pixel_small"], "moedas", (250, 123, 0), 350, 5, center=False)
    _text(surface, fonts["pixel_medium"], str(cannon.coins), WHITE, 350, 20, center=False)
    _text(surface, fonts["pixel_large"], str(game.round), BLACK, 225, 5)
    _text(surface, fonts["pixel_small"], "recorde", (250, 250, 0), 110, 5)
    _text(surface, fonts["pixel_medium"], str(cannon.record), BLACK, 110, 20)
    _footer(surface, resources, game)


def _shop_center(index: int) -> tuple[int, int]:
    return 150 + (index // 2 % 4) * 100, 150 + (index % 2) * 150


def draw_shop(surface, resources: Resources, shop: Shop, option: int) -> None:
    """Draw the colour shop over the menu, highlighting ``option``."""
    fonts = resources.fonts
    _shade(surface, (75, 25, 300, 490))
    _text(surface, fonts["pixel_huge"], "LOJINHA", WHITE, 225, 25)
    pygame.draw.circle(surface, RED, (100, 50), 24)
    _blit(surface, resources.images["return"], 85, 35)
    if option == 8:
        pygame.draw.circle(surface, WHITE, (100, 50), 24, 3)
        _text(surface, fonts["pixel_small"], "Voltar", WHITE, 124, 30, center=False)

    for index, item in enumerate(shop.items):
        cx, cy = _shop_center(index)
        color = _rgb(item.red, item.green, item.blue)
        pygame.draw.circle(surface, (200, 200, 200) if index == option else BLACK, (cx, cy), 40)
        pygame.draw.circle(surface, color, (cx - 20, cy), RADIUS)
        if item.bought:
            _text(surface, fonts["pixel_medium"], "Obtido", color, cx, cy)
        else:
            _text(surface, fonts["pixel_small"], "Comprar", color, cx, cy)
            _text(surface, fonts["pixel_small"], str(item.price), color, cx + 25, cy)
        if index == shop.in_use:
            pygame.draw.circle(surface, (0, 123, 0), (cx, cy), 40, 6)
            _text(surface, fonts["pixel_small"], "Em Uso", (0, 123, 0), cx, cy - 60)


def _option_ring(surface, fonts, option: int, labels: tuple[str, str, str]) -> None:
    if option:
        pygame.draw.circle(surface, WHITE, (option * 100 + 25, 325), 25, 2)
        _text(surface, fonts["pixel_small"], labels[option - 1], WHITE, option * 100 + 25, 355)


def draw_menu(surface, resources: Resources, game: Game, option: int, cannon: Cannon) -> None:
    """Draw the title screen; advances the game's animation tick."""
    fonts, images = resources.fonts, resources.images
    surface.fill(BLACK)
    _text(surface, fonts["pixel_huge"], "Ballz", RED, 225, 175)
    phase = game.tick % 30 // 3
    if game.tick % 60 >= 30:
        _text(surface, fonts["pixel_small"], "Press any key to start", WHITE, 225 - phase, 450 - phase)
    else:
        _text(surface, fonts["pixel_small"], "Press any key to start", WHITE, 215 + phase, 440 + phase)
    game.tick += 1

    pygame.draw.circle(surface, RED, (125, 325), 25)
    _blit(surface, images["help"], 105, 305)
    pygame.draw.circle(surface, (75, 75, 75) if cannon.volume == 0 else RED, (225, 325), 25)
    _blit(surface, images["note"], 205, 305)
    pygame.draw.circle(surface, RED, (325, 325), 25)
    _blit(surface, images["shop"], 305, 305)
    _option_ring(surface, fonts, option, ("Ajuda", "Som", "Loja"))
    _footer(surface, resources, game)


def draw_pause(surface, resources: Resources, option: int) -> None:
    """Draw the pause overlay with continue, replay and menu buttons."""
    fonts, images = resources.fonts, resources.images
    _shade(surface, (0, 0, 450, 550))
    _text(surface, fonts["pixel_large"], "PAUSE", (250, 250, 0), 225, 225)
    for x, key in ((125, "return"), (225, "replay"), (325, "menu")):
        pygame.draw.circle(surface, RED, (x, 325), 25)
        _blit(surface, images[key], x - 20, 305)
    _option_ring(surface, fonts, option, ("Continue", "Replay", "Menu"))


_HELP_LINES = (
    ("arial_large", RED, 90, "O Jogo"),
    ("arial_small", WHITE, 140, "Seu Objetivo é não deixar os"),
    ("arial_small", WHITE, 160, "blocos chegarem na base;"),
    ("arial_small", WHITE, 180, "Quanto mais rodadas você durar"),
    ("arial_small", WHITE, 200, "Mais Pontos você faz!!"),
    ("arial_large", RED, 220, "Lançamento"),
    ("arial_small", WHITE, 280, "Clique em algum lugar da tela;"),
    ("arial_small", WHITE, 300, "Mova o mouse para baixo;"),
    ("arial_small", WHITE, 320, "Ao soltar o botão, a bola será arremessada;"),
    ("arial_large", RED, 340, "Colete Moedas!!"),
    ("arial_small", WHITE, 390, "Você pode usa-las para trocar"),
    ("arial_small", WHITE, 410, "a cor da sua bolinha"),
    ("arial_small", WHITE, 430, "Isso não te deixará mais poderoso,"),
    ("arial_small", WHITE, 450, "mas adiciona pontos de estilo!"),
)


def draw_help(surface, resources: Resources, game: Game) -> None:
    """Draw the how-to-play panel."""
    fonts = resources.fonts
    _shade(surface, (50, 50, 350, 500))
    pygame.draw.rect(surface, WHITE, (50, 50, 350, 500), 3)
    _text(surface, fonts["pixel_medium"], "Como Jogar", WHITE, 225, 55)
    for font, color, y, line in _HELP_LINES:
        _text(surface, fonts[font], line, color, 225, y)
    if game.frames % 30 > 10:
        _text(surface, fonts["pixel_small"], "Press any key to return", WHITE, 225, 500)


def draw_game_over(surface, resources: Resources, cannon: Cannon, game: Game, new_record: bool) -> None:
    """Draw the final board with the score and, if earned, the new-record banner."""
    fonts = resources.fonts
    draw_board(surface, resources, cannon, game, 0, Screen.GAME_OVER)
    _shade(surface, (0, 0, 450, 600))
    _text(surface, fonts["pixel_large"], "Fim de Jogo", RED, 225, 105)
    _text(surface, fonts["pixel_large"], str(game.round), WHITE, 225, 205)
    _text(surface, fonts["pixel_medium"], "Pontos", RED, 225, 270)
    _text(surface, fonts["pixel_small"], "Pressione qualquer tecla para jogar novamente", WHITE, 225, 450)
    if new_record:
        _text(surface, fonts["arial_medium"], "NOVO RECORDE!!", (220, 220, 0), 225, 310)