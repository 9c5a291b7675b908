"""Saving progress, the shop file and hit-testing of menu and shop buttons."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from ballz.config import SAVE_FILE, SHOP_FILE, SHOP_ITEMS
from ballz.state import Cannon, PathArg, Screen, Shop, ShopItem, parse_int

_BUTTON_RADIUS_SQ = 625
_SHOP_RADIUS_SQ = 1600
_BACK_RADIUS_SQ = 576
_BACK_CENTER = (100, 50)
_BUTTON_CENTERS = ((125, 325), (225, 325), (325, 325))


class VolumeChange(Enum):
    """What the sound toggle asked the audio system to do."""

    NONE = "none"
    MUTE = "mute"
    UNMUTE = "unmute"


def _inside(x: int, y: int, center: tuple[int, int], radius_sq: int) -> bool:
    cx, cy = center
    return (cx - x) ** 2 + (cy - y) ** 2 <= radius_sq


def _item_center(index: int) -> tuple[int, int]:
    return 150 + (index // 2 % 4) * 100, 150 + (index % 2) * 150


def save_game(cannon: Cannon, path: PathArg = SAVE_FILE) -> None:
    """Write coins, record, ball colour and volume to the save file."""
    Path(path).write_text(
        f"{cannon.coins}\n{cannon.record}\n{cannon.red}\n"
        f"{cannon.green}\n{cannon.blue}\n{cannon.volume:f}\n"
    )


def open_shop(path: PathArg = SHOP_FILE) -> Shop:
    """Read the shop's items and the index of the colour in use."""
    lines = Path(path).read_text().splitlines()
    if len(lines) < SHOP_ITEMS + 1:
        raise ValueError(f"shop file needs {SHOP_ITEMS + 1} lines, found {len(lines)}")
    items = []
    for number, line in enumerate(lines[:SHOP_ITEMS], start=1):
        tokens = line.split()
        if len(tokens) < 5:
            raise ValueError(f"shop line {number} needs 5 fields: {line!r}")
        red, green, blue, bought, price = (parse_int(t) for t in tokens[:5])
        items.append(ShopItem(red, green, blue, price, bought == 1))
    return Shop(items, parse_int(lines[SHOP_ITEMS]))


def save_shop(shop: Shop, path: PathArg = SHOP_FILE) -> None:
    """Write the shop in the format :func:`open_shop` reads."""
    body = "".join(
        f"{item.red} {item.green} {item.blue} {int(item.bought)} {item.price}\n"
        for item in shop.items
    )
    Path(path).write_text(f"{body}{shop.in_use}")


def circle_option(x: int, y: int) -> int:
    """Index (1-3) of the round menu button under the pointer, or 0."""
    for index, center in enumerate(_BUTTON_CENTERS, start=1):
        if _inside(x, y, center, _BUTTON_RADIUS_SQ):
            return index
    return 0


def shop_option(x: int, y: int) -> int:
    """Shop item (0-7) under the pointer, 8 for the back button, 9 for nothing."""
    for index in range(SHOP_ITEMS):
        if _inside(x, y, _item_center(index), _SHOP_RADIUS_SQ):
            return index
    if _inside(x, y, _BACK_CENTER, _BACK_RADIUS_SQ):
        return 8
    return 9


def select_option(
    x: int, y: int, last_screen: Screen, screen: Screen, cannon: Cannon
) -> tuple[Screen, VolumeChange]:
    """Resolve a click on the pause or main menu buttons.

    Returns the next screen and any change the sound toggle made.
    """
    option = circle_option(x, y)
    if screen == Screen.PAUSE and option:
        return (last_screen, Screen.RESET, Screen.MENU)[option - 1], VolumeChange.NONE
    if screen == Screen.MENU and option:
        if option == 1:
            return Screen.HELP, VolumeChange.NONE
        if option == 3:
            return Screen.SHOP, VolumeChange.NONE
        if cannon.volume == 0.5:
            cannon.volume = 0
            return Screen.MENU, VolumeChange.MUTE
        cannon.volume = 0.5
        return Screen.MENU, VolumeChange.UNMUTE
    return screen, VolumeChange.NONE


def buy_item(x: int, y: int, shop: Shop, cannon: Cannon) -> Screen:
    """Buy or equip the clicked colour; the back button leads to the pause screen."""
    for index, item in enumerate(shop.items[:SHOP_ITEMS]):
        if not _inside(x, y, _item_center(index), _SHOP_RADIUS_SQ):
            continue
        if not item.bought and cannon.coins >= item.price:
            cannon.coins -= item.price
            item.bought = True
        if item.bought:
            cannon.red, cannon.green, cannon.blue = item.red, item.green, item.blue
            shop.in_use = index
            return Screen.SHOP
    if _inside(x, y, _BACK_CENTER, _BACK_RADIUS_SQ):
        return Screen.PAUSE
    return Screen.SHOP