import pytest

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
from ballz.state import Cannon, Screen, Shop, ShopItem, load_cannon

ITEM_CENTERS = [
    (150, 150), (150, 300), (250, 150), (250, 300),
    (350, 150), (350, 300), (450, 150), (450, 300),
]


def _shop():
    items = [ShopItem(10 * i, 20, 30, price=5 * i, bought=(i == 0)) for i in range(8)]
    return Shop(items, 0)


def test_save_game_format(tmp_path):
    path = tmp_path / "save.txt"
    cannon = Cannon(coins=7, record=12, red=1, green=2, blue=3, volume=0.5)
    save_game(cannon, path)
    assert path.read_text() == "7\n12\n1\n2\n3\n0.500000\n"


def test_save_game_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    cannon = Cannon(coins=99, record=40, red=200, green=100, blue=50, volume=0.0)
    save_game(cannon, path)
    loaded = load_cannon(path)
    assert (loaded.coins, loaded.record) == (99, 40)
    assert (loaded.red, loaded.green, loaded.blue) == (200, 100, 50)
    assert loaded.volume == 0.0


def test_shop_round_trip(tmp_path):
    path = tmp_path / "loja.txt"
    shop = _shop()
    shop.in_use = 3
    save_shop(shop, path)
    assert open_shop(path) == shop


def test_save_shop_layout(tmp_path):
    path = tmp_path / "loja.txt"
    save_shop(_shop(), path)
    lines = path.read_text().split("\n")
    assert lines[0] == "0 20 30 1 0"
    assert lines[-1] == "0"
    assert len(lines) == 9


def test_open_shop_rejects_short_file(tmp_path):
    path = tmp_path / "loja.txt"
    path.write_text("1 2 3 0 5\n")
    with pytest.raises(ValueError):
        open_shop(path)


def test_open_shop_rejects_short_line(tmp_path):
    path = tmp_path / "loja.txt"
    path.write_text("1 2 3\n" * 8 + "0")
    with pytest.raises(ValueError):
        open_shop(path)


@pytest.mark.parametrize(
    "point, expected",
    [((125, 325), 1), ((225, 325), 2), ((325, 325), 3), ((0, 0), 0), ((150, 325), 1)],
)
def test_circle_option(point, expected):
    assert circle_option(*point) == expected


def test_shop_option_items_and_back():
    for index, center in enumerate(ITEM_CENTERS):
        assert shop_option(*center) == index
    assert shop_option(100, 50) == 8
    assert shop_option(0, 590) == 9


def test_select_option_pause_buttons():
    cannon = Cannon()
    assert select_option(125, 325, Screen.MOVING, Screen.PAUSE, cannon)[0] == Screen.MOVING
    assert select_option(225, 325, Screen.MOVING, Screen.PAUSE, cannon)[0] == Screen.RESET
    assert select_option(325, 325, Screen.MOVING, Screen.PAUSE, cannon)[0] == Screen.MENU
    assert select_option(0, 0, Screen.MOVING, Screen.PAUSE, cannon)[0] == Screen.PAUSE


def test_select_option_menu_buttons():
    cannon = Cannon()
    assert select_option(125, 325, Screen.SETUP, Screen.MENU, cannon) == (
        Screen.HELP, VolumeChange.NONE)
    assert select_option(325, 325, Screen.SETUP, Screen.MENU, cannon) == (
        Screen.SHOP, VolumeChange.NONE)


def test_select_option_toggles_volume():
    cannon = Cannon(volume=0.5)
    assert select_option(225, 325, Screen.SETUP, Screen.MENU, cannon) == (
        Screen.MENU, VolumeChange.MUTE)
    assert cannon.volume == 0
    assert select_option(225, 325, Screen.SETUP, Screen.MENU, cannon) == (
        Screen.MENU, VolumeChange.UNMUTE)
    assert cannon.volume == 0.5


def test_select_option_other_screen_unchanged():
    cannon = Cannon(volume=0.5)
    assert select_option(225, 325, Screen.SETUP, Screen.HELP, cannon) == (
        Screen.HELP, VolumeChange.NONE)
    assert cannon.volume == 0.5


def test_buy_item_with_enough_coins():
    shop = _shop()
    cannon = Cannon(coins=15)
    price = shop.items[3].price
    assert buy_item(*ITEM_CENTERS[3], shop, cannon) == Screen.SHOP
    assert shop.items[3].bought is True
    assert cannon.coins == 15 - price
    assert shop.in_use == 3
    assert (cannon.red, cannon.green, cannon.blue) == (
        shop.items[3].red, shop.items[3].green, shop.items[3].blue)


def test_buy_item_without_enough_coins():
    shop = _shop()
    cannon = Cannon(coins=1, red=9, green=9, blue=9)
    assert buy_item(*ITEM_CENTERS[5], shop, cannon) == Screen.SHOP
    assert shop.items[5].bought is False
    assert cannon.coins == 1
    assert shop.in_use == 0
    assert (cannon.red, cannon.green, cannon.blue) == (9, 9, 9)


def test_equip_owned_item_is_free():
    shop = _shop()
    shop.items[2].bought = True
    cannon = Cannon(coins=0)
    buy_item(*ITEM_CENTERS[2], shop, cannon)
    assert cannon.coins == 0
    assert shop.in_use == 2
    assert cannon.red == shop.items[2].red


def test_buy_item_back_button_and_miss():
    shop = _shop()
    cannon = Cannon()
    assert buy_item(100, 50, shop, cannon) == Screen.PAUSE
    assert buy_item(0, 590, shop, cannon) == Screen.SHOP