"""Fixed dimensions of the playfield and locations of the game's data files."""

from pathlib import Path

INITIAL_CAPACITY = 50
"""Number of ball slots a fresh cannon starts with."""

RADIUS = 5
"""Radius of a ball, in pixels."""

ROWS = 11
COLUMNS = 9
CELL_SIZE = 50

SHOP_ITEMS = 8

RESOURCE_DIR = Path("resource")

BORDER_IMAGE = "borda.png"
SPEED_IMAGE = "acel.png"
RETURN_IMAGE = "return.png"
REPLAY_IMAGE = "replay.png"
MENU_IMAGE = "menu.png"
FULL_FRAME_IMAGE = "caixa_full.png"
HALF_FRAME_IMAGE = "caixa_mid.png"
LOW_FRAME_IMAGE = "caixa_end.png"
PAUSE_IMAGE = "pause.png"
NOTE_IMAGE = "nota.png"
PERFECT_IMAGE = "menotimo.png"
SHOP_IMAGE = "market.png"
HELP_IMAGE = "help.png"

BACKGROUND_SOUND = "background.wav"
END_SOUND = "end.wav"
EXTRA_SOUND = "extra.wav"
COIN_SOUND = "coin.wav"
CHEAT_SOUND = "final_countdown.wav"
PERFECT_SOUND = "perfect.wav"
RECORD_SOUND = "record.wav"

ARIAL_FONT = "arial.ttf"
PIXEL_FONT = "8_bit.ttf"

SAVE_FILE = RESOURCE_DIR / "save.txt"
SHOP_FILE = RESOURCE_DIR / "loja.txt"