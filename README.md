# ballz

An arcade brick-breaker for the desktop, drawn with `pygame`. Each round a
new row of numbered blocks drops in from the top. Drag the mouse downwards
and release to fire your balls up at them; every hit takes one point off a
block. Survive as many rounds as you can before a block reaches the bottom
row.

## Installing

```
pip install .
```

## Playing

```
ballz
ballz --resources path/to/assets
```

`--resources` names the directory holding the images, fonts, sounds and
the two data files (default: `resource` in the working directory).

The game opens on the title screen. Press any key to start.

- **Aiming and launching:** press the mouse button, drag downwards and
  release. The balls fly in the direction opposite to the drag, one after
  another, and a dotted guide shows the shot while you drag.
- **Speed up:** six seconds after a launch a button appears near the top
  right corner. Click it for double speed; after twelve seconds a second
  click makes the balls faster still.
- **Green rings** give you an extra ball for the next round.
- **Orange rings** are coins, spent in the shop on ball colours.
- **Pause:** the round button in the top left corner opens the pause screen
  with continue, replay and menu buttons.
- Clicking the footer text at the bottom of the window turns on a cheat
  mode: blocks break on the first hit and different music plays.

On the title screen the three buttons open the help page, switch the sound
on and off, and open the shop. Leaving the shop by its back button leads to
the pause screen. A cleared board is celebrated at the start of the next
round, and a new high score is announced on the game-over screen; press any
key there to play again.

## Files

Inside the resources directory:

- `save.txt` holds six lines: coins, record, red, green and blue of the
  ball colour, and volume. It is rewritten while the title screen or the
  game-over screen is showing. If it is missing the game starts with no
  coins, no record, white balls and volume 0.5.
- `loja.txt` holds eight lines `red green blue bought price` (`bought` is
  1 or 0) followed by a line with the index of the colour in use. It is read
  when the shop opens and written when you leave it. If it is missing the
  shop is empty.

## What it does not do

The images, fonts and sounds are not shipped with the package; supply them
in the resources directory (file names are listed in `ballz.config`).
Missing images are simply not drawn, missing fonts fall back to pygame's
default font, and missing sounds stay silent, as does everything when no
audio device is available. The package also ships no default `loja.txt`,
so the shop has nothing to sell until you provide one.

## Code layout

- `ballz.app` — `BallzApp` (`handle_event`, `tick`, `run`) and `main`.
- `ballz.engine` — round setup, aiming, ball physics and the end-of-game
  check (`start_round`, `advance_rows`, `launch`, `move_balls`, ...).
- `ballz.state` — the `Cannon`, `Game`, `Shop` data and `load_cannon`.
- `ballz.menu` — save and shop files, button hit-testing, buying colours.
- `ballz.render` — drawing of every screen.
- `ballz.resources` — loading assets and playing sounds.

## Running the tests

```
pip install .[test]
pytest
```