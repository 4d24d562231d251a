# fortresstanks

A small turn-based artillery game for two players, built on pygame. Each
player has a tank that is drawn from a vector line mesh. On your turn you move
the tank, aim the barrel and charge a shot. When you fire, the turn is over.
If the ten-second turn timer reaches zero, the turn passes to the other
player. Each new turn refills stamina, resets power to zero and picks a new
random wind value between -100 and 99.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Playing

```
fortresstanks
```

This opens an 800×600 window on the menu screen. Press `E` to start a match.
The line mesh files are read from the current directory. To read them from
somewhere else, pass `--resources DIR`:

```
fortresstanks --resources path/to/meshes
```

Controls for the player whose turn it is:

| Key        | Action                                                    |
|------------|-----------------------------------------------------------|
| `A` / `D`  | Move left / right. Moving uses stamina and turns the tank. |
| `W` / `S`  | Raise / lower the barrel, between 0° and 75°.             |
| `Space`    | Hold to charge power up to 100%, release to fire.         |
| `1` / `2`  | Select the normal or the special weapon.                  |

The panel at the bottom of the screen shows:

- the wind bar
- the power bar
- the stamina bar
- the turn timer
- a dial with the tank's facing and the barrel angle
- which weapon is selected
- a minimap frame

The frame rate, the frame time and the mouse position are drawn in the top-left
corner.

## What the game does not do

A fired shell flies in a straight line at a speed set by the charged power. It
never hits anything. The game has no collision detection, no damage, no
terrain and no winner. Wind is shown on the panel but has no effect on a shot.
The special weapon can be selected but behaves the same as the normal one. The
minimap is an empty frame.

## Line meshes

The menu, the UI panel and the tanks are drawn from plain-text line meshes.
They are loaded from the files `Menu.txt`, `UI.txt`, `MissileTank.txt` and
`CanonTank.txt`. If a file is missing, its mesh is left empty and nothing is
drawn for it.

A mesh file starts with the number of lines, followed by one segment per
entry:

```
2
(-10,0)->(10,0)
(0,-5)->(0,5)
```

The `fortresstanks.line_mesh` module reads and writes this format:

- `format_line` writes one segment.
- `parse_line` reads one segment and raises `ValueError` on malformed text.
- `LineMesh.load` reads a file and sets `width` and `height` from the bounding
  box of the segments.
- `LineMesh.save` shifts the segments so that the centre of their bounding box
  is at the origin, then writes them.
- `LineMesh.render` draws the segments at a position, scaled by `ratio_x` and
  `ratio_y`.

`ResourceManager` in `fortresstanks.resources` loads the four named meshes with
`init(directory)` and returns them with `get_line_mesh(key)`.

## Other scenes

`fortresstanks.scenes` also has scenes that the menu does not lead to. To open
one, call `SceneManager.change_scene` with its `SceneType`:

- `EditScene` (`SceneType.EDIT`) is a simple line editor. Left-click to draw
  connected segments and right-click to start a new chain. Press `S` to save
  the drawing to `Unit.txt`, centred. Press `D` to load it back, placed around
  the point (400, 300).
- `DevScene` (`SceneType.DEVELOPMENT`) is a circle you move with `W`, `A`, `S`
  and `D`.
- `GameScene` (`SceneType.GAME`) shows a monster, with the angle between its
  gaze and the mouse pointer.

## Embedding

`fortresstanks.game.Game` can drive frames on any pygame surface:

1. `init(surface)` loads the resources and opens the menu.
2. `update(pressed, mouse_pos)` advances one frame. `pressed` holds the
   `KeyType` values being held.
3. `render()` draws the frame to the surface.

`run()` loops on the display until the window is closed.

## Running the tests

```
pip install .[test]
pytest
```