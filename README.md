# cube3d

A small first-person raycasting explorer. It reads a `.cub` scene file and
lets you walk around a textured maze, with a minimap in the top-left corner
of the window.

## Installing

```
pip install .
```

This also installs `pygame`, which is used for the window, keyboard and mouse.

## Running

```
cube3d path/to/scene.cub
```

The path has to end in `.cub`. If it does not, or if the file cannot be read
or is not a valid scene, the program prints the error to standard error and
exits.

## Scene files

A scene file lists its settings first and the map after them. Blank lines
are skipped. The map starts at the first line that does not begin with one
of the setting keys.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA` name the wall textures, which are XPM images.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each from 0 to 255.
- The map uses `1` for walls, `0` for floor and spaces for empty space. Shorter
  lines are padded with spaces to the length of the longest. The map holds
  exactly one of `N`, `S`, `E` or `W`, which marks where the player starts and
  which way they face.
- Every cell the player can reach must be closed in by walls; reaching the
  edge of the map makes the scene invalid.

All four textures and both colours must be present and valid.

XPM colours can be written as `#RRGGBB` or as X11 colour names such as
`dark slate` or `lightgoldenrod`, matched without regard to case. The name
`None` is read as transparent; unknown names give black.

## Controls

| Key           | Action                        |
|---------------|-------------------------------|
| W / S         | walk forward / back           |
| A / D         | strafe left / right           |
| Left / Right  | turn                          |
| Mouse         | turn                          |
| Space         | jump                          |
| Left Shift    | crouch (half speed)           |
| Left Ctrl     | sprint (double speed)         |
| Tab (hold)    | stop mouse turning, free the pointer |
| Esc           | quit                          |

Closing the window also quits.

## Using it as a library

The parts of the game can be used on their own:

- `cube3d.parsing.parse_scene` reads a scene file into a `Scene` and raises
  `ParseError` when it is unusable; `parse_rgb` reads a colour setting.
- `cube3d.pathfinding.check_map` checks that the map is closed around the
  spawn point.
- `cube3d.xpm.read_xpm` and `cube3d.xpm.parse_xpm` load XPM images into an
  `Image` from `cube3d.image`; they raise `XpmError` on bad data.
  `cube3d.colors.lookup_color` gives the value of a colour name.
- `cube3d.raycast.cast_ray` follows one ray to a wall, and
  `cube3d.raycast.render_frame` draws the whole 3D view into an `Image`.
- `cube3d.game.GameState` holds the player, the held keys, speed and jump
  state; `cube3d.game.spawn_player` places a player at the spawn point.
- `cube3d.minimap` creates, draws and copies the overhead map.

## What it does not do

Textures can only be XPM files. The map has walls and floor only: there are
no doors, sprites or other objects, and no sound. Rendering is done in pure
Python, one pixel at a time, so the frame rate depends heavily on the machine.

## Tests

```
pip install .[test]
pytest
```