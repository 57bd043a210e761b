# duelquest

duelquest is a small top-down adventure built with pygame. The game opens on a
title screen. Press Enter there to walk around a scrolling tile map. If you
walk into one of the characters on the map, the game switches to the duel
screen.

## Installing

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Playing

```
duelquest
```

Options:

- `--assets DIR` sets the directory that holds `game.xml` and `level1.tmx`.
  The default is `assets`.
- `--fullscreen` opens the window in fullscreen mode.

If the window, the state file, the level or a texture cannot be loaded, the
command prints `game init failure - ...` and exits with status -1.

### Asset files

- `game.xml` describes the states. Its root element holds one element for each
  state, `MAINMENU` and `PLAY`. Each of these has a `TEXTURES` section and an
  `OBJECTS` section.
  - A texture element has a `filename` attribute and an `ID` attribute.
  - An object element has a `type` attribute (`MenuButton`, `Background`,
    `Player` or `Npc`), a `textureID` attribute, and the integer attributes
    `x`, `y`, `width`, `height`, `numFrames` and `animSpeed`. An integer
    attribute that is missing counts as 0.
  - Texture file names are used exactly as written, so relative paths are
    resolved from the directory the game is started in.
- `level1.tmx` is an orthogonal map in the TMX format.
  - The first child of the map holds `property` elements. Each one names a
    texture (`name`) and the image file it is read from (`value`).
  - Tileset images are looked up next to the map file.
  - Tile layers must be base64 encoded and zlib compressed.
  - The first layer that has a `collidable` property blocks movement. The
    edges of the map also block movement.
  - Each object in an object group is created from its `type`. It takes its
    size, texture and frame count from the `textureWidth`, `textureHeight`,
    `textureID`, `numFrames` and `animSpeed` properties.

### Controls

- **Enter** on the title screen starts the game.
- **Arrow keys** move the player 4 pixels per frame, in one direction at a
  time.
- Close the window to quit.

### How it plays

The window is 1280×720 and the game runs at 60 frames per second. The camera
keeps the player in the middle of the screen. It never scrolls past the top
or left edge of the map.

A character of type `Npc` counts for collisions only while it is within one
screen width to the right of the camera. When the player's box overlaps one of
these characters, the game waits 120 frames and then switches to the duel
screen.

## What it does not do

- The duel screen is empty. It draws nothing and has no duel rules, cards or
  opponents to play against. It only writes a log message each frame.
- Only one level, `level1.tmx`, is used. The game has no way to move on to
  another level.
- The game has no saving, no sound and no text rendering.

## Using the pieces

The building blocks can be imported on their own:

- `duelquest.level_parser.parse_level(path, context, factory)` loads a TMX map
  into a `duelquest.level.Level`. `decode_tile_data(text, width, height)`
  turns base64, zlib-compressed layer data into rows of tile ids.
- `duelquest.state_parser.parse_state(path, state_id, context, factory)` reads
  one state of `game.xml`. It returns the created objects and the ids of the
  loaded textures.
- `duelquest.state_machine.GameStateMachine` keeps the stack of
  `GameState` objects. Only the top state is updated and rendered.
- `duelquest.factory.GameObjectFactory` creates game objects from registered
  type names.
- `duelquest.collision.find_npc_collision(player, objects)` returns the first
  on-screen `Npc` that overlaps the player.
- `duelquest.camera.Camera` and `duelquest.vector2d.Vector2D` handle positions
  and scrolling.
- `duelquest.texture_manager.TextureManager` keeps textures by id and draws
  whole images, animation frames and tiles.
- `duelquest.game.Game` owns the window and the main loop. `Game.run()` plays
  until the window is closed.

## Running the tests

```
pytest
```