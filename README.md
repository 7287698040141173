# islandgame

A small top-down island game built on pygame, and the pieces it is made from:

- `islandgame.timer.Timer`: a millisecond countdown on a monotonic clock
  (`reset()`, `elapsed_ms()`, `is_finished()`, `progress()`; `duration` may be
  reassigned at any time).
- `islandgame.window.Window`: a pygame display that tracks `delta_time`
  between `update()` calls, follows resizes, and sets `app_state` to `False`
  on a quit event or Escape. It is a context manager; leaving it calls `close()`.
- `islandgame.window.VFS`: resolves asset paths against a base directory.
  `resolve()` ignores a leading root (`/Assets/x.png` is looked up below the
  base) and raises `FileNotFoundError` for a missing path. `exists()` takes a
  `PathType.ABSOLUTE` or `PathType.RELATIVE` path. `VFS.from_executable(debug)`
  uses the directory of the running program, two levels higher with `debug`.
- `islandgame.textures`: `load_texture()`, `create_fallback_texture()`
  (pink and white checks, pink in the top-left cell), a `TextureManager` that
  caches textures by id and owns a 32×32 checkered fallback, the `Flip` flags,
  and `Spritesheet` objects with named sub-rectangles.
- `islandgame.animation`: `SpriteAnimation`, which plays named sequences of
  `AnimationFrame`s loaded with `load_animations_from_json()`, and
  `AnimatedPlayer`, which moves from the arrow keys or WASD and chooses walk,
  idle or sleep animations from its `Direction` and recent movement.
- `islandgame.app`: the `islandgame` command and `AnimationShuffler`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
islandgame [--base DIR] [--debug]
```

The window opens at 1024×576 and can be resized. Press Escape or close the
window to quit.

- `--base DIR`: the directory that holds the `Assets` folder.
- `--debug`: without `--base`, look for assets two directories above the
  running program instead of in its own directory.

Assets are not shipped with the package. The game expects, below the base:

- `Assets/Tiles/Grass/Grass_Tiles_3.png`
- `Assets/Tiles/Grass/grass_middle_decor.png`
- `Assets/Player/Player_Static/Player_New/Player_Anim/Player_Idle_Run_Death_Anim.png`
- `Assets/Animation scripts/Player/Player_idle.json`

A missing file is reported on standard output and the game carries on without
it. On start it prints each texture it loaded.

## What the game does not do

The main loop only clears the screen, draws the `grass_middle` texture at
(150, 300), and lets an `AnimationShuffler` switch the player animation to a
random one every six seconds. The player animation and the `AnimatedPlayer`
are set up but neither drawn nor updated, so there is no visible character,
no movement, no map and no camera. `AnimatedPlayer.map_offset` is stored but
not used.

## Animation scripts

Animations come from a JSON file with an `animations` object. Each animation
has a `frames` array. It may also set a default `duration` in milliseconds and
a `sprite_flip` of `horizontal`, `vertical` or `both`; any other text means no
flip.

```json
{
  "animations": {
    "idle_forward": {
      "duration": 120,
      "frames": [
        {"x": 0, "y": 0, "w": 32, "h": 32},
        {"x": 32, "y": 0, "w": 32, "h": 32, "duration": 200}
      ]
    },
    "walk_left": {
      "sprite_flip": "horizontal",
      "frames": [{"x": 0, "y": 32, "w": 32, "h": 32}]
    }
  }
}
```

A frame with no duration takes the duration of its animation; if the
animation has none either, the frame lasts 100 ms. Missing coordinates default
to 0.

`load_animations_from_json()` raises `OSError` when the file cannot be opened
and `ValueError` when the script is malformed: no `animations` object, an
animation without a `frames` array, a frame that is not an object or has a
non-numeric coordinate, or an animation name that the target already has.

## Using the library

```python
import pygame

from islandgame.animation import SpriteAnimation, load_animations_from_json
from islandgame.textures import TextureManager

pygame.init()
screen = pygame.display.set_mode((640, 480))

manager = TextureManager()
player = SpriteAnimation(screen, "player", "Assets/player.png", manager)
load_animations_from_json("Assets/player.json", player)
player.set_animation("idle_forward")
frame = player.play((200, 150))
```

`play()` draws the current frame and moves to the next once the frame's time
is up; it returns the frame shown, or `None` when no animation is set.
Looping animations wrap around; with `set_animation(name, loop=False)` the
animation stops on its last frame. `set_animation()` and `remove_animation()`
raise `KeyError` for an unknown name, `add_animation()` raises `ValueError`
for a name already in use.

A `Spritesheet` whose texture cannot be loaded is still created, just without
a texture; `render()` then draws nothing and returns `None`, while
`render_ex()` draws the checkered fallback for a named sub-rectangle.
Without a `manager`, sprite sheets share one module-wide `TextureManager`.

`AnimatedPlayer.update(delta_time, keys, now)` reads `pygame.key.get_pressed()`
and `pygame.time.get_ticks()` when `keys` and `now` are not given. After
`sleep_delay` milliseconds (10 000) without movement it falls asleep and
switches to the sleep animations.

`AnimationShuffler(animation, names, interval_ms=6000, rng=None)` picks a
random name from `names` on each `tick()` once the interval has passed, and
returns `True` when the animation changed.