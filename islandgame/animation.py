"""Frame-based sprite animations and a keyboard-driven animated player."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

import pygame

from islandgame.textures import Flip, Spritesheet, Texture, TextureManager
from islandgame.timer import Timer

log = logging.getLogger(__name__)

DEFAULT_FRAME_DURATION = 100


@dataclass
class AnimationFrame:
    """One frame of an animation: the area of the sheet, how long it shows, and its mirroring."""

    rect: pygame.Rect
    duration: int = DEFAULT_FRAME_DURATION
    flip: Flip = field(default=Flip.NONE)

    def __post_init__(self) -> None:
        self.rect = pygame.Rect(self.rect)
        self.duration = int(self.duration)
        self.flip = Flip(self.flip)


class Direction(Enum):
    """Which way a character faces."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    NONE = auto()


def flip_from_string(text: str) -> Flip:
    """Map 'horizontal', 'vertical' or 'both' to a flip; anything else means none."""
    if text == "horizontal":
        return Flip.HORIZONTAL
    if text == "vertical":
        return Flip.VERTICAL
    if text == "both":
        return Flip.HORIZONTAL | Flip.VERTICAL
    return Flip.NONE


class SpriteAnimation(Spritesheet):
    """A sprite sheet that plays named sequences of frames."""

    def __init__(self, target, sprite_id: str, texture_path, manager: TextureManager | None = None) -> None:
        super().__init__(target, sprite_id, texture_path, manager)
        self.animations: dict[str, list[AnimationFrame]] = {}
        self.timer = Timer(0)
        self.current_animation = ""
        self.current_frame = 0
        self.is_playing = True
        self.is_looping = True

    def add_animation(self, name: str, frames) -> None:
        """Register a new animation. Raises ValueError if the name is taken."""
        if name in self.animations:
            raise ValueError(f"Animation {name!r} already exists")
        self.animations[name] = list(frames)

    def remove_animation(self, name: str) -> None:
        """Forget an animation. Raises KeyError if it is unknown."""
        if name not in self.animations:
            raise KeyError(f"Animation {name!r} was not found")
        del self.animations[name]

    def set_animation(self, name: str, reset_frame: bool = True, loop: bool = True) -> None:
        """Switch to an animation and start playing. Raises KeyError if it is unknown."""
        if name not in self.animations:
            raise KeyError(f"Animation {name!r} not found")
        if name != self.current_animation:
            self.current_animation = name
            if reset_frame:
                self.current_frame = 0
            self.timer.reset()
            self.is_looping = loop
        if self.current_frame >= len(self.animations[name]):
            self.current_frame = 0
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def resume(self) -> None:
        self.is_playing = True

    def play(self, pos, sprite_id: str | None = None) -> AnimationFrame | None:
        """Draw the current frame at ``pos`` and advance once its time is up.

        Returns the frame that was shown, or None when there is nothing to play.
        """
        frames = self.animations.get(self.current_animation)
        if not frames:
            return None

        texture_id = self.resolve_sprite_id(sprite_id)
        if self.current_frame >= len(frames):
            self.current_frame = len(frames) - 1
        frame = frames[self.current_frame]
        self.timer.duration = frame.duration

        texture = self.manager.resolve(self.target, texture_id, "")
        if texture is not None:
            self._draw(texture, frame, pos)

        if self.is_playing and self.timer.is_finished():
            self.current_frame += 1
            if self.is_looping:
                self.current_frame %= len(frames)
            elif self.current_frame >= len(frames):
                self.current_frame = len(frames) - 1
                self.is_playing = False
            self.timer.reset()
        return frame

    def _draw(self, texture: Texture, frame: AnimationFrame, pos) -> None:
        source = texture.surface
        clip = frame.rect.clip(source.get_rect())
        if clip.width == 0 or clip.height == 0:
            return
        image = source.subsurface(clip)
        if frame.flip:
            image = pygame.transform.flip(
                image, bool(frame.flip & Flip.HORIZONTAL), bool(frame.flip & Flip.VERTICAL)
            )
        self.target.blit(image, (pos[0], pos[1]))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _frame_value(frame: dict, key: str, default: int) -> int:
    value = frame.get(key, default)
    if not _is_number(value):
        raise ValueError(f"Frame field {key!r} must be a number")
    return int(value)


def load_animations_from_json(json_path, animation: SpriteAnimation) -> None:
    """Add every animation described in a JSON script to ``animation``.

    Raises OSError if the file cannot be opened and ValueError if it is malformed.
    """
    path = Path(json_path)
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, dict) or not isinstance(data.get("animations"), dict):
        raise ValueError(f"Animation script {path.name!r} is missing 'animations' object")

    for name, spec in data["animations"].items():
        if not isinstance(spec, dict):
            raise ValueError(f"Animation {name!r} must be an object")

        default_duration = DEFAULT_FRAME_DURATION
        if _is_number(spec.get("duration")):
            default_duration = int(spec["duration"])

        flip = Flip.NONE
        if isinstance(spec.get("sprite_flip"), str):
            flip = flip_from_string(spec["sprite_flip"])

        if not isinstance(spec.get("frames"), list):
            raise ValueError(f"Animation {name!r} is missing 'frames' array")

        frames = []
        for entry in spec["frames"]:
            if not isinstance(entry, dict):
                raise ValueError(f"Frames of animation {name!r} must be objects")
            rect = pygame.Rect(
                _frame_value(entry, "x", 0),
                _frame_value(entry, "y", 0),
                _frame_value(entry, "w", 0),
                _frame_value(entry, "h", 0),
            )
            if _is_number(entry.get("duration")):
                duration = int(entry["duration"])
            else:
                duration = default_duration
            frames.append(AnimationFrame(rect, duration, flip))

        animation.add_animation(name, frames)


_WALK = {
    Direction.UP: "walk_backward",
    Direction.DOWN: "walk_forward",
    Direction.LEFT: "walk_left",
    Direction.RIGHT: "walk_right",
}
_SLEEP = {
    Direction.UP: "sleep_front",
    Direction.DOWN: "sleep_front",
    Direction.LEFT: "sleep_left",
    Direction.RIGHT: "sleep_right",
}
_IDLE = {
    Direction.UP: "idle_backward",
    Direction.DOWN: "idle_forward",
    Direction.LEFT: "idle_left",
    Direction.RIGHT: "idle_right",
}

ACCEL_FACTOR = 0.0006
DAMPING = 0.85


class AnimatedPlayer(SpriteAnimation):
    """A player character steered by the keyboard, animated by what it does."""

    def __init__(self, target, sprite_id: str, sprite_sheet, init_pos, manager: TextureManager | None = None) -> None:
        super().__init__(target, sprite_id, sprite_sheet, manager)
        self.map_offset = pygame.Vector2(0, 0)
        self.position = pygame.Vector2(init_pos[0], init_pos[1])
        self.velocity = pygame.Vector2(0, 0)
        self.facing = Direction.UP
        self.last_move_time = 0
        self.asleep = False
        self.sleep_delay = 10000

    def init_animations(self, script) -> None:
        """Load the player's animations from a JSON script."""
        load_animations_from_json(script, self)

    def update(self, delta_time: int, keys=None, now: int | None = None) -> None:
        """Move the player from the pressed keys and pick the matching animation.

        ``keys`` maps pygame key codes to pressed state, as
        ``pygame.key.get_pressed()`` does; ``now`` is the time in milliseconds.
        """
        if keys is None:
            keys = pygame.key.get_pressed()
        if now is None:
            now = pygame.time.get_ticks()

        up = bool(keys[pygame.K_w] or keys[pygame.K_UP])
        down = bool(keys[pygame.K_s] or keys[pygame.K_DOWN])
        left = bool(keys[pygame.K_a] or keys[pygame.K_LEFT])
        right = bool(keys[pygame.K_d] or keys[pygame.K_RIGHT])

        acceleration = pygame.Vector2(right - left, down - up)

        if up:
            self.facing = Direction.UP
        elif down:
            self.facing = Direction.DOWN
        elif left:
            self.facing = Direction.LEFT
        elif right:
            self.facing = Direction.RIGHT

        self.velocity += acceleration * ACCEL_FACTOR * delta_time
        self.velocity *= DAMPING
        self.position += self.velocity * delta_time

        moving = acceleration.x != 0 or acceleration.y != 0
        if moving:
            self.last_move_time = now
            table = _WALK
        elif self.asleep:
            table = _SLEEP
        else:
            table = _IDLE
        name = table.get(self.facing)
        if name is not None:
            try:
                self.set_animation(name)
            except KeyError:
                log.debug("Animation %r not found", name)

        if not self.asleep and now - self.last_move_time > self.sleep_delay:
            self.asleep = True

    def render(self) -> AnimationFrame | None:
        """Play the current animation at the player's position."""
        return self.play((int(self.position.x), int(self.position.y)))