"""The game's entry point and its idle-animation shuffler."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from islandgame.animation import AnimatedPlayer, SpriteAnimation, load_animations_from_json
from islandgame.textures import Spritesheet, TextureManager, create_fallback_texture
from islandgame.timer import Timer
from islandgame.window import VFS, Window

log = logging.getLogger(__name__)

TITLE = "Decaying Island Game"
PLAYER_SHEET = "/Assets/Player/Player_Static/Player_New/Player_Anim/Player_Idle_Run_Death_Anim.png"
PLAYER_SCRIPT = "/Assets/Animation scripts/Player/Player_idle.json"

IDLE_ANIMATIONS = (
    "idle_forward",
    "idle_backward",
    "idle_left",
    "idle_right",
    "walk_forward",
    "walk_backward",
    "walk_left",
    "walk_right",
    "death_right",
    "death_left",
    "hit_front",
    "hit_right",
    "hit_left",
    "hit_back",
    "sleep_front",
    "sleep_right",
    "sleep_left",
    "look_around",
)


class AnimationShuffler:
    """Switches an animation to a randomly chosen one at a fixed interval."""

    def __init__(self, animation: SpriteAnimation, names, interval_ms: int = 6000, rng: random.Random | None = None) -> None:
        self.names = list(names)
        if not self.names:
            raise ValueError("at least one animation name is required")
        self.animation = animation
        self.timer = Timer(interval_ms)
        self.rng = rng if rng is not None else random.Random()
        self.current = animation.current_animation

    def tick(self) -> bool:
        """Pick a new animation if the interval is up; True if the animation changed."""
        if not self.timer.is_finished():
            return False
        changed = False
        candidate = self.rng.choice(self.names)
        if candidate != self.current:
            self.current = candidate
            changed = True
            try:
                self.animation.set_animation(candidate, reset_frame=False)
            except KeyError:
                log.debug("Animation %r not found", candidate)
        self.timer.reset()
        return changed


def _asset(vfs: VFS, relative: str) -> str:
    try:
        return str(vfs.resolve(relative))
    except FileNotFoundError:
        print(f"The path does not exist: {relative}")
        return ""


def _load_script(path: str, animation: SpriteAnimation) -> None:
    try:
        load_animations_from_json(path, animation)
    except (OSError, ValueError) as exc:
        print(f"Could not load animation script {path!r}: {exc}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="islandgame", description=TITLE)
    parser.add_argument("--base", help="directory that holds the Assets folder")
    parser.add_argument("--debug", action="store_true", help="look for assets two levels above the program")
    args = parser.parse_args(argv)

    with Window(TITLE, 1024, 576, pygame.RESIZABLE) as win:
        vfs = VFS(args.base) if args.base else VFS.from_executable(args.debug)
        manager = TextureManager()
        target = win.surface

        grass = Spritesheet(target, "grass", _asset(vfs, "/Assets/Tiles/Grass/Grass_Tiles_3.png"), manager)
        grass.add_spritesheet("grass_middle", _asset(vfs, "/Assets/Tiles/Grass/grass_middle_decor.png"))
        grass.push_sub_texture("grassHole", (0, 0, 48, 48))
        grass.push_sub_texture("grass", (48, 0, 16, 16))

        script = _asset(vfs, PLAYER_SCRIPT)
        player = SpriteAnimation(target, "playerSprite", _asset(vfs, PLAYER_SHEET), manager)
        _load_script(script, player)

        hero = AnimatedPlayer(target, "playerSprite", _asset(vfs, PLAYER_SHEET), (250.0, 150.0), manager)
        _load_script(script, hero)

        try:
            player.set_animation("look_around")
        except KeyError:
            print("Animation 'look_around' not found!")

        shuffler = AnimationShuffler(player, IDLE_ANIMATIONS, 6000)
        create_fallback_texture(32, 32)

        for index, (name, texture) in enumerate(manager.textures.items()):
            state = "valid" if texture.surface is not None else "invalid"
            print(f"[DEBUG]: Loaded Texture {index}, name: {name}. Texture {state}")

        clock = pygame.time.Clock()
        while win.app_state:
            win.update()
            if not win.app_state:
                break
            target.fill((0, 0, 0))
            grass.render("grass_middle", (150, 300))
            shuffler.tick()
            pygame.display.flip()
            clock.tick(60)
    return 0