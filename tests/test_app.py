import random

import pygame
import pytest

from islandgame.animation import AnimationFrame, SpriteAnimation
from islandgame.app import IDLE_ANIMATIONS, AnimationShuffler
from islandgame.textures import TextureManager


@pytest.fixture
def anim(tmp_path):
    path = tmp_path / "sheet.bmp"
    pygame.image.save(pygame.Surface((4, 4)), str(path))
    animation = SpriteAnimation(pygame.Surface((8, 8)), "sheet", path, TextureManager())
    for name in ("look_around", "idle_forward", "idle_left"):
        animation.add_animation(name, [AnimationFrame((0, 0, 1, 1), 0) for _ in range(3)])
    animation.set_animation("look_around")
    return animation


def test_requires_names(anim):
    with pytest.raises(ValueError):
        AnimationShuffler(anim, [], 0)


def test_starts_from_current_animation(anim):
    shuffler = AnimationShuffler(anim, IDLE_ANIMATIONS, 0, random.Random(1))
    assert shuffler.current == "look_around"


def test_same_choice_does_not_change(anim):
    shuffler = AnimationShuffler(anim, ["look_around"], 0, random.Random(1))
    assert shuffler.tick() is False
    assert anim.current_animation == "look_around"


def test_switch_keeps_frame(anim):
    anim.play((0, 0))
    anim.play((0, 0))
    assert anim.current_frame == 2
    shuffler = AnimationShuffler(anim, ["idle_left"], 0, random.Random(1))
    assert shuffler.tick() is True
    assert anim.current_animation == "idle_left"
    assert shuffler.current == "idle_left"
    assert anim.current_frame == 2


def test_waits_for_interval(anim):
    shuffler = AnimationShuffler(anim, ["idle_forward"], 10**6, random.Random(1))
    assert shuffler.tick() is False
    assert anim.current_animation == "look_around"


def test_choices_come_from_names(anim):
    names = ["look_around", "idle_forward", "idle_left"]
    shuffler = AnimationShuffler(anim, names, 0, random.Random(7))
    for _ in range(20):
        shuffler.tick()
        assert anim.current_animation in names
        assert shuffler.current == anim.current_animation


def test_unknown_name_is_tolerated(anim):
    shuffler = AnimationShuffler(anim, ["death_left"], 0, random.Random(1))
    assert shuffler.tick() is True
    assert shuffler.current == "death_left"
    assert anim.current_animation == "look_around"