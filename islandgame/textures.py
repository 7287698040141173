"""Textures, a caching texture manager and sprite sheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntFlag

import pygame

log = logging.getLogger(__name__)

PINK = (255, 0, 255, 255)
WHITE = (255, 255, 255, 255)


class Flip(IntFlag):
    """Mirroring applied when a sprite is drawn."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass
class Texture:
    """An image ready to be drawn."""

    surface: pygame.Surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()


def load_texture(path) -> Texture:
    """Load an image file. Raises OSError if it cannot be read."""
    if not str(path):
        raise FileNotFoundError("Failed to load image: empty path")
    try:
        surface = pygame.image.load(str(path))
    except pygame.error as exc:
        raise OSError(f"Failed to load image: {path}") from exc
    return Texture(surface)


def create_fallback_texture(width: int = 64, height: int = 64, cell_size: int = 8) -> Texture:
    """Build a pink and white checkered texture, pink in the top-left cell."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    if width < 0 or height < 0:
        raise ValueError("texture size must not be negative")
    surface = pygame.Surface((width, height), pygame.SRCALPHA, 32)
    for row, y in enumerate(range(0, height, cell_size)):
        for col, x in enumerate(range(0, width, cell_size)):
            colour = PINK if (row + col) % 2 == 0 else WHITE
            surface.fill(colour, pygame.Rect(x, y, cell_size, cell_size))
    return Texture(surface)


class TextureManager:
    """Caches loaded textures by id and owns the checkered fallback."""

    FALLBACK_SIZE = 32

    def __init__(self) -> None:
        self.textures: dict[str, Texture] = {}
        self._fallback: Texture | None = None

    def fallback(self) -> Texture:
        """The checkered texture used when a sprite has none of its own."""
        if self._fallback is None:
            self._fallback = create_fallback_texture(self.FALLBACK_SIZE, self.FALLBACK_SIZE)
        return self._fallback

    def resolve(self, target, texture_id: str, path="") -> Texture | None:
        """Return the cached texture for ``texture_id``, loading it from ``path`` if needed.

        Returns None without a render target, or when the file cannot be loaded.
        """
        if target is None:
            return None
        self.fallback()
        cached = self.textures.get(texture_id)
        if cached is not None:
            return cached
        try:
            texture = load_texture(path)
        except OSError as exc:
            log.debug("Failed to load %r: %s", path, exc)
            return None
        self.textures[texture_id] = texture
        return texture

    def unload(self, texture_id: str) -> None:
        """Drop a texture from the cache; unknown ids are ignored."""
        self.textures.pop(texture_id, None)

    def query(self, texture_id: str) -> bool:
        """Whether a texture with this id is cached."""
        return texture_id in self.textures


_shared_manager = TextureManager()


class Spritesheet:
    """One or more textures plus named rectangles cut out of them."""

    def __init__(self, target, texture_id: str, texture_path, manager: TextureManager | None = None) -> None:
        self.target = target
        self.manager = manager if manager is not None else _shared_manager
        self.texture_ids: list[str] = []
        self.sub_textures: dict[str, pygame.Rect] = {}
        if self.manager.query(texture_id) or self.manager.resolve(target, texture_id, texture_path):
            self.texture_ids.append(texture_id)
        else:
            log.debug("Spritesheet texture %r failed to resolve", texture_id)

    def push_sub_texture(self, name: str, rect) -> None:
        """Name a rectangle of the sheet; an existing name keeps its rectangle."""
        self.sub_textures.setdefault(name, pygame.Rect(rect))

    def pop_sub_texture(self, name: str) -> None:
        """Forget a named rectangle, if present."""
        self.sub_textures.pop(name, None)

    def add_spritesheet(self, texture_id: str | None = None, texture_path=None) -> bool:
        """Attach another texture, cached or loaded from ``texture_path``."""
        if texture_id is None:
            log.debug("Cannot resolve texture without an id")
            return False
        if self.manager.query(texture_id):
            self.texture_ids.append(texture_id)
            return True
        if texture_path is not None and self.manager.resolve(self.target, texture_id, texture_path):
            self.texture_ids.append(texture_id)
            return True
        log.debug("Failed to resolve texture %r from %r", texture_id, texture_path)
        return False

    def rem_spritesheet(self, texture_id: str, unload_texture: bool = True) -> bool:
        """Detach a texture, optionally dropping it from the manager's cache."""
        if texture_id not in self.texture_ids:
            return False
        self.texture_ids.remove(texture_id)
        if unload_texture:
            self.manager.unload(texture_id)
        return True

    def resolve_sprite_id(self, sprite_id: str | None = None) -> str:
        """The given id, or else the sheet's first texture id, or else ''."""
        if sprite_id is not None:
            return sprite_id
        return self.texture_ids[0] if self.texture_ids else ""

    def render(self, name: str, dest) -> pygame.Rect | None:
        """Draw the texture ``name`` at ``dest``, cut to its named rectangle if any."""
        texture = self.manager.resolve(self.target, self.resolve_sprite_id(name), "")
        if texture is None:
            log.debug("The texture %r is invalid", name)
            return None
        position = (dest[0], dest[1])
        area = self.sub_textures.get(name)
        if area is None:
            return self.target.blit(texture.surface, position)
        return self.target.blit(texture.surface, position, area)

    def render_ex(self, name: str, dest, angle: float = 0.0, flip: Flip = Flip.NONE) -> pygame.Rect | None:
        """Draw a named rectangle rotated clockwise by ``angle`` degrees and mirrored.

        Falls back to the checkered texture when ``name`` has no texture.
        """
        area = self.sub_textures.get(name)
        if area is None or self.target is None:
            return None
        texture = self.manager.resolve(self.target, self.resolve_sprite_id(name), "")
        if texture is None:
            texture = self.manager.fallback()

        source = texture.surface
        clip = area.clip(source.get_rect())
        if clip.width == 0 or clip.height == 0:
            return None
        image = source.subsurface(clip)
        if flip:
            image = pygame.transform.flip(
                image, bool(flip & Flip.HORIZONTAL), bool(flip & Flip.VERTICAL)
            )
        dest_rect = pygame.Rect(dest[0], dest[1], area.width, area.height)
        if image.get_size() != dest_rect.size:
            image = pygame.transform.scale(image, dest_rect.size)
        if angle:
            image = pygame.transform.rotate(image, -angle)
            dest_rect = image.get_rect(center=dest_rect.center)
        return self.target.blit(image, dest_rect)