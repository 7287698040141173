"""Game window with an event pump, and asset path resolution."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path, PurePath

import pygame


class PathType(Enum):
    """How a path given to :meth:`VFS.exists` is interpreted."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class VFS:
    """Resolves asset paths against a base directory."""

    def __init__(self, base_path) -> None:
        self.base_path = Path(base_path)

    @classmethod
    def from_executable(cls, debug: bool = False) -> "VFS":
        """Base the lookup on the directory of the running program.

        With ``debug`` set, step two directories up out of a build tree.
        """
        script = sys.argv[0] if sys.argv and sys.argv[0] else ""
        base = Path(script).resolve().parent if script else Path.cwd()
        if debug:
            base = base.parent.parent
        return cls(base)

    def resolve(self, relative_path) -> Path:
        """Return the canonical absolute path of an asset.

        A leading root is ignored, so ``/Assets/x.png`` is looked up below the
        base directory. Raises FileNotFoundError if the path does not exist.
        """
        rel = PurePath(relative_path)
        if rel.anchor:
            rel = rel.relative_to(rel.anchor)
        return (self.base_path / rel).resolve(strict=True)

    def exists(self, path, path_type: PathType) -> bool:
        """Check whether an absolute path, or one below the base, exists."""
        if path_type is PathType.ABSOLUTE:
            return Path(path).exists()
        if path_type is PathType.RELATIVE:
            return (self.base_path / path).exists()
        raise ValueError(f"unknown path type: {path_type!r}")


class Window:
    """A pygame display window that tracks quit requests and frame time."""

    def __init__(self, title: str, width: float, height: float, flags: int = 0) -> None:
        pygame.init()
        self.surface = pygame.display.set_mode((int(width), int(height)), flags)
        pygame.display.set_caption(title)
        self.width = float(width)
        self.height = float(height)
        self.app_state = True
        self.delta_time = 0
        self._last_time = pygame.time.get_ticks()

    def update(self) -> None:
        """Handle pending events and measure the time since the last update."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.app_state = False
            elif event.type == pygame.KEYDOWN:
                if getattr(event, "key", None) == pygame.K_ESCAPE:
                    self.app_state = False
            elif event.type == pygame.VIDEORESIZE:
                self.width = float(event.w)
                self.height = float(event.h)

        now = pygame.time.get_ticks()
        self.delta_time = now - self._last_time
        self._last_time = now

    def close(self) -> None:
        """Shut the display down."""
        self.app_state = False
        pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()