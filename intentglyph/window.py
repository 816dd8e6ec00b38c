"""Presentation loop.

Owns the window for the lifetime of the process: the finished frame is shown
exactly once, then the loop only polls for a quit signal (window close or
Escape) until one arrives. No redraw happens after the first frame.

The window itself sits behind the small :class:`Display` protocol so the loop
can be driven without a real video device; :class:`PygameDisplay` is the
pygame implementation used by the command line viewer.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Protocol, Tuple

import pygame
from PIL import Image

from intentglyph.config import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TITLE
from intentglyph.errors import CanvasWriteError
from intentglyph.types import QuitReason

logger = logging.getLogger(__name__)


class Display(Protocol):
    def open(self, size: Tuple[int, int], title: str) -> None: ...

    def show(self, frame: Image.Image) -> None: ...

    def poll_quit(self) -> Optional[QuitReason]: ...

    def wait(self, milliseconds: int) -> None: ...

    def close(self) -> None: ...


class PygameDisplay:
    """pygame backed window."""

    def __init__(self, centered: bool = True):
        self.centered = centered
        self._screen = None

    def open(self, size: Tuple[int, int], title: str) -> None:
        if self.centered:
            os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            pygame.display.init()
            self._screen = pygame.display.set_mode(size)
            pygame.display.set_caption(title)
        except pygame.error as e:
            raise CanvasWriteError(f"Failed to open window: {e}") from e
        logger.info(f"Opened window '{title}' at {size[0]}x{size[1]}")

    def show(self, frame: Image.Image) -> None:
        if self._screen is None:
            raise CanvasWriteError("Window is not open")
        frame = frame.convert("RGBA")
        try:
            surface = pygame.image.frombytes(frame.tobytes(), frame.size, "RGBA")
            self._screen.blit(surface, (0, 0))
            pygame.display.flip()
        except pygame.error as e:
            raise CanvasWriteError(f"Failed to present frame: {e}") from e

    def poll_quit(self) -> Optional[QuitReason]:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return QuitReason.WINDOW_CLOSE
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return QuitReason.ESCAPE
        return None

    def wait(self, milliseconds: int) -> None:
        pygame.time.wait(milliseconds)

    def close(self) -> None:
        self._screen = None
        pygame.display.quit()
        pygame.quit()


class PresentationLoop:
    display: Display
    title: str
    poll_interval_ms: int

    def __init__(
        self,
        display: Display,
        title: str = DEFAULT_TITLE,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    ):
        self.display = display
        self.title = title
        self.poll_interval_ms = poll_interval_ms

    def run(self, frame: Image.Image) -> QuitReason:
        """Show ``frame`` and block until a quit signal arrives.

        The display is always closed on the way out, including on error.

        Returns:
            QuitReason: The signal that ended the loop.
        """
        try:
            self.display.open(frame.size, self.title)
            self.display.show(frame)
            while True:
                reason = self.display.poll_quit()
                if reason is not None:
                    logger.info(f"Quit requested ({reason})")
                    return reason
                self.display.wait(self.poll_interval_ms)
        finally:
            self.display.close()
