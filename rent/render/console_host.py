"""Line-oriented terminal host for stepping through a presentation."""

from __future__ import annotations

import shutil
import sys
from typing import Iterable, Optional, TextIO

from ..viewer import ViewerController
from .host import draw

QUIT_KEY = "q"


class ConsoleHost:
    def __init__(
        self, viewport_width: float, stream: Optional[TextIO] = None, columns: Optional[int] = None
    ) -> None:
        self.viewport_width = viewport_width
        self.stream = stream or sys.stdout
        self.columns = columns or shutil.get_terminal_size().columns

    def get_viewport_width(self) -> float:
        return self.viewport_width

    def draw_centered_text(self, text: str, font_size: float, margin: float) -> None:
        self._write(f"(font {font_size:.2f}, margin {margin:.2f})".center(self.columns))
        for line in text.split("\n"):
            self._write(line.center(self.columns).rstrip())

    def draw_centered_image(self, uri: str) -> None:
        self._write(f"[image] {uri}".center(self.columns).rstrip())

    def draw_status(self, viewer: ViewerController) -> None:
        self._write(f"-- slide {viewer.index + 1}/{viewer.total} --")

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")


def run(viewer: ViewerController, host: ConsoleHost, lines: Iterable[str]) -> int:
    """Redraw after every input line; each token is one key press.

    Returns the number of frames drawn. Stops at ``QUIT_KEY`` or end of input.
    """
    frames = 0

    def frame() -> None:
        nonlocal frames
        host.draw_status(viewer)
        draw(viewer.current_view(host.get_viewport_width()), host)
        frames += 1

    frame()
    for line in lines:
        for token in line.split():
            if token.lower() == QUIT_KEY:
                return frames
            viewer.on_key(token)
        frame()
    return frames
