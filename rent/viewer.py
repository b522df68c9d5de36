"""Viewer controller composing parser output, navigation and layout."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Union

from .layout.engine import layout
from .logging_utils import log_event
from .models.config import ViewerConfig
from .models.render_spec import ImageRenderSpec, TextRenderSpec
from .models.slide import ImageSlide, ParagraphSlide, Presentation
from .navigation import NavigationState


class ViewerController:
    def __init__(
        self,
        presentation: Presentation,
        config: Optional[ViewerConfig] = None,
        log_path: Optional[Path] = None,
    ) -> None:
        self.presentation = presentation
        self.config = config or ViewerConfig()
        if log_path is None and self.config.log_path:
            log_path = Path(self.config.log_path)
        self.log_path = log_path
        self.navigation = NavigationState(len(presentation))
        self._lock = threading.Lock()

    @property
    def index(self) -> int:
        return self.navigation.index()

    @property
    def total(self) -> int:
        return self.navigation.total

    @property
    def current_slide(self) -> Union[ParagraphSlide, ImageSlide]:
        return self.presentation[self.navigation.index()]

    def on_key(self, key: str) -> bool:
        """Dispatch one key press; return True when the slide changed."""
        name = key.lower()
        with self._lock:
            before = self.navigation.index()
            if name in self.config.previous_keys:
                self.navigation.retreat()
            elif name in self.config.next_keys:
                self.navigation.advance()
            else:
                return False
            after = self.navigation.index()
        if after == before:
            return False
        log_event(self.log_path, "SLIDE_CHANGED", {"key": key, "from": before, "to": after})
        return True

    def current_view(self, viewport_width: float) -> Union[TextRenderSpec, ImageRenderSpec]:
        """Describe how the host should draw the current slide."""
        with self._lock:
            index = self.navigation.index()
        return self.view_at(index, viewport_width)

    def view_at(self, index: int, viewport_width: float) -> Union[TextRenderSpec, ImageRenderSpec]:
        """Describe slide ``index`` without moving the current position."""
        if not 0 <= index < self.total:
            raise IndexError(f"Slide index {index} out of range for {self.total} slides")
        slide = self.presentation[index]
        if isinstance(slide, ImageSlide):
            return ImageRenderSpec(slide_index=index, slide_count=self.total, uri=slide.uri)
        result = layout(slide.text, viewport_width)
        return TextRenderSpec(
            slide_index=index,
            slide_count=self.total,
            text=slide.text,
            font_size=result.font_size,
            margin=result.margin,
        )
