"""Presentation to PPTX export host."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pptx import Presentation as PptxPresentation
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.util import Emu, Pt

from ..viewer import ViewerController
from .host import draw, uri_to_path

# 13.333in x 7.5in, i.e. a 960pt wide viewport.
WIDESCREEN_WIDTH = Emu(12192000)
WIDESCREEN_HEIGHT = Emu(6858000)
BLANK_LAYOUT_INDEX = 6
# PowerPoint rejects run sizes below 1pt.
MIN_FONT_PT = 1.0


class PptxHost:
    """Draws each slide of a viewer onto its own blank PPTX slide."""

    def __init__(
        self, slide_width: int = WIDESCREEN_WIDTH, slide_height: int = WIDESCREEN_HEIGHT
    ) -> None:
        self.prs = PptxPresentation()
        self.prs.slide_width = slide_width
        self.prs.slide_height = slide_height
        self._slide = None

    def get_viewport_width(self) -> float:
        return Emu(self.prs.slide_width).pt

    def begin_slide(self) -> None:
        layout = self.prs.slide_layouts[BLANK_LAYOUT_INDEX]
        self._slide = self.prs.slides.add_slide(layout)

    def draw_centered_text(self, text: str, font_size: float, margin: float) -> None:
        slide = self._require_slide()
        box = slide.shapes.add_textbox(0, 0, self.prs.slide_width, self.prs.slide_height)
        text_frame = box.text_frame
        text_frame.word_wrap = True
        text_frame.vertical_anchor = MSO_ANCHOR.MIDDLE
        text_frame.margin_left = text_frame.margin_right = Pt(margin)
        text_frame.margin_top = text_frame.margin_bottom = Pt(margin)
        size = Pt(max(font_size, MIN_FONT_PT))
        for idx, line in enumerate(text.split("\n")):
            paragraph = text_frame.paragraphs[0] if idx == 0 else text_frame.add_paragraph()
            paragraph.alignment = PP_ALIGN.CENTER
            run = paragraph.add_run()
            run.text = line
            run.font.size = size

    def draw_centered_image(self, uri: str) -> None:
        slide = self._require_slide()
        picture = slide.shapes.add_picture(str(uri_to_path(uri)), 0, 0)
        slide_width, slide_height = self.prs.slide_width, self.prs.slide_height
        scale = min(slide_width / picture.width, slide_height / picture.height)
        picture.width = int(picture.width * scale)
        picture.height = int(picture.height * scale)
        picture.left = (slide_width - picture.width) // 2
        picture.top = (slide_height - picture.height) // 2

    def render(self, viewer: ViewerController, output_path: Optional[Path] = None) -> int:
        """Draw every slide of the viewer's presentation in order.

        The viewer's current position is left untouched. Returns the number
        of slides drawn; saves to ``output_path`` if given.
        """
        drawn = 0
        for index in range(viewer.total):
            self.begin_slide()
            draw(viewer.view_at(index, self.get_viewport_width()), self)
            drawn += 1
        if output_path is not None:
            self.save(output_path)
        return drawn

    def save(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.prs.save(str(output_path))

    def _require_slide(self):
        if self._slide is None:
            raise RuntimeError("begin_slide() must be called before drawing")
        return self._slide
