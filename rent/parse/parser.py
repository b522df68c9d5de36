"""Plain-text document to Presentation parser.

Slides are separated by a single blank line. A block whose first
character is ``!`` is an image directive: the rest of its first line is a
file-system path, resolved to a canonical absolute path and emitted as a
``file://`` URI. Every other block becomes a paragraph slide verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from ..models.slide import ImageSlide, ParagraphSlide, Presentation

SLIDE_SEPARATOR = "\n\n"
IMAGE_DIRECTIVE = "!"

SlideValue = Union[ParagraphSlide, ImageSlide]


class ParseError(ValueError):
    """Base class for fatal document errors."""


class EmptyDocumentError(ParseError):
    def __init__(self, source: Optional[str] = None) -> None:
        self.source = source
        where = f": {source}" if source else ""
        super().__init__(f"Document contains no slides{where}")


class UnresolvableImagePathError(ParseError):
    def __init__(self, slide_index: int, raw_path: str, reason: str = "") -> None:
        self.slide_index = slide_index
        self.raw_path = raw_path
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Slide {slide_index}: cannot resolve image path '{raw_path}'{detail}"
        )


def _normalize_newlines(document: str) -> str:
    return document.replace("\r\n", "\n")


def _resolve_image(raw_path: str, slide_index: int, base_dir: Optional[Path]) -> str:
    """Canonicalize an image directive path into a file:// URI."""
    try:
        path = Path(raw_path).expanduser()
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise UnresolvableImagePathError(slide_index, raw_path, type(exc).__name__) from exc
    return resolved.as_uri()


def _parse_block(block: str, slide_index: int, base_dir: Optional[Path]) -> SlideValue:
    if block.startswith(IMAGE_DIRECTIVE):
        first_line = block[len(IMAGE_DIRECTIVE):].split("\n", 1)[0]
        raw_path = first_line.strip()
        if not raw_path:
            raise UnresolvableImagePathError(slide_index, raw_path, "empty path")
        return ImageSlide(uri=_resolve_image(raw_path, slide_index, base_dir))
    return ParagraphSlide(text=block)


def parse_document(document: str, base_dir: Optional[Path] = None) -> List[SlideValue]:
    """Split a document into slides in document order.

    Relative image paths resolve against ``base_dir`` when given, otherwise
    against the process working directory. An empty document yields an
    empty list; use ``parse_presentation`` to reject it.
    """
    trimmed = _normalize_newlines(document).strip()
    if not trimmed:
        return []
    return [
        _parse_block(block, index, base_dir)
        for index, block in enumerate(trimmed.split(SLIDE_SEPARATOR))
    ]


def parse_presentation(
    document: str, base_dir: Optional[Path] = None, source: Optional[str] = None
) -> Presentation:
    """Parse a document into a non-empty Presentation."""
    slides = parse_document(document, base_dir=base_dir)
    if not slides:
        raise EmptyDocumentError(source)
    return Presentation(slides=tuple(slides), source=source)


def load_presentation(path: Path, base_dir: Optional[Path] = None) -> Presentation:
    """Read a UTF-8 document from disk and parse it."""
    content = path.read_text(encoding="utf-8")
    return parse_presentation(content, base_dir=base_dir, source=str(path))
