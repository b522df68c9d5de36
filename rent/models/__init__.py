"""Pydantic models for rent contracts."""

from .base import FrozenModel, RentBaseModel
from .config import ViewerConfig
from .layout import LayoutResult
from .render_spec import ImageRenderSpec, RenderSpec, TextRenderSpec
from .slide import ImageSlide, ParagraphSlide, Presentation, Slide

__all__ = [
    "FrozenModel",
    "RentBaseModel",
    "ViewerConfig",
    "LayoutResult",
    "RenderSpec",
    "TextRenderSpec",
    "ImageRenderSpec",
    "Slide",
    "ParagraphSlide",
    "ImageSlide",
    "Presentation",
]
