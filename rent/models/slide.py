"""Slide and Presentation contracts."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import Field, field_validator

from .base import FrozenModel


class ParagraphSlide(FrozenModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str


class ImageSlide(FrozenModel):
    kind: Literal["image"] = "image"
    uri: str = Field(..., description="Absolute file:// URI of the image")

    @field_validator("uri")
    @classmethod
    def _require_file_scheme(cls, value: str) -> str:
        if not value.startswith("file://"):
            raise ValueError(f"Image URI must use the file:// scheme: {value}")
        return value


Slide = Annotated[Union[ParagraphSlide, ImageSlide], Field(discriminator="kind")]


class Presentation(FrozenModel):
    """Ordered slides in document order; never empty."""

    slides: Tuple[Slide, ...] = Field(..., min_length=1)
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> Union[ParagraphSlide, ImageSlide]:
        return self.slides[index]
