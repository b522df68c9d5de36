"""LayoutResult contract."""

from __future__ import annotations

from pydantic import Field

from .base import FrozenModel


class LayoutResult(FrozenModel):
    font_size: float = Field(..., ge=0, description="Font size in viewport units")
    margin: float = Field(..., ge=0, description="Symmetric margin in viewport units")
