"""Viewer configuration model."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, constr, field_validator, model_validator

from .base import RentBaseModel

KeyName = constr(min_length=1)


class ViewerConfig(RentBaseModel):
    previous_keys: List[KeyName] = Field(default_factory=lambda: ["h"], min_length=1)
    next_keys: List[KeyName] = Field(default_factory=lambda: ["l"], min_length=1)
    viewport_width: float = Field(960.0, gt=0, description="Viewport width in points for windowless hosts")
    log_path: Optional[str] = Field(None, description="JSONL event log path")

    @field_validator("previous_keys", "next_keys")
    @classmethod
    def _normalize_keys(cls, keys: List[str]) -> List[str]:
        return [key.lower() for key in keys]

    @model_validator(mode="after")
    def _keys_disjoint(self) -> "ViewerConfig":
        overlap = set(self.previous_keys) & set(self.next_keys)
        if overlap:
            raise ValueError(f"Keys bound to both previous and next: {sorted(overlap)}")
        return self
