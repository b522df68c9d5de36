"""Shared Pydantic base model helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RentBaseModel(BaseModel):
    """Base model rejecting unknown fields."""

    model_config = ConfigDict(extra="forbid")


class FrozenModel(RentBaseModel):
    """Immutable variant for values that never change after construction."""

    model_config = ConfigDict(extra="forbid", frozen=True)
