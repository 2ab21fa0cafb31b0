"""Pydantic request and response models for the dice API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dicer.config import settings


class DiceRequest(BaseModel):
    roll: str = Field(
        max_length=settings.max_notation_length,
        description="Dice notation, e.g. '3x4d6*5+1s2'.",
    )


class DiceResponse(BaseModel):
    roll: list[int] = Field(description="One total per repetition, in roll order.")
