"""Pydantic request/response schemas for draw commands."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from ..rng.curves import get_curve
from ..utils.constants import DEFAULT_CURVE, DRAW_COUNT_DEFAULT

ITEM_COMMANDS = ("choose", "pluck", "cycle", "shuffle")


class DrawRequest(BaseModel):
    """Request to draw values from a freshly seeded generator."""

    command: Literal["random", "int", "choose", "pluck", "cycle", "shuffle"]
    seed: int | str | None = Field(
        default=None, description="Integer or string seed; entropy-seeded when omitted"
    )
    curve: str = Field(default=DEFAULT_CURVE, description="Curve name: identity, front, back")
    count: int = Field(default=DRAW_COUNT_DEFAULT, gt=0, description="Number of draws")
    bounds: list[int] = Field(
        default_factory=list, max_length=2, description="[high] or [low, high] for 'int'"
    )
    items: list[str] = Field(default_factory=list, description="Items for sequence commands")
    limit: int | None = Field(
        default=None, ge=0, description="Held-back tail size for 'pluck' and 'cycle'"
    )

    @field_validator("curve")
    @classmethod
    def check_curve(cls, value: str) -> str:
        get_curve(value)
        return value

    @model_validator(mode="after")
    def check_arguments(self) -> "DrawRequest":
        if self.command == "int" and not self.bounds:
            raise ValueError("'int' needs a high bound, or low and high bounds")
        if self.command in ITEM_COMMANDS and not self.items:
            raise ValueError(f"'{self.command}' needs at least one item")
        return self


class DrawResponse(BaseModel):
    """Values produced by a draw request."""

    command: str
    seed: int | str | None
    curve: str
    results: list[Any] = Field(default_factory=list)
