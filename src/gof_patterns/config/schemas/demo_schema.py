"""Schemas for the pattern demo drivers."""
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ConsoleConfig(BaseModel):
    """Console output configuration."""

    section_separator: bool = Field(
        True, description="Write a blank line between demo sections"
    )


class FactoryConfig(BaseModel):
    """Creation pattern configuration."""

    strict_variants: bool = Field(
        False,
        description="Raise UnknownVariantError instead of defaulting unknown discriminators",
    )


class IteratorDemoConfig(BaseModel):
    """Bounds used by the iterator demo."""

    start: int = Field(0, description="Range start (exclusive)")
    end: int = Field(20, description="Range end")
    step: int = Field(5, description="Range step")

    @model_validator(mode="after")
    def validate_step(self) -> "IteratorDemoConfig":
        """Ensure the step is positive."""
        if self.step < 1:
            raise ValueError("Iterator step must be a positive integer")
        return self


class DemoConfig(BaseModel):
    """Demo driver configuration."""

    iterator: IteratorDemoConfig = Field(default_factory=IteratorDemoConfig)
    random_seed: Optional[int] = Field(
        None, description="Seed for the template method operands (None = unseeded)"
    )
