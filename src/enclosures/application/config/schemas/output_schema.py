"""Output format configuration schemas."""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

OutputFormat = Literal["svg", "dxf", "json"]


class SvgOutputConfigSchema(BaseModel):
    """SVG export configuration.

    Attributes:
        scale: Drawing units per inch.
    """

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=96.0, gt=0, description="Units per inch")


class DxfOutputConfigSchema(BaseModel):
    """DXF export configuration.

    Attributes:
        units: Measurement units in the output file.
    """

    model_config = ConfigDict(extra="forbid")

    units: Literal["inches", "mm"] = "inches"


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        formats: Formats written by a multi-format export.
        svg: SVG-specific settings.
        dxf: DXF-specific settings.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[OutputFormat] = Field(default_factory=lambda: ["svg"])
    svg: SvgOutputConfigSchema = Field(default_factory=SvgOutputConfigSchema)
    dxf: DxfOutputConfigSchema = Field(default_factory=DxfOutputConfigSchema)

    @field_validator("formats")
    @classmethod
    def validate_formats_unique(cls, v: list[str]) -> list[str]:
        """Drop duplicate formats while keeping their order."""
        return list(dict.fromkeys(v))
