"""Enclosure geometry schemas: box, joints, accessories, thermal and layout."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from enclosures.domain.presets import get_preset


class EnclosureDimensionsConfig(BaseModel):
    """Outer box dimensions in inches.

    Attributes:
        length: Box length (front to back).
        width: Box width (left to right).
        height: Box height.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, le=120.0)
    width: float = Field(..., gt=0, le=120.0)
    height: float = Field(..., gt=0, le=120.0)


class JointConfigSchema(BaseModel):
    """Finger joint settings.

    Attributes:
        tab_size: Target tab size in inches.
        kerf: Laser kerf (tab/notch depth) in inches.
    """

    model_config = ConfigDict(extra="forbid")

    tab_size: float = Field(default=0.5, gt=0)
    kerf: float = Field(default=0.01, gt=0)


class AccessoryConfig(BaseModel):
    """An accessory slot, optionally filled in from a named preset.

    Explicit dimensions win over the preset's values.
    """

    model_config = ConfigDict(extra="forbid")

    preset: str | None = None
    name: str | None = None
    length: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    width: float | None = Field(default=None, gt=0)
    tdp: float | None = Field(default=None, ge=0)

    @field_validator("preset")
    @classmethod
    def validate_preset_exists(cls, v: str | None) -> str | None:
        """Reject unknown preset names."""
        if v is not None:
            try:
                get_preset(v)
            except KeyError as e:
                raise ValueError(str(e.args[0])) from e
        return v

    @model_validator(mode="after")
    def apply_preset(self) -> "AccessoryConfig":
        """Fill unspecified fields from the preset, then require dimensions."""
        if self.preset is not None:
            preset = get_preset(self.preset)
            if self.name is None:
                self.name = preset.name
            if self.length is None:
                self.length = preset.length
            if self.height is None:
                self.height = preset.height
            if self.width is None:
                self.width = preset.width
            if self.tdp is None:
                self.tdp = preset.tdp

        missing = [
            name
            for name in ("length", "height", "width")
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(
                f"Accessory needs {', '.join(missing)} or a preset"
            )
        if self.name is None:
            self.name = "Accessory"
        return self


class ThermalConfig(BaseModel):
    """Thermal management options."""

    model_config = ConfigDict(extra="forbid")

    has_duct: bool = False
    has_temp_sensors: bool = False


class LayoutConfig(BaseModel):
    """Sheet layout options.

    Attributes:
        spacing: Gap between panels and around the sheet in inches.
        show_labels: Whether to draw panel names.
    """

    model_config = ConfigDict(extra="forbid")

    spacing: float = Field(default=0.5, gt=0)
    show_labels: bool = True
