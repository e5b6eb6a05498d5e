"""Root configuration schema."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from enclosures.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    MaterialConfig,
)
from enclosures.application.config.schemas.enclosure_schema import (
    AccessoryConfig,
    EnclosureDimensionsConfig,
    JointConfigSchema,
    LayoutConfig,
    ThermalConfig,
)
from enclosures.application.config.schemas.output_schema import OutputConfig


class EnclosureConfiguration(BaseModel):
    """Root configuration model for an enclosure.

    Example:
        >>> config = EnclosureConfiguration(
        ...     schema_version="1.0",
        ...     enclosure=EnclosureDimensionsConfig(length=24, width=6, height=8),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    enclosure: EnclosureDimensionsConfig
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    joints: JointConfigSchema = Field(default_factory=JointConfigSchema)
    accessories: list[AccessoryConfig] = Field(default_factory=list, max_length=16)
    thermal: ThermalConfig = Field(default_factory=ThermalConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
