"""Shared constants and base models for enclosure configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field

# Supported schema versions for configuration files
# Version 1.0: Initial schema (dimensions, joints, accessories, thermal, output)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class MaterialConfig(BaseModel):
    """Sheet material configuration.

    Attributes:
        thickness: Material thickness in inches.
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(default=0.25, gt=0, le=2.0)
