"""Configuration schema models for enclosure specifications.

- base.py: Version constants and material model
- enclosure_schema.py: Box, joints, accessories, thermal and layout
- output_schema.py: Output format configurations
- root.py: Root configuration model
"""

from enclosures.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    MaterialConfig as MaterialConfig,
)
from enclosures.application.config.schemas.enclosure_schema import (
    AccessoryConfig as AccessoryConfig,
    EnclosureDimensionsConfig as EnclosureDimensionsConfig,
    JointConfigSchema as JointConfigSchema,
    LayoutConfig as LayoutConfig,
    ThermalConfig as ThermalConfig,
)
from enclosures.application.config.schemas.output_schema import (
    DxfOutputConfigSchema as DxfOutputConfigSchema,
    OutputConfig as OutputConfig,
    OutputFormat as OutputFormat,
    SvgOutputConfigSchema as SvgOutputConfigSchema,
)
from enclosures.application.config.schemas.root import (
    EnclosureConfiguration as EnclosureConfiguration,
)
