"""Pytest configuration and shared fixtures for enclosure tests."""

from __future__ import annotations

import pytest

from enclosures.application import GeneratePanelNetCommand, PanelNetOutput
from enclosures.domain import (
    BoxDimensions,
    EnclosureSpec,
    ThermalOptions,
    get_preset,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests across all layers"
    )


# =============================================================================
# Shared specs
# =============================================================================


@pytest.fixture
def box_dimensions() -> BoxDimensions:
    """The reference 24 x 6 x 8 box in quarter-inch material."""
    return BoxDimensions(length=24.0, width=6.0, height=8.0, thickness=0.25)


@pytest.fixture
def plain_spec(box_dimensions: BoxDimensions) -> EnclosureSpec:
    """Reference box without accessories or thermal options."""
    return EnclosureSpec(dimensions=box_dimensions)


@pytest.fixture
def equipped_spec(box_dimensions: BoxDimensions) -> EnclosureSpec:
    """Reference box with one RTX 3080 and the air duct."""
    return EnclosureSpec(
        dimensions=box_dimensions,
        accessories=(get_preset("RTX 3080"),),
        thermal=ThermalOptions(has_duct=True),
    )


# =============================================================================
# Shared fixtures for command output
# =============================================================================


@pytest.fixture
def generate_command() -> GeneratePanelNetCommand:
    """Create a GeneratePanelNetCommand instance."""
    return GeneratePanelNetCommand()


@pytest.fixture
def plain_output(
    generate_command: GeneratePanelNetCommand, plain_spec: EnclosureSpec
) -> PanelNetOutput:
    """Generated panel net for the plain reference box."""
    return generate_command.execute(plain_spec)


@pytest.fixture
def equipped_output(
    generate_command: GeneratePanelNetCommand, equipped_spec: EnclosureSpec
) -> PanelNetOutput:
    """Generated panel net for the equipped reference box."""
    return generate_command.execute(equipped_spec)


@pytest.fixture
def config_data() -> dict:
    """Minimal valid configuration dictionary."""
    return {
        "schema_version": "1.0",
        "enclosure": {"length": 24.0, "width": 6.0, "height": 8.0},
    }
