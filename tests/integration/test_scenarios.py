"""End-to-end scenarios: configuration to exported documents.

Each scenario runs the full pipeline (config loading, domain conversion,
panel net generation and export) and checks the resulting geometry.
"""

from __future__ import annotations

import itertools
from collections import Counter

import pytest

from enclosures.application import GeneratePanelNetCommand, PanelNetOutput
from enclosures.application.config import config_to_spec, load_config_from_dict
from enclosures.domain import DegenerateJointError, PanelRole
from enclosures.domain.services import SHARED_EDGES
from enclosures.infrastructure.exporters import ExporterRegistry

pytestmark = pytest.mark.integration


def _generate(data: dict) -> PanelNetOutput:
    spec = config_to_spec(load_config_from_dict(data))
    return GeneratePanelNetCommand().execute(spec)


def _purposes(output: PanelNetOutput, role: PanelRole) -> Counter:
    return Counter(c.purpose for c in output.document(role).cutouts)


@pytest.fixture
def base_data() -> dict:
    return {
        "schema_version": "1.0",
        "enclosure": {"length": 24, "width": 6, "height": 8},
        "material": {"thickness": 0.25},
        "joints": {"tab_size": 0.5, "kerf": 0.01},
    }


class TestPlainBox:
    """A box without accessories or thermal options."""

    def test_tab_counts(self, base_data: dict) -> None:
        """Tab counts follow floor(length / tab size) per axis."""
        output = _generate(base_data)
        assert output.tab_counts == {"width": 12, "length": 48, "height": 16}

    def test_six_panels_no_cutouts(self, base_data: dict) -> None:
        """Six closed panels and zero cutouts."""
        output = _generate(base_data)
        assert [d.role for d in output.documents] == [
            PanelRole.BOTTOM,
            PanelRole.TOP,
            PanelRole.LEFT,
            PanelRole.FRONT,
            PanelRole.RIGHT,
            PanelRole.BACK,
        ]
        assert all(d.is_closed for d in output.documents)
        assert output.net.cutout_count == 0

    def test_layout_has_no_overlap(self, base_data: dict) -> None:
        """Footprints keep the spacing between each other."""
        layout = _generate(base_data).layout
        for a, b in itertools.combinations(layout.footprints, 2):
            assert not a.padded_intersects(b, layout.spacing)

    def test_adjoining_edges_complement(self, base_data: dict) -> None:
        """Generated documents carry opposite phase on every shared edge."""
        output = _generate(base_data)
        for shared in SHARED_EDGES:
            a = output.document(shared.a.role).edge(shared.a.side)
            b = output.document(shared.b.role).edge(shared.b.side)
            assert a.tab_count == b.tab_count
            assert a.inverted != b.inverted


class TestEquippedBox:
    """One RTX 3080-sized slot with the air duct."""

    @pytest.fixture
    def output(self, base_data: dict) -> PanelNetOutput:
        base_data["accessories"] = [
            {"name": "GPU", "length": 11.2, "height": 4.4, "width": 2, "tdp": 320}
        ]
        base_data["thermal"] = {"has_duct": True}
        return _generate(base_data)

    def test_top_panel(self, output: PanelNetOutput) -> None:
        """Three fan vents and a half-size duct on the top panel."""
        assert _purposes(output, PanelRole.TOP) == {"fan_vent": 3, "air_duct": 1}
        top = output.document(PanelRole.TOP)
        duct = next(c for c in top.cutouts if c.purpose == "air_duct")
        assert duct.shape.width == pytest.approx(top.width * 0.5)
        assert duct.shape.height == pytest.approx(top.height * 0.5)

    def test_back_panel(self, output: PanelNetOutput) -> None:
        """Exhaust vent and power cable cutout on the back panel."""
        assert _purposes(output, PanelRole.BACK) == {"exhaust": 1, "power_cable": 1}

    def test_cutouts_clear_of_joints(self, output: PanelNetOutput) -> None:
        """Every cutout stays inside the panel margin."""
        margin = output.spec.cutout_margin
        for document in output.documents:
            for cutout in document.cutouts:
                min_x, min_y, max_x, max_y = cutout.bounds
                assert min_x >= margin - 1e-9
                assert min_y >= margin - 1e-9
                assert max_x <= document.width - margin + 1e-9
                assert max_y <= document.height - margin + 1e-9


class TestDegenerateJoint:
    """Kerf equal to the tab size."""

    def test_rejected(self, base_data: dict) -> None:
        """The configuration is rejected instead of producing geometry."""
        base_data["joints"] = {"tab_size": 0.5, "kerf": 0.5}
        with pytest.raises(DegenerateJointError):
            _generate(base_data)


class TestTemperatureSensors:
    """Three slots with temperature sensors."""

    def test_sensor_holes_only_on_right_panel(self, base_data: dict) -> None:
        """The right panel gets one sensor hole per slot, the others none."""
        base_data["accessories"] = [{"preset": "RTX 3070"}] * 3
        base_data["thermal"] = {"has_temp_sensors": True}
        output = _generate(base_data)

        assert _purposes(output, PanelRole.RIGHT)["temp_sensor"] == 3
        for role in (PanelRole.LEFT, PanelRole.FRONT, PanelRole.BACK):
            assert _purposes(output, role)["temp_sensor"] == 0


class TestDeterminism:
    """Repeated runs produce byte-identical documents."""

    @pytest.mark.parametrize("format_name", ["svg", "dxf", "json"])
    def test_byte_identical(self, base_data: dict, format_name: str) -> None:
        """Two independent runs export the same text."""
        exporter_class = ExporterRegistry.get(format_name)
        first = exporter_class().export_string(_generate(base_data))
        second = exporter_class().export_string(_generate(base_data))
        assert first == second

    @pytest.mark.parametrize("format_name", ["svg", "dxf", "json"])
    def test_emit_byte_identical(self, base_data: dict, format_name: str) -> None:
        """Single panel emission is repeatable too."""
        exporter = ExporterRegistry.get(format_name)()
        document = _generate(base_data).document(PanelRole.FRONT)
        assert exporter.emit(document, 96.0) == exporter.emit(document, 96.0)
