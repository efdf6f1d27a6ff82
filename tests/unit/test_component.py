"""Unit tests for the ComponentExporter."""

import pytest

from figsync.core.component import ComponentExporter, render_default_value
from figsync.domain import (
    RGB,
    ComponentPropertySpec,
    ComponentTraits,
    CornerTraits,
    FillTraits,
    LayoutRecord,
    Paint,
    SceneNode,
)
from figsync.host.snapshot import SnapshotHost
from figsync.utils.logging import ExportLogger


def _button_set() -> SceneNode:
    return SceneNode(
        id="10:0",
        name="Button",
        type="COMPONENT_SET",
        component=ComponentTraits(
            description="Primary action",
            property_definitions=(
                ComponentPropertySpec(name="Size", type="VARIANT", default_value="Large"),
                ComponentPropertySpec(name="Disabled", type="BOOLEAN", default_value=False),
            ),
        ),
        children=[
            SceneNode(id="10:1", name="Size=Large, State=Hover", type="COMPONENT"),
            SceneNode(id="10:2", name="Size=Small", type="COMPONENT"),
            SceneNode(id="10:3", name="Size=Large, Broken", type="COMPONENT"),
            SceneNode(id="10:4", name="Notes", type="FRAME"),
        ],
    )


def _exporter(node: SceneNode, export_logger: ExportLogger | None = None) -> ComponentExporter:
    page = SceneNode(id="1:0", name="Page", type="PAGE", children=[node])
    root = SceneNode(id="0:0", name="Doc", type="DOCUMENT", children=[page])
    return ComponentExporter(SnapshotHost(root), export_logger)


class TestRenderDefaultValue:
    """Tests for render_default_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, "true"), (False, "false"), ("Large", "Large"), (2.0, "2"), (1.5, "1.5"), (3, "3")],
    )
    def test_render(self, value, expected: str) -> None:
        """Test text rendering of default values."""
        assert render_default_value(value) == expected


class TestComponentExporter:
    """Tests for ComponentExporter."""

    def test_component_set_variants(self) -> None:
        """Test variant parsing for every component member of a set."""
        node = _button_set()
        record = _exporter(node).export(node)

        assert [v.properties for v in record.variants] == [
            {"Size": "Large", "State": "Hover"},
            {"Size": "Small"},
            {"Size": "Large"},
        ]
        assert [v.node_id for v in record.variants] == ["10:1", "10:2", "10:3"]

    def test_set_level_properties(self) -> None:
        """Test property definitions declared on the set."""
        node = _button_set()
        record = _exporter(node).export(node)

        assert [p.to_dict() for p in record.properties] == [
            {"name": "Size", "type": "VARIANT", "defaultValue": "Large"},
            {"name": "Disabled", "type": "BOOLEAN", "defaultValue": "false"},
        ]
        assert record.description == "Primary action"

    def test_dropped_segments_are_counted(self) -> None:
        """Test that malformed variant names are logged, not raised."""
        node = _button_set()
        export_logger = ExportLogger()
        _exporter(node, export_logger).export(node)
        assert export_logger.stats.dropped_variant_segments == 1
        assert export_logger.stats.component_count == 1
        assert export_logger.stats.variant_count == 3

    def test_plain_component(self) -> None:
        """Test a component outside any set."""
        node = SceneNode(
            id="20:0",
            name="Icon",
            type="COMPONENT",
            opacity=0.5,
            fills=FillTraits(fills=(Paint(type="SOLID", color=RGB(1, 0, 0)),)),
            corners=CornerTraits(corner_radius=4),
        )
        record = _exporter(node).export(node)

        assert record.variants == []
        assert record.properties == []
        assert record.description == ""
        assert record.layout == LayoutRecord()
        assert record.visual.opacity == 0.5
        assert record.visual.corner_radius == 4
        assert record.visual.fills[0].color == "#ff0000"

    def test_children_summarized(self) -> None:
        """Test that the record includes direct child summaries."""
        node = _button_set()
        record = _exporter(node).export(node)
        assert [c.node_id for c in record.children] == ["10:1", "10:2", "10:3", "10:4"]

    def test_record_holds_no_node_references(self) -> None:
        """Test that the record serializes to plain JSON values only."""
        node = _button_set()
        data = _exporter(node).export(node).to_dict()

        def check(value) -> None:
            assert not isinstance(value, SceneNode)
            if isinstance(value, dict):
                for item in value.values():
                    check(item)
            elif isinstance(value, list):
                for item in value:
                    check(item)

        check(data)
