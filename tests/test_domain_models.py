"""Tests for domain models to verify they work correctly."""

import pytest

from figsync.domain import (
    MIXED,
    Capability,
    ChildSummary,
    ColorStyleRecord,
    ComponentRecord,
    CornerRadii,
    CornerTraits,
    EffectRecord,
    ExportDocument,
    FileInfo,
    Fill,
    FillTraits,
    LayoutRecord,
    NodeType,
    Offset,
    Padding,
    PropertyDefinition,
    SceneNode,
    Sizing,
    Stroke,
    StyleCollection,
    TextStyleRecord,
    TextTraits,
    VariantRecord,
    VisualRecord,
)


def _sample_record() -> ComponentRecord:
    return ComponentRecord(
        node_id="1:1",
        name="Button",
        description="",
        properties=[PropertyDefinition(name="Size", type="VARIANT", default_value="Large")],
        variants=[VariantRecord(name="Size=Large", properties={"Size": "Large"}, node_id="1:2")],
        layout=LayoutRecord(),
        visual=VisualRecord(
            fills=[Fill(type="SOLID", color="#ff0000", opacity=1)],
            corner_radius=CornerRadii(2, 2, 5, 2),
        ),
        children=[ChildSummary(type="TEXT", name="Label", node_id="1:3", text="Go")],
    )


class TestSceneNode:
    """Tests for SceneNode class."""

    def test_parent_links(self) -> None:
        """Test that children get their parent set."""
        child = SceneNode(id="2", name="Child", type="RECTANGLE")
        parent = SceneNode(id="1", name="Parent", type="FRAME", children=[child])
        assert child.parent is parent
        assert parent.parent is None

    def test_capabilities_from_traits(self) -> None:
        """Test that capabilities reflect which traits are present."""
        node = SceneNode(
            id="1",
            name="Text",
            type="TEXT",
            fills=FillTraits(),
            text=TextTraits("Hello"),
        )
        assert node.capabilities == frozenset({Capability.FILLS, Capability.TEXT})
        assert node.supports(Capability.TEXT)
        assert not node.supports(Capability.AUTO_LAYOUT)

    def test_no_capabilities(self) -> None:
        """Test a bare node exposes nothing."""
        node = SceneNode(id="1", name="Group", type="GROUP")
        assert node.capabilities == frozenset()

    def test_iter_descendants_preorder(self) -> None:
        """Test depth-first pre-order traversal excluding the start node."""
        leaf = SceneNode(id="3", name="c", type="RECTANGLE")
        mid = SceneNode(id="2", name="b", type="FRAME", children=[leaf])
        sibling = SceneNode(id="4", name="d", type="RECTANGLE")
        root = SceneNode(id="1", name="a", type="PAGE", children=[mid, sibling])
        assert [n.id for n in root.iter_descendants()] == ["2", "3", "4"]

    def test_find_all(self) -> None:
        """Test predicate search over descendants."""
        a = SceneNode(id="2", name="a", type="COMPONENT")
        b = SceneNode(id="3", name="b", type="RECTANGLE")
        root = SceneNode(id="1", name="root", type="PAGE", children=[a, b])
        assert root.find_all(lambda n: n.type == NodeType.COMPONENT) == [a]

    def test_is_variant(self) -> None:
        """Test that only components inside a component set are variants."""
        member = SceneNode(id="2", name="Size=Small", type="COMPONENT")
        SceneNode(id="1", name="Set", type="COMPONENT_SET", children=[member])
        loose = SceneNode(id="3", name="Loose", type="COMPONENT")
        assert member.is_variant()
        assert not loose.is_variant()
        assert member.is_component_like()
        assert loose.is_component_like()


class TestCornerTraits:
    """Tests for CornerTraits class."""

    def test_independent_corners(self) -> None:
        """Test detection of four exposed corner fields."""
        traits = CornerTraits(corner_radius=MIXED, top_left=1, top_right=2, bottom_right=3, bottom_left=4)
        assert traits.has_independent_corners()

    def test_missing_corner_fields(self) -> None:
        """Test nodes without per-corner fields."""
        assert not CornerTraits(corner_radius=MIXED).has_independent_corners()

    def test_zero_corner_counts_as_present(self) -> None:
        """Test that a 0 radius corner is still an exposed field."""
        traits = CornerTraits(corner_radius=0, top_left=0, top_right=0, bottom_right=0, bottom_left=0)
        assert traits.has_independent_corners()


class TestRecords:
    """Tests for export record serialization."""

    def test_fill_omits_absent_fields(self) -> None:
        """Test that gradient fills carry only their type."""
        assert Fill(type="GRADIENT_LINEAR").to_dict() == {"type": "GRADIENT_LINEAR"}

    def test_stroke_key_order(self) -> None:
        """Test stroke serialization."""
        stroke = Stroke(type="SOLID", weight=2, color="#000000", opacity=1, style_id="S:1")
        assert stroke.to_dict() == {
            "type": "SOLID",
            "color": "#000000",
            "opacity": 1,
            "weight": 2,
            "styleId": "S:1",
        }

    def test_blur_effect_has_no_shadow_fields(self) -> None:
        """Test that blur effects serialize without color, offset or spread."""
        data = EffectRecord(type="LAYER_BLUR", radius=4).to_dict()
        assert data == {"type": "LAYER_BLUR", "radius": 4}

    def test_shadow_effect(self) -> None:
        """Test shadow effect serialization."""
        record = EffectRecord(type="DROP_SHADOW", radius=4, color="#000000", offset=Offset(0, 2), spread=0)
        assert record.to_dict() == {
            "type": "DROP_SHADOW",
            "color": "#000000",
            "offset": {"x": 0, "y": 2},
            "radius": 4,
            "spread": 0,
        }

    def test_layout_defaults(self) -> None:
        """Test the all-default layout record."""
        assert LayoutRecord().to_dict() == {
            "mode": "NONE",
            "padding": {"top": 0, "right": 0, "bottom": 0, "left": 0},
            "gap": 0,
            "primaryAxisAlign": "MIN",
            "counterAxisAlign": "MIN",
            "sizing": {"width": "FIXED", "height": "FIXED"},
        }

    def test_visual_scalar_and_mixed_radius(self) -> None:
        """Test that corner radius serializes as a number or a corner map."""
        assert VisualRecord(corner_radius=4).to_dict()["cornerRadius"] == 4
        mixed = VisualRecord(corner_radius=CornerRadii(2, 2, 5, 2)).to_dict()["cornerRadius"]
        assert mixed == {"topLeft": 2, "topRight": 2, "bottomRight": 5, "bottomLeft": 2}

    def test_child_summary_omits_absent_fields(self) -> None:
        """Test child summaries without text or component name."""
        data = ChildSummary(type="RECTANGLE", name="Bg", node_id="1:9").to_dict()
        assert data == {"type": "RECTANGLE", "name": "Bg", "nodeId": "1:9"}

    def test_style_description_omitted(self) -> None:
        """Test that style records leave out a missing description."""
        color = ColorStyleRecord(id="S:1", name="Red", color="#ff0000", opacity=1)
        assert "description" not in color.to_dict()
        text = TextStyleRecord(
            id="S:2",
            name="Body",
            font_family="Inter",
            font_size=16,
            font_weight=400,
            line_height="auto",
            letter_spacing=0,
            description="Body copy",
        )
        assert text.to_dict()["description"] == "Body copy"

    def test_component_record_round_trip(self) -> None:
        """Test component record serialization and deserialization."""
        record = _sample_record()
        assert ComponentRecord.from_dict(record.to_dict()) == record

    def test_record_immutable(self) -> None:
        """Test that records are immutable."""
        fill = Fill(type="SOLID")
        with pytest.raises(AttributeError):
            fill.type = "IMAGE"  # type: ignore


class TestExportDocument:
    """Tests for ExportDocument class."""

    def _document(self) -> ExportDocument:
        return ExportDocument(
            file_key="abc",
            file_name="Design System",
            exported_at="2024-01-02T03:04:05.006Z",
            components=[_sample_record()],
            styles=StyleCollection(
                colors=[ColorStyleRecord(id="S:1", name="Red", color="#ff0000", opacity=1)],
            ),
        )

    def test_top_level_keys(self) -> None:
        """Test the persisted key order and version literal."""
        data = self._document().to_dict()
        assert list(data) == ["version", "exportedAt", "fileKey", "fileName", "components", "styles"]
        assert data["version"] == "1.0"
        assert list(data["styles"]) == ["colors", "text", "effects"]

    def test_summary(self) -> None:
        """Test summary counts."""
        summary = self._document().summary()
        assert summary.to_dict() == {
            "componentCount": 1,
            "colorStyleCount": 1,
            "textStyleCount": 0,
            "effectStyleCount": 0,
        }

    def test_from_dict(self) -> None:
        """Test loading a persisted document."""
        document = self._document()
        assert ExportDocument.from_dict(document.to_dict()) == document

    def test_from_dict_rejects_other_versions(self) -> None:
        """Test that unknown format versions are refused."""
        data = self._document().to_dict()
        data["version"] = "2.0"
        with pytest.raises(ValueError, match="Unsupported export format version"):
            ExportDocument.from_dict(data)

    def test_styles_is_empty(self) -> None:
        """Test empty style collection detection."""
        assert StyleCollection().is_empty()
        assert not self._document().styles.is_empty()


class TestFileInfo:
    """Tests for FileInfo class."""

    def test_to_dict(self) -> None:
        """Test info serialization."""
        info = FileInfo(
            file_name="Design",
            file_key="abc",
            page_count=2,
            component_count=3,
            color_style_count=1,
            text_style_count=2,
            effect_style_count=0,
            selection_count=1,
        )
        assert info.to_dict() == {
            "fileName": "Design",
            "fileKey": "abc",
            "pageCount": 2,
            "componentCount": 3,
            "colorStyleCount": 1,
            "textStyleCount": 2,
            "effectStyleCount": 0,
            "selectionCount": 1,
        }


class TestValueObjects:
    """Tests for small value records."""

    def test_padding_and_sizing(self) -> None:
        """Test padding and sizing serialization."""
        assert Padding(1, 2, 3, 4).to_dict() == {"top": 1, "right": 2, "bottom": 3, "left": 4}
        assert Sizing("HUG", "FILL").to_dict() == {"width": "HUG", "height": "FILL"}
