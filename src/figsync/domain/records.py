"""Export document records.

This module defines the records that make up an export document. Records
are plain values: they hold only strings and numbers copied out of the host
tree, never live node references.

``to_dict`` produces the persisted JSON shape. Optional fields that carry no
value are omitted, never written as null.
"""

from dataclasses import dataclass, field
from typing import Any

from figsync import EXPORT_FORMAT_VERSION


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True, slots=True)
class Offset:
    """Shadow offset."""

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Offset":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Fill:
    """Normalized fill paint.

    Attributes:
        type: Paint kind
        color: ``#rrggbb`` (solid paints only)
        opacity: Paint opacity (solid paints only)
        style_id: Bound shared style identifier
        style_name: Current name of the bound style, when it resolves
    """

    type: str
    color: str | None = None
    opacity: float | None = None
    style_id: str | None = None
    style_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "type": self.type,
            "color": self.color,
            "opacity": self.opacity,
            "styleId": self.style_id,
            "styleName": self.style_name,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fill":
        return cls(
            type=data["type"],
            color=data.get("color"),
            opacity=data.get("opacity"),
            style_id=data.get("styleId"),
            style_name=data.get("styleName"),
        )


@dataclass(frozen=True)
class Stroke:
    """Normalized stroke paint.

    ``weight`` is the node-level stroke weight; per-stroke weights are not
    part of the format.
    """

    type: str
    weight: float
    color: str | None = None
    opacity: float | None = None
    style_id: str | None = None
    style_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "type": self.type,
            "color": self.color,
            "opacity": self.opacity,
            "weight": self.weight,
            "styleId": self.style_id,
            "styleName": self.style_name,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        return cls(
            type=data["type"],
            weight=data["weight"],
            color=data.get("color"),
            opacity=data.get("opacity"),
            style_id=data.get("styleId"),
            style_name=data.get("styleName"),
        )


@dataclass(frozen=True)
class EffectRecord:
    """Normalized effect.

    Color, offset and spread are only present on shadow effects.
    """

    type: str
    radius: float
    color: str | None = None
    offset: Offset | None = None
    spread: float | None = None
    style_id: str | None = None
    style_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "type": self.type,
            "color": self.color,
            "offset": self.offset.to_dict() if self.offset else None,
            "radius": self.radius,
            "spread": self.spread,
            "styleId": self.style_id,
            "styleName": self.style_name,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EffectRecord":
        offset = data.get("offset")
        return cls(
            type=data["type"],
            radius=data["radius"],
            color=data.get("color"),
            offset=Offset.from_dict(offset) if offset else None,
            spread=data.get("spread"),
            style_id=data.get("styleId"),
            style_name=data.get("styleName"),
        )


@dataclass(frozen=True, slots=True)
class CornerRadii:
    """Independent per-corner radius."""

    top_left: float
    top_right: float
    bottom_right: float
    bottom_left: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "topLeft": self.top_left,
            "topRight": self.top_right,
            "bottomRight": self.bottom_right,
            "bottomLeft": self.bottom_left,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CornerRadii":
        return cls(
            top_left=data["topLeft"],
            top_right=data["topRight"],
            bottom_right=data["bottomRight"],
            bottom_left=data["bottomLeft"],
        )


@dataclass(frozen=True, slots=True)
class Padding:
    """Four-sided padding."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True, slots=True)
class Sizing:
    """Width and height sizing modes."""

    width: str = "FIXED"
    height: str = "FIXED"

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class LayoutRecord:
    """Auto layout of a component.

    With mode NONE the padding and gap are zero and both alignments are MIN.
    """

    mode: str = "NONE"
    padding: Padding = field(default_factory=Padding)
    gap: float = 0
    primary_axis_align: str = "MIN"
    counter_axis_align: str = "MIN"
    sizing: Sizing = field(default_factory=Sizing)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "padding": self.padding.to_dict(),
            "gap": self.gap,
            "primaryAxisAlign": self.primary_axis_align,
            "counterAxisAlign": self.counter_axis_align,
            "sizing": self.sizing.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutRecord":
        return cls(
            mode=data["mode"],
            padding=Padding(**data["padding"]),
            gap=data["gap"],
            primary_axis_align=data["primaryAxisAlign"],
            counter_axis_align=data["counterAxisAlign"],
            sizing=Sizing(**data["sizing"]),
        )


@dataclass(frozen=True)
class VisualRecord:
    """Paints, effects, corner radius and opacity of a component.

    ``corner_radius`` is a number when uniform and CornerRadii otherwise.
    """

    fills: list[Fill] = field(default_factory=list)
    strokes: list[Stroke] = field(default_factory=list)
    effects: list[EffectRecord] = field(default_factory=list)
    corner_radius: float | CornerRadii = 0
    opacity: float = 1

    def to_dict(self) -> dict[str, Any]:
        radius = self.corner_radius
        return {
            "fills": [f.to_dict() for f in self.fills],
            "strokes": [s.to_dict() for s in self.strokes],
            "effects": [e.to_dict() for e in self.effects],
            "cornerRadius": radius.to_dict() if isinstance(radius, CornerRadii) else radius,
            "opacity": self.opacity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VisualRecord":
        radius = data["cornerRadius"]
        return cls(
            fills=[Fill.from_dict(f) for f in data["fills"]],
            strokes=[Stroke.from_dict(s) for s in data["strokes"]],
            effects=[EffectRecord.from_dict(e) for e in data["effects"]],
            corner_radius=CornerRadii.from_dict(radius) if isinstance(radius, dict) else radius,
            opacity=data["opacity"],
        )


@dataclass(frozen=True)
class PropertyDefinition:
    """Declared component property (BOOLEAN, TEXT, INSTANCE_SWAP, VARIANT)."""

    name: str
    type: str
    default_value: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "defaultValue": self.default_value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PropertyDefinition":
        return cls(name=data["name"], type=data["type"], default_value=data["defaultValue"])


@dataclass(frozen=True)
class VariantRecord:
    """One member of a component set with its parsed variant properties."""

    name: str
    properties: dict[str, str]
    node_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "properties": dict(self.properties), "nodeId": self.node_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VariantRecord":
        return cls(name=data["name"], properties=dict(data["properties"]), node_id=data["nodeId"])


@dataclass(frozen=True)
class ChildSummary:
    """Shallow descriptor of a direct child node."""

    type: str
    name: str
    node_id: str
    text: str | None = None
    component_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "type": self.type,
            "name": self.name,
            "nodeId": self.node_id,
            "text": self.text,
            "componentName": self.component_name,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChildSummary":
        return cls(
            type=data["type"],
            name=data["name"],
            node_id=data["nodeId"],
            text=data.get("text"),
            component_name=data.get("componentName"),
        )


@dataclass(frozen=True)
class ComponentRecord:
    """Exported component or component set.

    ``variants`` is empty unless the record describes a component set.
    """

    node_id: str
    name: str
    description: str
    properties: list[PropertyDefinition]
    variants: list[VariantRecord]
    layout: LayoutRecord
    visual: VisualRecord
    children: list[ChildSummary]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodeId": self.node_id,
            "name": self.name,
            "description": self.description,
            "properties": [p.to_dict() for p in self.properties],
            "variants": [v.to_dict() for v in self.variants],
            "layout": self.layout.to_dict(),
            "visual": self.visual.to_dict(),
            "children": [c.to_dict() for c in self.children],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComponentRecord":
        return cls(
            node_id=data["nodeId"],
            name=data["name"],
            description=data["description"],
            properties=[PropertyDefinition.from_dict(p) for p in data["properties"]],
            variants=[VariantRecord.from_dict(v) for v in data["variants"]],
            layout=LayoutRecord.from_dict(data["layout"]),
            visual=VisualRecord.from_dict(data["visual"]),
            children=[ChildSummary.from_dict(c) for c in data["children"]],
        )


@dataclass(frozen=True)
class ColorStyleRecord:
    """Shared color style."""

    id: str
    name: str
    color: str
    opacity: float
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "opacity": self.opacity,
            "description": self.description,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ColorStyleRecord":
        return cls(
            id=data["id"],
            name=data["name"],
            color=data["color"],
            opacity=data["opacity"],
            description=data.get("description"),
        )


@dataclass(frozen=True)
class TextStyleRecord:
    """Shared text style.

    ``line_height`` is "auto", a percentage string such as "150%", or a number.
    """

    id: str
    name: str
    font_family: str
    font_size: float
    font_weight: int
    line_height: float | str
    letter_spacing: float
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "id": self.id,
            "name": self.name,
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
            "lineHeight": self.line_height,
            "letterSpacing": self.letter_spacing,
            "description": self.description,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextStyleRecord":
        return cls(
            id=data["id"],
            name=data["name"],
            font_family=data["fontFamily"],
            font_size=data["fontSize"],
            font_weight=data["fontWeight"],
            line_height=data["lineHeight"],
            letter_spacing=data["letterSpacing"],
            description=data.get("description"),
        )


@dataclass(frozen=True)
class EffectStyleRecord:
    """Shared effect style."""

    id: str
    name: str
    effects: list[EffectRecord]
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none({
            "id": self.id,
            "name": self.name,
            "effects": [e.to_dict() for e in self.effects],
            "description": self.description,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EffectStyleRecord":
        return cls(
            id=data["id"],
            name=data["name"],
            effects=[EffectRecord.from_dict(e) for e in data["effects"]],
            description=data.get("description"),
        )


@dataclass(frozen=True)
class StyleCollection:
    """Document-wide shared styles, in host order."""

    colors: list[ColorStyleRecord] = field(default_factory=list)
    text: list[TextStyleRecord] = field(default_factory=list)
    effects: list[EffectStyleRecord] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.colors or self.text or self.effects)

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": [c.to_dict() for c in self.colors],
            "text": [t.to_dict() for t in self.text],
            "effects": [e.to_dict() for e in self.effects],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StyleCollection":
        return cls(
            colors=[ColorStyleRecord.from_dict(c) for c in data["colors"]],
            text=[TextStyleRecord.from_dict(t) for t in data["text"]],
            effects=[EffectStyleRecord.from_dict(e) for e in data["effects"]],
        )


@dataclass(frozen=True)
class ExportSummary:
    """Counts reported alongside an export."""

    component_count: int
    color_style_count: int
    text_style_count: int
    effect_style_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "componentCount": self.component_count,
            "colorStyleCount": self.color_style_count,
            "textStyleCount": self.text_style_count,
            "effectStyleCount": self.effect_style_count,
        }


@dataclass(frozen=True)
class ExportDocument:
    """Root of an export.

    Attributes:
        file_key: Source document identifier
        file_name: Source document display name
        exported_at: ISO-8601 UTC timestamp
        components: Exported components and component sets
        styles: Shared styles
        version: Format version, always EXPORT_FORMAT_VERSION
    """

    file_key: str
    file_name: str
    exported_at: str
    components: list[ComponentRecord]
    styles: StyleCollection
    version: str = EXPORT_FORMAT_VERSION

    def summary(self) -> ExportSummary:
        """Count components and styles per category."""
        return ExportSummary(
            component_count=len(self.components),
            color_style_count=len(self.styles.colors),
            text_style_count=len(self.styles.text),
            effect_style_count=len(self.styles.effects),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "exportedAt": self.exported_at,
            "fileKey": self.file_key,
            "fileName": self.file_name,
            "components": [c.to_dict() for c in self.components],
            "styles": self.styles.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportDocument":
        """Deserialize a persisted export.

        Raises:
            ValueError: If the document uses a format version other than
                EXPORT_FORMAT_VERSION
        """
        version = data.get("version")
        if version != EXPORT_FORMAT_VERSION:
            raise ValueError(
                f"Unsupported export format version {version!r} "
                f"(expected {EXPORT_FORMAT_VERSION!r})"
            )
        return cls(
            file_key=data["fileKey"],
            file_name=data["fileName"],
            exported_at=data["exportedAt"],
            components=[ComponentRecord.from_dict(c) for c in data["components"]],
            styles=StyleCollection.from_dict(data["styles"]),
            version=version,
        )


@dataclass(frozen=True)
class FileInfo:
    """Document-level counts returned by the info query."""

    file_name: str
    file_key: str
    page_count: int
    component_count: int
    color_style_count: int
    text_style_count: int
    effect_style_count: int
    selection_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "fileName": self.file_name,
            "fileKey": self.file_key,
            "pageCount": self.page_count,
            "componentCount": self.component_count,
            "colorStyleCount": self.color_style_count,
            "textStyleCount": self.text_style_count,
            "effectStyleCount": self.effect_style_count,
            "selectionCount": self.selection_count,
        }
