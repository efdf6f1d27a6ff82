"""Conversion from host JSON to the node model.

Two source shapes are supported:

- Snapshot JSON, shaped like the design application's plugin runtime
  (``cornerRadius`` may be ``"MIXED"``, ``fillStyleId``, ``mainComponentId``...)
- REST JSON, as returned by ``GET /v1/files/:key``
  (``rectangleCornerRadii``, ``styles: {"fill": id}``, ``componentId``...)

This is the only place where field presence is inspected; it decides which
capability traits each node gets.
"""

from typing import Any

from figsync.domain.nodes import (
    MIXED,
    RGB,
    AutoLayoutTraits,
    ComponentPropertySpec,
    ComponentTraits,
    CornerTraits,
    Effect,
    EffectStyle,
    EffectTraits,
    FillTraits,
    InstanceTraits,
    LetterSpacing,
    LineHeight,
    NodeType,
    Paint,
    PaintStyle,
    SceneNode,
    SizingTraits,
    TextStyle,
    TextTraits,
    Vector,
)

MIXED_MARKER = "MIXED"

# Node kinds that carry auto layout in the REST format even when the
# ``layoutMode`` field is omitted
REST_LAYOUT_TYPES = frozenset({"FRAME", "COMPONENT", "COMPONENT_SET", "INSTANCE"})

# REST reports a numeric weight; map it back to a subfamily name
WEIGHT_NAMES: dict[int, str] = {
    100: "Thin",
    200: "ExtraLight",
    300: "Light",
    400: "Regular",
    500: "Medium",
    600: "SemiBold",
    700: "Bold",
    800: "ExtraBold",
    900: "Black",
}


def _mixed_or(value: Any) -> Any:
    return MIXED if value == MIXED_MARKER else value


def rgb_from_dict(data: dict[str, Any] | None) -> RGB | None:
    """Convert ``{"r", "g", "b"}`` to RGB; alpha is ignored."""
    if not data:
        return None
    return RGB(r=data.get("r", 0), g=data.get("g", 0), b=data.get("b", 0))


def paint_from_dict(data: dict[str, Any]) -> Paint:
    """Convert a paint entry (same shape in both formats)."""
    return Paint(
        type=data.get("type", "SOLID"),
        visible=data.get("visible", True),
        color=rgb_from_dict(data.get("color")),
        opacity=data.get("opacity"),
    )


def effect_from_dict(data: dict[str, Any]) -> Effect:
    """Convert an effect entry (same shape in both formats)."""
    offset = data.get("offset")
    return Effect(
        type=data.get("type", "DROP_SHADOW"),
        radius=data.get("radius", 0),
        visible=data.get("visible", True),
        color=rgb_from_dict(data.get("color")),
        offset=Vector(x=offset.get("x", 0), y=offset.get("y", 0)) if offset else None,
        spread=data.get("spread"),
    )


def _paints(value: Any) -> tuple[Paint, ...]:
    # Mixed fills (e.g. text with several colors) are not a list
    if not isinstance(value, list):
        return ()
    return tuple(paint_from_dict(p) for p in value)


def _property_definitions(data: dict[str, Any]) -> tuple[ComponentPropertySpec, ...]:
    definitions = data.get("componentPropertyDefinitions") or {}
    return tuple(
        ComponentPropertySpec(
            name=name,
            type=definition.get("type", "TEXT"),
            default_value=definition.get("defaultValue", ""),
        )
        for name, definition in definitions.items()
    )


def _sizing(data: dict[str, Any]) -> SizingTraits | None:
    if "layoutSizingHorizontal" not in data and "layoutSizingVertical" not in data:
        return None
    return SizingTraits(
        horizontal=data.get("layoutSizingHorizontal", "FIXED"),
        vertical=data.get("layoutSizingVertical", "FIXED"),
    )


def _auto_layout(data: dict[str, Any]) -> AutoLayoutTraits:
    return AutoLayoutTraits(
        layout_mode=data.get("layoutMode", "NONE"),
        padding_top=data.get("paddingTop", 0),
        padding_right=data.get("paddingRight", 0),
        padding_bottom=data.get("paddingBottom", 0),
        padding_left=data.get("paddingLeft", 0),
        item_spacing=data.get("itemSpacing", 0),
        primary_axis_align_items=data.get("primaryAxisAlignItems", "MIN"),
        counter_axis_align_items=data.get("counterAxisAlignItems", "MIN"),
    )


# ── Snapshot format ────────────────────────────────────────────────────


def node_from_snapshot(data: dict[str, Any]) -> SceneNode:
    """Convert a snapshot node (and its subtree) to a SceneNode.

    Args:
        data: Node dictionary in plugin-runtime shape

    Returns:
        SceneNode with parent links set on all descendants
    """
    node_type = data.get("type", "FRAME")

    fills = None
    if "fills" in data or "strokes" in data:
        fills = FillTraits(
            fills=_paints(data.get("fills")),
            strokes=_paints(data.get("strokes")),
            stroke_weight=_mixed_or(data.get("strokeWeight")),
            fill_style_id=_mixed_or(data.get("fillStyleId")),
            stroke_style_id=data.get("strokeStyleId"),
        )

    effects = None
    if "effects" in data:
        effects = EffectTraits(
            effects=tuple(effect_from_dict(e) for e in data["effects"]),
            effect_style_id=data.get("effectStyleId"),
        )

    corners = None
    if "cornerRadius" in data:
        corners = CornerTraits(
            corner_radius=_mixed_or(data["cornerRadius"]),
            top_left=data.get("topLeftRadius"),
            top_right=data.get("topRightRadius"),
            bottom_right=data.get("bottomRightRadius"),
            bottom_left=data.get("bottomLeftRadius"),
        )

    component = None
    if node_type in (NodeType.COMPONENT, NodeType.COMPONENT_SET):
        component = ComponentTraits(
            description=data.get("description", ""),
            property_definitions=_property_definitions(data),
        )

    return SceneNode(
        id=data["id"],
        name=data.get("name", ""),
        type=node_type,
        children=[node_from_snapshot(c) for c in data.get("children", [])],
        opacity=data.get("opacity", 1),
        fills=fills,
        effects=effects,
        corners=corners,
        auto_layout=_auto_layout(data) if "layoutMode" in data else None,
        sizing=_sizing(data),
        text=TextTraits(data.get("characters", "")) if node_type == NodeType.TEXT else None,
        component=component,
        instance=(
            InstanceTraits(data.get("mainComponentId"))
            if node_type == NodeType.INSTANCE else None
        ),
    )


def paint_style_from_snapshot(data: dict[str, Any]) -> PaintStyle:
    """Convert a snapshot paint style."""
    return PaintStyle(
        id=data["id"],
        name=data.get("name", ""),
        paints=_paints(data.get("paints", [])),
        description=data.get("description", ""),
    )


def text_style_from_snapshot(data: dict[str, Any]) -> TextStyle:
    """Convert a snapshot text style."""
    font_name = data.get("fontName", {})
    line_height = data.get("lineHeight", {})
    letter_spacing = data.get("letterSpacing", {})
    return TextStyle(
        id=data["id"],
        name=data.get("name", ""),
        font_family=font_name.get("family", ""),
        font_style=font_name.get("style", "Regular"),
        font_size=data.get("fontSize", 0),
        line_height=LineHeight(
            unit=line_height.get("unit", "AUTO"),
            value=line_height.get("value", 0),
        ),
        letter_spacing=LetterSpacing(
            unit=letter_spacing.get("unit", "PIXELS"),
            value=letter_spacing.get("value", 0),
        ),
        description=data.get("description", ""),
    )


def effect_style_from_snapshot(data: dict[str, Any]) -> EffectStyle:
    """Convert a snapshot effect style."""
    return EffectStyle(
        id=data["id"],
        name=data.get("name", ""),
        effects=tuple(effect_from_dict(e) for e in data.get("effects", [])),
        description=data.get("description", ""),
    )


# ── REST format ────────────────────────────────────────────────────────


def _rest_corners(data: dict[str, Any]) -> CornerTraits | None:
    radii = data.get("rectangleCornerRadii")
    if radii and len(radii) == 4:
        top_left, top_right, bottom_right, bottom_left = radii
        uniform = len(set(radii)) == 1
        return CornerTraits(
            corner_radius=top_left if uniform else MIXED,
            top_left=top_left,
            top_right=top_right,
            bottom_right=bottom_right,
            bottom_left=bottom_left,
        )
    if "cornerRadius" in data:
        return CornerTraits(corner_radius=data["cornerRadius"])
    return None


def node_from_rest(
    data: dict[str, Any],
    component_meta: dict[str, dict[str, Any]] | None = None,
) -> SceneNode:
    """Convert a REST API node (and its subtree) to a SceneNode.

    Args:
        data: Node dictionary from the files endpoint
        component_meta: The file's ``components`` and ``componentSets``
            maps merged; REST nodes carry descriptions only there

    Returns:
        SceneNode with parent links set on all descendants
    """
    component_meta = component_meta or {}
    node_type = data.get("type", "FRAME")
    bound = data.get("styles", {})

    fills = None
    if "fills" in data or "strokes" in data:
        fills = FillTraits(
            fills=_paints(data.get("fills")),
            strokes=_paints(data.get("strokes")),
            stroke_weight=data.get("strokeWeight"),
            fill_style_id=bound.get("fill"),
            stroke_style_id=bound.get("stroke"),
        )

    effects = None
    if "effects" in data:
        effects = EffectTraits(
            effects=tuple(effect_from_dict(e) for e in data["effects"]),
            effect_style_id=bound.get("effect"),
        )

    component = None
    if node_type in (NodeType.COMPONENT, NodeType.COMPONENT_SET):
        meta = component_meta.get(data["id"], {})
        component = ComponentTraits(
            description=meta.get("description", ""),
            property_definitions=_property_definitions(data),
        )

    has_layout = "layoutMode" in data or node_type in REST_LAYOUT_TYPES

    return SceneNode(
        id=data["id"],
        name=data.get("name", ""),
        type=node_type,
        children=[node_from_rest(c, component_meta) for c in data.get("children", [])],
        opacity=data.get("opacity", 1),
        fills=fills,
        effects=effects,
        corners=_rest_corners(data),
        auto_layout=_auto_layout(data) if has_layout else None,
        sizing=_sizing(data),
        text=TextTraits(data.get("characters", "")) if node_type == NodeType.TEXT else None,
        component=component,
        instance=(
            InstanceTraits(data.get("componentId"))
            if node_type == NodeType.INSTANCE else None
        ),
    )


def _rest_font_style(style: dict[str, Any]) -> str:
    weight = style.get("fontWeight")
    if isinstance(weight, (int, float)):
        name = WEIGHT_NAMES.get(int(round(weight / 100.0)) * 100, "Regular")
    else:
        postscript = style.get("fontPostScriptName") or ""
        name = postscript.rsplit("-", 1)[1] if "-" in postscript else "Regular"
    if style.get("italic"):
        name = f"{name} Italic"
    return name


def _rest_line_height(style: dict[str, Any]) -> LineHeight:
    unit = style.get("lineHeightUnit", "INTRINSIC_%")
    if unit == "INTRINSIC_%":
        return LineHeight(unit="AUTO")
    if unit == "FONT_SIZE_%":
        return LineHeight(unit="PERCENT", value=style.get("lineHeightPercentFontSize", 100))
    return LineHeight(unit="PIXELS", value=style.get("lineHeightPx", 0))


def style_from_rest(
    style_id: str,
    meta: dict[str, Any],
    node: dict[str, Any],
) -> PaintStyle | TextStyle | EffectStyle | None:
    """Convert a REST style definition.

    Args:
        style_id: Style (and defining node) id
        meta: Entry of the file's ``styles`` map (name, styleType, description)
        node: The style's defining node from the nodes endpoint

    Returns:
        The converted style, or None for style types outside the export (GRID)
    """
    name = meta.get("name", "")
    description = meta.get("description", "")
    style_type = meta.get("styleType")

    if style_type == "FILL":
        return PaintStyle(
            id=style_id,
            name=name,
            paints=_paints(node.get("fills", [])),
            description=description,
        )
    if style_type == "TEXT":
        style = node.get("style", {})
        return TextStyle(
            id=style_id,
            name=name,
            font_family=style.get("fontFamily", ""),
            font_style=_rest_font_style(style),
            font_size=style.get("fontSize", 0),
            line_height=_rest_line_height(style),
            letter_spacing=LetterSpacing(unit="PIXELS", value=style.get("letterSpacing", 0)),
            description=description,
        )
    if style_type == "EFFECT":
        return EffectStyle(
            id=style_id,
            name=name,
            effects=tuple(effect_from_dict(e) for e in node.get("effects", [])),
            description=description,
        )
    return None
