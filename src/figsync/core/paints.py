"""Fill and stroke normalization with shared style resolution.

A node binds at most one shared style per surface (fill, stroke, effect),
not one per paint. When a binding exists every exported paint of that
surface carries the style id, plus the style's current name if the id still
resolves. A dangling reference only drops the name.
"""

from dataclasses import dataclass

from figsync.core.color import color_to_hex
from figsync.domain.nodes import MIXED, Mixed, Paint, SceneNode
from figsync.domain.records import Fill, Stroke
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger

DEFAULT_STROKE_WEIGHT = 1


@dataclass(frozen=True)
class StyleRef:
    """Reference to a shared style as written into the export."""

    style_id: str
    style_name: str | None = None


class StyleResolver:
    """Resolves style bindings to identifier and display name."""

    def __init__(self, host: DesignHost, export_logger: ExportLogger) -> None:
        self._host = host
        self._export_logger = export_logger

    def resolve(self, binding: str | Mixed | None, node_id: str) -> StyleRef | None:
        """Resolve a node's style binding.

        Args:
            binding: Style id bound on the node (None, empty or MIXED for none)
            node_id: Id of the bound node, for logging

        Returns:
            StyleRef, or None when the node has no usable binding
        """
        if binding is None or binding is MIXED or not binding:
            return None
        style_id = str(binding)

        style = self._host.get_style_by_id(style_id)
        if style is None:
            self._export_logger.log_style_unresolved(node_id, style_id, "style not found")
            return StyleRef(style_id=style_id)

        return StyleRef(style_id=style_id, style_name=style.name)


def _solid_values(paint: Paint) -> tuple[str | None, float | None]:
    if paint.type != "SOLID" or paint.color is None:
        return None, None
    opacity = paint.opacity if paint.opacity is not None else 1
    return color_to_hex(paint.color), opacity


def visible_paints(paints: tuple[Paint, ...]) -> list[Paint]:
    """Filter out paints that are explicitly hidden."""
    return [paint for paint in paints if paint.visible is not False]


def extract_fills(node: SceneNode, resolver: StyleResolver) -> list[Fill]:
    """Normalize the visible fills of a node.

    Args:
        node: Node to read
        resolver: Resolver for the node's fill style binding

    Returns:
        One Fill per visible paint, in paint order
    """
    traits = node.fills
    if traits is None:
        return []

    paints = visible_paints(traits.fills)
    ref = resolver.resolve(traits.fill_style_id, node.id) if paints else None

    fills = []
    for paint in paints:
        color, opacity = _solid_values(paint)
        fills.append(Fill(
            type=paint.type,
            color=color,
            opacity=opacity,
            style_id=ref.style_id if ref else None,
            style_name=ref.style_name if ref else None,
        ))
    return fills


def extract_strokes(node: SceneNode, resolver: StyleResolver) -> list[Stroke]:
    """Normalize the visible strokes of a node.

    Stroke weight comes from the node's scalar stroke weight. A missing or
    mixed weight is written as DEFAULT_STROKE_WEIGHT.
    """
    traits = node.fills
    if traits is None:
        return []

    paints = visible_paints(traits.strokes)
    if not paints:
        return []

    weight = traits.stroke_weight
    if weight is None or isinstance(weight, Mixed):
        weight = DEFAULT_STROKE_WEIGHT
    ref = resolver.resolve(traits.stroke_style_id, node.id)

    strokes = []
    for paint in paints:
        color, opacity = _solid_values(paint)
        strokes.append(Stroke(
            type=paint.type,
            weight=weight,
            color=color,
            opacity=opacity,
            style_id=ref.style_id if ref else None,
            style_name=ref.style_name if ref else None,
        ))
    return strokes
