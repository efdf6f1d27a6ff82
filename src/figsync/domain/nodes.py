"""Read-only model of the host's design tree.

This module defines the node and shared-style types that hosts hand to the
export engine. Node kinds differ in which properties they expose; instead of
probing for attributes, each optional property group is modelled as a trait
object and surfaced as a closed set of capabilities:

- FillTraits: fills, strokes, stroke weight and paint style bindings
- EffectTraits: effects and the effect style binding
- CornerTraits: scalar or per-corner radius
- AutoLayoutTraits: flex-like layout parameters
- SizingTraits: horizontal/vertical sizing modes
- TextTraits: text content
- ComponentTraits: description and declared properties
- InstanceTraits: reference to the backing component
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeType(str, Enum):
    """Node type tags used by the traversal.

    Nodes keep their raw type string so that unknown kinds pass through to
    the export untouched; these members cover the kinds the engine branches on.
    """

    DOCUMENT = "DOCUMENT"
    PAGE = "PAGE"
    FRAME = "FRAME"
    GROUP = "GROUP"
    SECTION = "SECTION"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    TEXT = "TEXT"
    RECTANGLE = "RECTANGLE"
    VECTOR = "VECTOR"


class Mixed(Enum):
    """Sentinel for properties whose per-part values differ."""

    MIXED = "MIXED"


MIXED = Mixed.MIXED


class Capability(Enum):
    """Optional property groups a node may expose."""

    FILLS = "fills"
    EFFECTS = "effects"
    CORNER_RADIUS = "corner_radius"
    AUTO_LAYOUT = "auto_layout"
    SIZING = "sizing"
    TEXT = "text"
    COMPONENT = "component"
    INSTANCE = "instance"


@dataclass(frozen=True, slots=True)
class RGB:
    """Color with fractional channels in [0, 1]."""

    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class Vector:
    """2D offset."""

    x: float
    y: float


@dataclass(frozen=True)
class Paint:
    """A single paint entry of a fill or stroke list.

    Attributes:
        type: Paint kind (SOLID, GRADIENT_LINEAR, GRADIENT_RADIAL, IMAGE, ...)
        visible: False when the paint is explicitly hidden
        color: Solid color (solid paints only)
        opacity: Paint opacity, None when the host did not supply one
    """

    type: str
    visible: bool = True
    color: RGB | None = None
    opacity: float | None = None


@dataclass(frozen=True)
class Effect:
    """A single shadow or blur effect.

    Attributes:
        type: DROP_SHADOW, INNER_SHADOW, LAYER_BLUR or BACKGROUND_BLUR
        radius: Blur radius
        visible: False when the effect is explicitly hidden
        color: Shadow color (shadow kinds only)
        offset: Shadow offset (shadow kinds only)
        spread: Shadow spread (shadow kinds only)
    """

    type: str
    radius: float = 0
    visible: bool = True
    color: RGB | None = None
    offset: Vector | None = None
    spread: float | None = None


@dataclass(frozen=True)
class FillTraits:
    """Paint-related properties of geometry-bearing nodes."""

    fills: tuple[Paint, ...] = ()
    strokes: tuple[Paint, ...] = ()
    stroke_weight: float | Mixed | None = None
    fill_style_id: str | Mixed | None = None
    stroke_style_id: str | None = None


@dataclass(frozen=True)
class EffectTraits:
    """Effect list and effect style binding."""

    effects: tuple[Effect, ...] = ()
    effect_style_id: str | None = None


@dataclass(frozen=True)
class CornerTraits:
    """Corner radius.

    ``corner_radius`` is MIXED when the corners differ. The per-corner fields
    are None on node kinds that do not expose independent corners.
    """

    corner_radius: float | Mixed = 0
    top_left: float | None = None
    top_right: float | None = None
    bottom_right: float | None = None
    bottom_left: float | None = None

    def has_independent_corners(self) -> bool:
        """Check whether all four corner fields are exposed."""
        return None not in (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


@dataclass(frozen=True)
class AutoLayoutTraits:
    """Auto layout parameters of container nodes."""

    layout_mode: str = "NONE"
    padding_top: float = 0
    padding_right: float = 0
    padding_bottom: float = 0
    padding_left: float = 0
    item_spacing: float = 0
    primary_axis_align_items: str = "MIN"
    counter_axis_align_items: str = "MIN"


@dataclass(frozen=True)
class SizingTraits:
    """Horizontal and vertical sizing modes (FIXED, HUG, FILL)."""

    horizontal: str = "FIXED"
    vertical: str = "FIXED"


@dataclass(frozen=True)
class TextTraits:
    """Text content of a text node."""

    characters: str = ""


@dataclass(frozen=True)
class ComponentPropertySpec:
    """A property declared on a component or component set."""

    name: str
    type: str
    default_value: bool | str | float


@dataclass(frozen=True)
class ComponentTraits:
    """Component-level metadata."""

    description: str = ""
    property_definitions: tuple[ComponentPropertySpec, ...] = ()


@dataclass(frozen=True)
class InstanceTraits:
    """Reference from an instance to its backing component."""

    main_component_id: str | None = None


@dataclass(eq=False)
class SceneNode:
    """A node of the host's design tree.

    Attributes:
        id: Stable node identifier
        name: Display name
        type: Raw node type string (compare against NodeType members)
        children: Direct children in document order
        opacity: Node opacity in [0, 1]
        parent: Parent node, None for the document root
    """

    id: str
    name: str
    type: str
    children: list["SceneNode"] = field(default_factory=list)
    opacity: float = 1
    fills: FillTraits | None = None
    effects: EffectTraits | None = None
    corners: CornerTraits | None = None
    auto_layout: AutoLayoutTraits | None = None
    sizing: SizingTraits | None = None
    text: TextTraits | None = None
    component: ComponentTraits | None = None
    instance: InstanceTraits | None = None
    parent: "SceneNode | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @property
    def capabilities(self) -> frozenset[Capability]:
        """Get the set of capabilities this node exposes."""
        traits = {
            Capability.FILLS: self.fills,
            Capability.EFFECTS: self.effects,
            Capability.CORNER_RADIUS: self.corners,
            Capability.AUTO_LAYOUT: self.auto_layout,
            Capability.SIZING: self.sizing,
            Capability.TEXT: self.text,
            Capability.COMPONENT: self.component,
            Capability.INSTANCE: self.instance,
        }
        return frozenset(cap for cap, trait in traits.items() if trait is not None)

    def supports(self, capability: Capability) -> bool:
        """Check whether the node exposes a capability."""
        return capability in self.capabilities

    def is_component_like(self) -> bool:
        """Check whether the node is a component or a component set."""
        return self.type in (NodeType.COMPONENT, NodeType.COMPONENT_SET)

    def is_variant(self) -> bool:
        """Check whether the node is a component inside a component set."""
        return (
            self.type == NodeType.COMPONENT
            and self.parent is not None
            and self.parent.type == NodeType.COMPONENT_SET
        )

    def iter_descendants(self) -> Iterator["SceneNode"]:
        """Iterate over all descendants depth-first, pre-order.

        The node itself is not included.
        """
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_all(self, predicate: Callable[["SceneNode"], bool]) -> list["SceneNode"]:
        """Find all descendants matching a predicate, in document order."""
        return [node for node in self.iter_descendants() if predicate(node)]


@dataclass(frozen=True)
class LineHeight:
    """Line height with unit (AUTO, PERCENT, PIXELS)."""

    unit: str = "AUTO"
    value: float = 0


@dataclass(frozen=True)
class LetterSpacing:
    """Letter spacing with unit (PERCENT, PIXELS)."""

    unit: str = "PIXELS"
    value: float = 0


@dataclass(frozen=True)
class SharedStyle:
    """Base type for document-level named styles."""

    id: str
    name: str


@dataclass(frozen=True)
class PaintStyle(SharedStyle):
    """Shared paint (color) style."""

    paints: tuple[Paint, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class TextStyle(SharedStyle):
    """Shared text style.

    ``font_style`` is the font subfamily name ("Regular", "Semi Bold", ...).
    """

    font_family: str = ""
    font_style: str = "Regular"
    font_size: float = 0
    line_height: LineHeight = field(default_factory=LineHeight)
    letter_spacing: LetterSpacing = field(default_factory=LetterSpacing)
    description: str = ""


@dataclass(frozen=True)
class EffectStyle(SharedStyle):
    """Shared effect style."""

    effects: tuple[Effect, ...] = ()
    description: str = ""
