"""Corner radius and layout extraction.

Both extractors dispatch on node capabilities: a node without the corner
radius or auto layout capability gets the format's default values, and
container-only fields are never read from nodes that lack them.
"""

from figsync.domain.nodes import MIXED, SceneNode
from figsync.domain.records import CornerRadii, LayoutRecord, Padding, Sizing


def extract_corner_radius(node: SceneNode) -> float | CornerRadii:
    """Extract the corner radius of a node.

    Returns:
        The scalar radius when it is uniform, a CornerRadii record when the
        radius is mixed and the node exposes all four corners, else 0
    """
    corners = node.corners
    if corners is None:
        return 0

    if corners.corner_radius is not MIXED:
        return corners.corner_radius

    if corners.has_independent_corners():
        return CornerRadii(
            top_left=corners.top_left,  # type: ignore[arg-type]
            top_right=corners.top_right,  # type: ignore[arg-type]
            bottom_right=corners.bottom_right,  # type: ignore[arg-type]
            bottom_left=corners.bottom_left,  # type: ignore[arg-type]
        )

    return 0


def extract_sizing(node: SceneNode) -> Sizing:
    """Extract horizontal/vertical sizing modes, FIXED when not exposed."""
    sizing = node.sizing
    if sizing is None:
        return Sizing()
    return Sizing(width=sizing.horizontal, height=sizing.vertical)


def extract_layout(node: SceneNode) -> LayoutRecord:
    """Extract the auto layout record of a node.

    Padding, gap and alignment are only read when the layout mode is not
    NONE. Sizing is read independently of the mode.

    Args:
        node: Node to read

    Returns:
        LayoutRecord, all defaults for nodes without auto layout support
    """
    layout = node.auto_layout
    if layout is None:
        return LayoutRecord()

    sizing = extract_sizing(node)

    if layout.layout_mode == "NONE":
        return LayoutRecord(mode="NONE", sizing=sizing)

    return LayoutRecord(
        mode=layout.layout_mode,
        padding=Padding(
            top=layout.padding_top,
            right=layout.padding_right,
            bottom=layout.padding_bottom,
            left=layout.padding_left,
        ),
        gap=layout.item_spacing,
        primary_axis_align=layout.primary_axis_align_items,
        counter_axis_align=layout.counter_axis_align_items,
        sizing=sizing,
    )
