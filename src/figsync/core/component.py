"""Component record construction.

The ComponentExporter composes the individual extractors (paints, effects,
geometry, variant names, children) into one ComponentRecord per component
or component set.
"""

import time

from figsync.core.children import summarize_children
from figsync.core.effects import extract_effects
from figsync.core.geometry import extract_corner_radius, extract_layout
from figsync.core.paints import StyleResolver, extract_fills, extract_strokes
from figsync.core.variants import parse_variant_name
from figsync.domain.nodes import Capability, NodeType, SceneNode
from figsync.domain.records import (
    ComponentRecord,
    PropertyDefinition,
    VariantRecord,
    VisualRecord,
)
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger


def render_default_value(value: bool | str | float) -> str:
    """Render a property default value as text.

    Booleans render as "true"/"false" and integral numbers without a
    fractional part, matching how the export consumer writes them.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ComponentExporter:
    """Builds ComponentRecords from component and component set nodes.

    Example:
        exporter = ComponentExporter(host)
        record = exporter.export(button_set)
        print(len(record.variants))
    """

    def __init__(self, host: DesignHost, export_logger: ExportLogger | None = None) -> None:
        """Initialize the exporter.

        Args:
            host: Host used for style and instance resolution
            export_logger: Logger collecting export statistics
        """
        self.host = host
        self.export_logger = export_logger if export_logger is not None else ExportLogger()
        self.resolver = StyleResolver(host, self.export_logger)

    def export(self, node: SceneNode) -> ComponentRecord:
        """Build the record for one component or component set.

        Args:
            node: COMPONENT or COMPONENT_SET node

        Returns:
            ComponentRecord holding only values copied from the node
        """
        start_time = time.time()

        description = ""
        if node.supports(Capability.COMPONENT):
            description = node.component.description or ""  # type: ignore[union-attr]

        record = ComponentRecord(
            node_id=node.id,
            name=node.name,
            description=description,
            properties=self.extract_properties(node),
            variants=self.extract_variants(node),
            layout=extract_layout(node),
            visual=self.extract_visual(node),
            children=summarize_children(node, self.host, self.export_logger),
        )

        duration_ms = (time.time() - start_time) * 1000
        self.export_logger.log_component_exported(
            node_id=node.id,
            name=node.name,
            variant_count=len(record.variants),
            duration_ms=duration_ms,
        )
        return record

    def extract_visual(self, node: SceneNode) -> VisualRecord:
        """Collect fills, strokes, effects, corner radius and opacity."""
        return VisualRecord(
            fills=extract_fills(node, self.resolver),
            strokes=extract_strokes(node, self.resolver),
            effects=extract_effects(node, self.resolver),
            corner_radius=extract_corner_radius(node),
            opacity=node.opacity,
        )

    def extract_properties(self, node: SceneNode) -> list[PropertyDefinition]:
        """Convert the node's declared properties, in declaration order.

        For component sets the declarations live on the set, not on members.
        """
        if not node.supports(Capability.COMPONENT):
            return []
        return [
            PropertyDefinition(
                name=spec.name,
                type=spec.type,
                default_value=render_default_value(spec.default_value),
            )
            for spec in node.component.property_definitions  # type: ignore[union-attr]
        ]

    def extract_variants(self, node: SceneNode) -> list[VariantRecord]:
        """Parse the members of a component set into VariantRecords.

        Returns an empty list for plain components. Children of a set that
        are not components are ignored.
        """
        if node.type != NodeType.COMPONENT_SET:
            return []

        variants = []
        for child in node.children:
            if child.type != NodeType.COMPONENT:
                continue
            result = parse_variant_name(child.name)
            if result.dropped:
                self.export_logger.log_variant_segments_dropped(child.id, child.name, result.dropped)
            variants.append(VariantRecord(
                name=child.name,
                properties=result.properties,
                node_id=child.id,
            ))
        return variants
