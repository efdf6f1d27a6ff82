"""Domain models for figsync.

This module contains two groups of models:

- Host-side nodes and shared styles: a read-only view of the design tree
  with node capabilities expressed as optional trait objects.
- Export records: the plain values an export document is built from. They
  never reference host nodes, only node and style identifiers.

Key classes:
- SceneNode: A node of the design tree
- PaintStyle, TextStyle, EffectStyle: Shared styles
- ComponentRecord: An exported component or component set
- ExportDocument: Root of an export
"""

from figsync.domain.nodes import (
    MIXED,
    RGB,
    AutoLayoutTraits,
    Capability,
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
    Mixed,
    NodeType,
    Paint,
    PaintStyle,
    SceneNode,
    SharedStyle,
    SizingTraits,
    TextStyle,
    TextTraits,
    Vector,
)
from figsync.domain.records import (
    ChildSummary,
    ColorStyleRecord,
    ComponentRecord,
    CornerRadii,
    EffectRecord,
    EffectStyleRecord,
    ExportDocument,
    ExportSummary,
    FileInfo,
    Fill,
    LayoutRecord,
    Offset,
    Padding,
    PropertyDefinition,
    Sizing,
    Stroke,
    StyleCollection,
    TextStyleRecord,
    VariantRecord,
    VisualRecord,
)

__all__: list[str] = [
    # Enums and sentinels
    "Capability",
    "MIXED",
    "Mixed",
    "NodeType",
    # Host-side types
    "RGB",
    "AutoLayoutTraits",
    "ComponentPropertySpec",
    "ComponentTraits",
    "CornerTraits",
    "Effect",
    "EffectStyle",
    "EffectTraits",
    "FillTraits",
    "InstanceTraits",
    "LetterSpacing",
    "LineHeight",
    "Paint",
    "PaintStyle",
    "SceneNode",
    "SharedStyle",
    "SizingTraits",
    "TextStyle",
    "TextTraits",
    "Vector",
    # Export records
    "ChildSummary",
    "ColorStyleRecord",
    "ComponentRecord",
    "CornerRadii",
    "EffectRecord",
    "EffectStyleRecord",
    "ExportDocument",
    "ExportSummary",
    "FileInfo",
    "Fill",
    "LayoutRecord",
    "Offset",
    "Padding",
    "PropertyDefinition",
    "Sizing",
    "Stroke",
    "StyleCollection",
    "TextStyleRecord",
    "VariantRecord",
    "VisualRecord",
]
