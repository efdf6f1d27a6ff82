"""Core extraction and normalization for figsync.

This module contains the algorithms that turn a host's design tree into an
export document:

- Color normalization (fractional RGB to ``#rrggbb``)
- Paint and style resolution (fills, strokes, style names)
- Effect normalization (shadows and blurs)
- Geometry extraction (corner radius, auto layout)
- Variant name parsing (``key=value`` pairs)
- Child summaries (one level deep)
- Shared style collection (colors, text, effects)
- Export orchestration (scopes, deduplication, staged pipeline)
- Request dispatch (export, info, cancel)

Key classes:
- ComponentExporter: Builds one record per component or component set
- StyleCollectionExporter: Collects and normalizes shared styles
- ExportOrchestrator: Runs exports for a scope
- ExportSession: Dispatches request messages
"""

from figsync.core.color import color_to_hex, hex_to_rgb, rgb_to_hex
from figsync.core.component import ComponentExporter
from figsync.core.dispatcher import ExportSession
from figsync.core.orchestrator import ExportOrchestrator, ExportScope
from figsync.core.styles import StyleCollectionExporter, font_weight_for
from figsync.core.variants import VariantParseResult, parse_variant_name

__all__ = [
    # Exporters
    "ComponentExporter",
    "ExportOrchestrator",
    "ExportScope",
    "ExportSession",
    "StyleCollectionExporter",
    # Functions
    "VariantParseResult",
    "color_to_hex",
    "font_weight_for",
    "hex_to_rgb",
    "parse_variant_name",
    "rgb_to_hex",
]
