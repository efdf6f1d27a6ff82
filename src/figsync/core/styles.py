"""Shared style collection.

Enumerates the document's paint, text and effect styles and normalizes them
into the same vocabulary used for component visuals. The three enumerations
are independent host queries and are awaited together.
"""

import asyncio

from figsync.core.color import color_to_hex
from figsync.core.effects import normalize_effects
from figsync.domain.nodes import EffectStyle, LetterSpacing, LineHeight, PaintStyle, TextStyle
from figsync.domain.records import (
    ColorStyleRecord,
    EffectStyleRecord,
    StyleCollection,
    TextStyleRecord,
)
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger

DEFAULT_FONT_WEIGHT = 400

FONT_WEIGHTS: dict[str, int] = {
    "Thin": 100,
    "Hairline": 100,
    "Extra Light": 200,
    "ExtraLight": 200,
    "UltraLight": 200,
    "Light": 300,
    "Regular": 400,
    "Normal": 400,
    "Medium": 500,
    "Semi Bold": 600,
    "SemiBold": 600,
    "DemiBold": 600,
    "Bold": 700,
    "Extra Bold": 800,
    "ExtraBold": 800,
    "UltraBold": 800,
    "Black": 900,
    "Heavy": 900,
}


def font_weight_for(font_style: str) -> int:
    """Map a font subfamily name to a numeric weight.

    A trailing "Italic" is ignored ("Bold Italic" -> 700). Unknown names map
    to DEFAULT_FONT_WEIGHT.
    """
    name = font_style.strip()
    if name.endswith("Italic"):
        name = name[: -len("Italic")].strip() or "Regular"
    return FONT_WEIGHTS.get(name, DEFAULT_FONT_WEIGHT)


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def reduce_line_height(line_height: LineHeight) -> float | str:
    """Reduce a line height to "auto", a percentage string, or a number."""
    if line_height.unit == "AUTO":
        return "auto"
    if line_height.unit == "PERCENT":
        return f"{format_number(line_height.value)}%"
    return line_height.value


def reduce_letter_spacing(letter_spacing: LetterSpacing) -> float:
    """Reduce letter spacing to a number; percentages become fractions."""
    if letter_spacing.unit == "PERCENT":
        return letter_spacing.value / 100
    return letter_spacing.value


def normalize_color_style(style: PaintStyle) -> ColorStyleRecord | None:
    """Normalize a paint style.

    Returns:
        ColorStyleRecord, or None when the style's first paint is not solid
    """
    paint = style.paints[0] if style.paints else None
    if paint is None or paint.type != "SOLID" or paint.color is None:
        return None
    return ColorStyleRecord(
        id=style.id,
        name=style.name,
        color=color_to_hex(paint.color),
        opacity=paint.opacity if paint.opacity is not None else 1,
        description=style.description or None,
    )


def normalize_text_style(style: TextStyle) -> TextStyleRecord:
    """Normalize a text style."""
    return TextStyleRecord(
        id=style.id,
        name=style.name,
        font_family=style.font_family,
        font_size=style.font_size,
        font_weight=font_weight_for(style.font_style),
        line_height=reduce_line_height(style.line_height),
        letter_spacing=reduce_letter_spacing(style.letter_spacing),
        description=style.description or None,
    )


def normalize_effect_style(style: EffectStyle) -> EffectStyleRecord:
    """Normalize an effect style. Its effects carry no style reference."""
    return EffectStyleRecord(
        id=style.id,
        name=style.name,
        effects=normalize_effects(style.effects),
        description=style.description or None,
    )


class StyleCollectionExporter:
    """Collects and normalizes the document's shared styles."""

    def __init__(self, host: DesignHost, export_logger: ExportLogger | None = None) -> None:
        self.host = host
        self.export_logger = export_logger if export_logger is not None else ExportLogger()

    async def fetch(self) -> tuple[list[PaintStyle], list[TextStyle], list[EffectStyle]]:
        """Run the three style enumerations concurrently.

        Raises:
            HostQueryError: If any enumeration fails
        """
        paint_styles, text_styles, effect_styles = await asyncio.gather(
            self.host.get_local_paint_styles(),
            self.host.get_local_text_styles(),
            self.host.get_local_effect_styles(),
        )
        return paint_styles, text_styles, effect_styles

    def normalize(
        self,
        paint_styles: list[PaintStyle],
        text_styles: list[TextStyle],
        effect_styles: list[EffectStyle],
    ) -> StyleCollection:
        """Normalize fetched styles, preserving host order."""
        colors = []
        for style in paint_styles:
            record = normalize_color_style(style)
            if record is None:
                self.export_logger.log_style_skipped(style.id, style.name, "first paint is not solid")
                continue
            colors.append(record)

        collection = StyleCollection(
            colors=colors,
            text=[normalize_text_style(s) for s in text_styles],
            effects=[normalize_effect_style(s) for s in effect_styles],
        )
        self.export_logger.log_styles_collected(
            colors=len(collection.colors),
            text=len(collection.text),
            effects=len(collection.effects),
        )
        return collection

    async def collect(self) -> StyleCollection:
        """Fetch and normalize all shared styles."""
        return self.normalize(*await self.fetch())
