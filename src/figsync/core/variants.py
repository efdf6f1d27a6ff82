"""Variant name parsing.

Component set members encode their property values in their name, as
comma-separated ``key=value`` pairs: ``"Size=Large, State=Hover"``.
Naming in real files is inconsistent, so parsing is best-effort: segments
that are not a clean pair are dropped and counted, never reported as errors.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VariantParseResult:
    """Parsed variant properties.

    Attributes:
        properties: Property key to value, in name order
        dropped: Number of segments that did not parse
    """

    properties: dict[str, str] = field(default_factory=dict)
    dropped: int = 0


def parse_variant_name(name: str) -> VariantParseResult:
    """Parse a variant member's name into properties.

    Each comma-separated segment is split on its first ``=``; key and value
    are trimmed and the pair is kept only if both are non-empty. A repeated
    key keeps its last value.

    Args:
        name: Variant display name

    Returns:
        VariantParseResult with the parsed mapping and dropped segment count
    """
    properties: dict[str, str] = {}
    dropped = 0

    for segment in name.split(","):
        key, sep, value = segment.strip().partition("=")
        key = key.strip()
        value = value.strip()
        if sep and key and value:
            properties[key] = value
        else:
            dropped += 1

    return VariantParseResult(properties=properties, dropped=dropped)
