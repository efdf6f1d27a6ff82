"""Shadow and blur effect normalization.

Every effect is written with its kind and blur radius. Only shadows have a
color, an offset and a spread; blur effects never carry those fields.
"""

from figsync.core.color import color_to_hex
from figsync.core.paints import StyleRef, StyleResolver
from figsync.domain.nodes import Effect, SceneNode
from figsync.domain.records import EffectRecord, Offset

SHADOW_TYPES = frozenset({"DROP_SHADOW", "INNER_SHADOW"})


def is_shadow(effect: Effect) -> bool:
    """Check whether an effect is a drop or inner shadow."""
    return effect.type in SHADOW_TYPES


def normalize_effect(effect: Effect, ref: StyleRef | None = None) -> EffectRecord:
    """Normalize a single effect.

    Args:
        effect: Effect to normalize
        ref: Shared effect style bound on the owning node, if any

    Returns:
        EffectRecord
    """
    color = offset = spread = None
    if is_shadow(effect):
        if effect.color is not None:
            color = color_to_hex(effect.color)
        offset_value = effect.offset
        offset = Offset(x=offset_value.x, y=offset_value.y) if offset_value else Offset(0, 0)
        spread = effect.spread if effect.spread is not None else 0

    return EffectRecord(
        type=effect.type,
        radius=effect.radius,
        color=color,
        offset=offset,
        spread=spread,
        style_id=ref.style_id if ref else None,
        style_name=ref.style_name if ref else None,
    )


def normalize_effects(effects: tuple[Effect, ...], ref: StyleRef | None = None) -> list[EffectRecord]:
    """Normalize the visible effects of a list, in order."""
    return [normalize_effect(e, ref) for e in effects if e.visible is not False]


def extract_effects(node: SceneNode, resolver: StyleResolver) -> list[EffectRecord]:
    """Normalize a node's visible effects, attaching its effect style binding."""
    traits = node.effects
    if traits is None:
        return []

    if not any(e.visible is not False for e in traits.effects):
        return []
    ref = resolver.resolve(traits.effect_style_id, node.id)
    return normalize_effects(traits.effects, ref)
