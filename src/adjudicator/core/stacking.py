import logging
from typing import Dict, Iterable, List, Tuple
from src.adjudicator.models import (
    Modifier,
    ModifierKind,
    ModifierType,
    ORDINARY_PARTITION,
    PERSISTENT_PARTITION,
)

logger = logging.getLogger(__name__)

StackingKey = Tuple[ModifierKind, ModifierType]

# ============================================================
# STACKING RULES
# ============================================================

def apply_stacking_rules(modifiers: List[Modifier]) -> None:
    """
    Decide which modifiers of a single stacking universe count toward the total.

    Only `enabled` is written:
    - ignored modifiers are always disabled and never win a group
    - untyped modifiers always stack
    - within each (kind, type) group only the best value is enabled: the highest
      bonus or the lowest penalty, the first one encountered on a tie
    """
    groups: Dict[StackingKey, List[Modifier]] = {}
    for modifier in modifiers:
        if modifier.ignored:
            modifier.enabled = False
        elif modifier.kind is ModifierKind.UNTYPED:
            modifier.enabled = True
        else:
            groups.setdefault((modifier.kind, modifier.type), []).append(modifier)

    for (kind, type_), members in groups.items():
        if kind is ModifierKind.PENALTY:
            best = min(members, key=lambda m: m.value)
        else:
            best = max(members, key=lambda m: m.value)
        for modifier in members:
            modifier.enabled = modifier is best
        if len(members) > 1:
            logger.debug(
                "Stacking %s %s: '%s' (%+d) wins over %d other(s)",
                type_.value, kind.value, best.label, best.value, len(members) - 1,
            )


def partition_modifiers(modifiers: Iterable[Modifier]) -> Dict[str, List[Modifier]]:
    """Split modifiers into independent stacking universes, preserving order."""
    partitions: Dict[str, List[Modifier]] = {ORDINARY_PARTITION: [], PERSISTENT_PARTITION: []}
    for modifier in modifiers:
        partitions[modifier.partition].append(modifier)
    return partitions


def apply_partitioned_stacking_rules(modifiers: Iterable[Modifier]) -> None:
    """Apply stacking rules separately to persistent and ordinary modifiers."""
    for partition in partition_modifiers(modifiers).values():
        apply_stacking_rules(partition)


def total_modifier(modifiers: Iterable[Modifier]) -> int:
    """Sum of the enabled modifiers."""
    return sum(m.value for m in modifiers if m.enabled)
