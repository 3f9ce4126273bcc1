from src.adjudicator.core.degree_of_success import (
    ADJUSTMENTS,
    CRITICAL_MARGIN,
    SELECTOR_PRIORITY,
    adjust_degree_of_success,
    calculate_degree_of_success,
    get_degree_adjustment,
    get_degree_of_success,
    resolve_direction,
)
from src.adjudicator.core.stacking import (
    apply_stacking_rules,
    apply_partitioned_stacking_rules,
    partition_modifiers,
    total_modifier,
)
from src.adjudicator.core.damage import DamageModifierSet

__all__ = [
    'ADJUSTMENTS',
    'CRITICAL_MARGIN',
    'SELECTOR_PRIORITY',
    'adjust_degree_of_success',
    'calculate_degree_of_success',
    'get_degree_adjustment',
    'get_degree_of_success',
    'resolve_direction',
    'apply_stacking_rules',
    'apply_partitioned_stacking_rules',
    'partition_modifiers',
    'total_modifier',
    'DamageModifierSet',
]
