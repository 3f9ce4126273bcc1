"""
Rules resolution for d20 checks:
- degree of success with declarative degree adjustments
- stacking of typed bonuses and penalties
"""

from src.adjudicator.core import (
    DamageModifierSet,
    apply_partitioned_stacking_rules,
    apply_stacking_rules,
    get_degree_of_success,
)
from src.adjudicator.models import (
    CheckDC,
    CheckDCModifiers,
    DegreeAdjustment,
    DegreeOfSuccess,
    DegreeOfSuccessResult,
    DieRoll,
    Modifier,
    ModifierKind,
    ModifierType,
)

__all__ = [
    'DamageModifierSet',
    'apply_partitioned_stacking_rules',
    'apply_stacking_rules',
    'get_degree_of_success',
    'CheckDC',
    'CheckDCModifiers',
    'DegreeAdjustment',
    'DegreeOfSuccess',
    'DegreeOfSuccessResult',
    'DieRoll',
    'Modifier',
    'ModifierKind',
    'ModifierType',
]
