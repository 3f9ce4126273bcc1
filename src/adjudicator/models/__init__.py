from .degrees import (
    DegreeOfSuccess,
    DegreeAdjustment,
    DegreeDirection,
    DegreeSelector,
    DEGREE_OF_SUCCESS_STRINGS,
    DieRoll,
    CheckDCModifiers,
    DegreeOfSuccessAdjustment,
    CheckDC,
    DegreeOfSuccessResult,
)

from .modifiers import (
    ModifierKind,
    ModifierType,
    DamageCategory,
    Modifier,
    PERSISTENT_PARTITION,
    ORDINARY_PARTITION,
)

__all__ = [
    # Degrees
    "DegreeOfSuccess",
    "DegreeAdjustment",
    "DegreeDirection",
    "DegreeSelector",
    "DEGREE_OF_SUCCESS_STRINGS",
    "DieRoll",
    "CheckDCModifiers",
    "DegreeOfSuccessAdjustment",
    "CheckDC",
    "DegreeOfSuccessResult",

    # Modifiers
    "ModifierKind",
    "ModifierType",
    "DamageCategory",
    "Modifier",
    "PERSISTENT_PARTITION",
    "ORDINARY_PARTITION",
]
