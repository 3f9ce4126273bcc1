from enum import Enum
from pydantic import BaseModel, model_validator

# ============================================================
# MODIFIER ENUMS
# ============================================================
class ModifierKind(str, Enum):
    BONUS = "bonus"
    PENALTY = "penalty"
    UNTYPED = "untyped"         # Always stacks
class ModifierType(str, Enum):
    """Sub-type of a bonus or penalty. Same-type modifiers do not stack."""
    ABILITY = "ability"
    CIRCUMSTANCE = "circumstance"
    ITEM = "item"
    POTENCY = "potency"
    PROFICIENCY = "proficiency"
    STATUS = "status"
    NONE = "none"
class DamageCategory(str, Enum):
    PERSISTENT = "persistent"
    PRECISION = "precision"
    SPLASH = "splash"

PERSISTENT_PARTITION = "persistent"
ORDINARY_PARTITION = "ordinary"

# ============================================================
# MODIFIER
# ============================================================
class Modifier(BaseModel):
    """
    A numeric bonus or penalty that may count toward a total.
    `enabled` is owned by the stacking resolver; `ignored` is the user's manual override.
    """
    label: str
    value: int
    kind: ModifierKind | None = None        # Derived from the sign of value when omitted
    type: ModifierType = ModifierType.NONE
    slug: str | None = None

    enabled: bool = True
    ignored: bool = False
    critical: bool | None = None            # True: only on a critical hit, False: never on one
    hide_if_disabled: bool = False

    damage_type: str | None = None
    damage_category: DamageCategory | None = None

    @model_validator(mode="after")
    def _check_kind(self) -> "Modifier":
        if self.kind is None:
            self.kind = ModifierKind.PENALTY if self.value < 0 else ModifierKind.BONUS
        if self.kind is ModifierKind.UNTYPED and self.type is not ModifierType.NONE:
            raise ValueError(f"Untyped modifier '{self.label}' cannot have type '{self.type.value}'")
        if self.kind is ModifierKind.BONUS and self.value < 0:
            raise ValueError(f"Bonus '{self.label}' has a negative value ({self.value})")
        if self.kind is ModifierKind.PENALTY and self.value > 0:
            raise ValueError(f"Penalty '{self.label}' has a positive value ({self.value})")
        return self

    @property
    def partition(self) -> str:
        """Stacking universe this modifier competes in"""
        if self.damage_category is DamageCategory.PERSISTENT:
            return PERSISTENT_PARTITION
        return ORDINARY_PARTITION
