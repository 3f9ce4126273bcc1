"""Candidate damage modifiers for a single damage roll, with manual toggles."""

import logging
from typing import Dict, List
from pydantic import ValidationError
from src.adjudicator.core.stacking import apply_partitioned_stacking_rules, partition_modifiers, total_modifier
from src.adjudicator.exceptions import ModifierValidationError
from src.adjudicator.models import DamageCategory, DegreeOfSuccess, Modifier, ModifierKind, ModifierType

logger = logging.getLogger(__name__)

# Accepted by add_modifier alongside the ModifierType values
UNTYPED = ModifierKind.UNTYPED.value


class DamageModifierSet:
    """
    The modifiers assembled for one damage roll, after the check that
    triggered it has been resolved.

    The user may ignore or restore modifiers and add ad-hoc ones before the
    roll; stacking is re-applied after every change. Modifiers that do not
    apply to the outcome are disabled and never compete in stacking.
    """

    def __init__(self, modifiers: List[Modifier], outcome: DegreeOfSuccess | None = None):
        self.modifiers = modifiers
        self.outcome = outcome
        # Keyed by id(); valid only while self.modifiers keeps the objects alive.
        # Pydantic models are unhashable.
        self._originally_enabled = {id(m) for m in modifiers if m.enabled}

    @property
    def is_critical(self) -> bool:
        return self.outcome == DegreeOfSuccess.CRITICAL_SUCCESS

    def apply_stacking_rules(self) -> None:
        applicable = []
        for modifier in self.modifiers:
            if self.applies(modifier):
                applicable.append(modifier)
            else:
                modifier.enabled = False
        apply_partitioned_stacking_rules(applicable)

    def set_ignored(self, index: int, ignored: bool) -> Modifier:
        """Toggle the manual override on a modifier and re-stack."""
        if not 0 <= index < len(self.modifiers):
            raise IndexError(f"No modifier at index {index}")
        modifier = self.modifiers[index]
        modifier.ignored = ignored
        logger.debug("Modifier '%s' %s by user", modifier.label, "ignored" if ignored else "restored")
        self.apply_stacking_rules()
        return modifier

    def add_modifier(
        self,
        label: str,
        value: int,
        modifier_type: ModifierType | str = UNTYPED,
        damage_type: str | None = None,
        damage_category: DamageCategory | str | None = None,
    ) -> Modifier:
        """
        Add an ad-hoc modifier and re-stack.

        `modifier_type` is a ModifierType value or "untyped"; untyped modifiers always stack.

        Raises:
            ModifierValidationError: If value is zero or type/category are unknown.
        """
        errors = []
        if value == 0:
            errors.append("Modifier value must not be zero.")

        kind = None
        if modifier_type == UNTYPED:
            kind = ModifierKind.UNTYPED
            resolved_type = ModifierType.NONE
        else:
            try:
                resolved_type = ModifierType(modifier_type)
            except ValueError:
                errors.append(f"Unknown modifier type: {modifier_type!r}.")
        if errors:
            raise ModifierValidationError(" ".join(errors))

        label = label.strip() or _default_label(resolved_type, value)
        try:
            modifier = Modifier(
                label=label,
                value=value,
                kind=kind,
                type=resolved_type,
                damage_type=damage_type or None,
                damage_category=damage_category or None,
            )
        except ValidationError as e:
            raise ModifierValidationError(f"Invalid modifier '{label}': {e}") from e

        self.modifiers.append(modifier)
        self.apply_stacking_rules()
        return modifier

    def applies(self, modifier: Modifier) -> bool:
        """Whether a modifier belongs to this roll at all, given its critical flag."""
        if modifier.critical is True:
            return self.is_critical
        if modifier.critical is False:
            return not self.is_critical
        return True

    def visible_modifiers(self) -> List[Modifier]:
        """Modifiers to present for this roll."""
        visible = []
        for modifier in self.modifiers:
            if not self.applies(modifier):
                continue
            hidden = (
                modifier.hide_if_disabled
                and not modifier.enabled
                and id(modifier) not in self._originally_enabled
            )
            if not hidden:
                visible.append(modifier)
        return visible

    def totals(self) -> Dict[str, int]:
        """Enabled modifier totals per stacking partition."""
        applicable = [m for m in self.modifiers if self.applies(m)]
        return {name: total_modifier(members) for name, members in partition_modifiers(applicable).items()}


def _default_label(modifier_type: ModifierType, value: int) -> str:
    kind = "Penalty" if value < 0 else "Bonus"
    if modifier_type is ModifierType.NONE:
        return kind
    return f"{modifier_type.value.title()} {kind}"
