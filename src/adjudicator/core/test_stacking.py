"""Tests for bonus and penalty stacking."""

from src.adjudicator.core.stacking import (
    apply_partitioned_stacking_rules,
    apply_stacking_rules,
    partition_modifiers,
    total_modifier,
)
from src.adjudicator.models import DamageCategory, Modifier, ModifierKind, ModifierType


def circumstance(label, value, **kwargs):
    return Modifier(label=label, value=value, type=ModifierType.CIRCUMSTANCE, **kwargs)


def enabled_flags(modifiers):
    return [m.enabled for m in modifiers]


def test_highest_same_type_bonus_wins():
    modifiers = [circumstance("Aid", 2), circumstance("Flanking", 4)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, True]


def test_ignored_modifier_never_wins():
    modifiers = [circumstance("Cover", 3, ignored=True), circumstance("Aid", 2)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, True]
    assert modifiers[0].ignored is True


def test_untyped_and_typed_bonuses_both_count():
    modifiers = [
        Modifier(label="Luck", value=1, kind=ModifierKind.UNTYPED),
        circumstance("Flanking", 5),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, True]


def test_untyped_modifiers_always_stack():
    modifiers = [
        Modifier(label="A", value=1, kind=ModifierKind.UNTYPED, enabled=False),
        Modifier(label="B", value=3, kind=ModifierKind.UNTYPED),
        Modifier(label="C", value=-2, kind=ModifierKind.UNTYPED),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, True, True]
    assert total_modifier(modifiers) == 2


def test_ignored_untyped_modifier_is_disabled():
    modifiers = [Modifier(label="A", value=1, kind=ModifierKind.UNTYPED, ignored=True)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False]


def test_worst_same_type_penalty_wins():
    modifiers = [
        Modifier(label="Frightened", value=-1, type=ModifierType.STATUS),
        Modifier(label="Sickened", value=-3, type=ModifierType.STATUS),
        Modifier(label="Clumsy", value=-2, type=ModifierType.STATUS),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, True, False]


def test_bonus_and_penalty_of_same_type_do_not_compete():
    modifiers = [
        Modifier(label="Heroism", value=2, type=ModifierType.STATUS),
        Modifier(label="Frightened", value=-1, type=ModifierType.STATUS),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, True]
    assert total_modifier(modifiers) == 1


def test_groups_never_compare_across_types():
    modifiers = [
        circumstance("Aid", 1),
        Modifier(label="Weapon", value=3, type=ModifierType.ITEM),
        Modifier(label="Bless", value=1, type=ModifierType.STATUS),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, True, True]


def test_generic_bonuses_do_not_stack_with_each_other():
    modifiers = [Modifier(label="A", value=1), Modifier(label="B", value=2)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, True]


def test_tie_goes_to_first_modifier():
    modifiers = [circumstance("First", 2), circumstance("Second", 2)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, False]


def test_group_of_only_ignored_modifiers_is_fully_disabled():
    modifiers = [circumstance("A", 2, ignored=True), circumstance("B", 1, ignored=True)]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, False]


def test_restored_modifier_competes_again():
    modifiers = [circumstance("Cover", 3, ignored=True), circumstance("Aid", 2)]
    apply_stacking_rules(modifiers)
    modifiers[0].ignored = False
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, False]


def test_stacking_is_idempotent():
    modifiers = [
        circumstance("Aid", 2),
        circumstance("Cover", 4, ignored=True),
        circumstance("Flanking", 2),
        Modifier(label="Frightened", value=-2, type=ModifierType.STATUS),
        Modifier(label="Sickened", value=-2, type=ModifierType.STATUS),
        Modifier(label="Luck", value=1, kind=ModifierKind.UNTYPED),
    ]
    apply_stacking_rules(modifiers)
    first = enabled_flags(modifiers)
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == first
    assert first == [True, False, False, True, False, True]


def test_exactly_one_enabled_per_group():
    modifiers = [circumstance(str(v), v) for v in (1, 5, 3, 5, 2)]
    apply_stacking_rules(modifiers)
    assert sum(enabled_flags(modifiers)) == 1


def test_partitions_keep_order():
    persistent = Modifier(label="Fire", value=2, damage_category=DamageCategory.PERSISTENT)
    ordinary = Modifier(label="Strength", value=4, type=ModifierType.ABILITY)
    splash = Modifier(label="Splash", value=1, damage_category=DamageCategory.SPLASH)
    partitions = partition_modifiers([persistent, ordinary, splash])
    assert partitions["persistent"] == [persistent]
    assert partitions["ordinary"] == [ordinary, splash]


def test_persistent_modifiers_stack_separately():
    modifiers = [
        Modifier(label="Weapon", value=1, type=ModifierType.ITEM),
        Modifier(label="Persistent", value=2, type=ModifierType.ITEM, damage_category=DamageCategory.PERSISTENT),
    ]
    apply_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [False, True]

    apply_partitioned_stacking_rules(modifiers)
    assert enabled_flags(modifiers) == [True, True]
