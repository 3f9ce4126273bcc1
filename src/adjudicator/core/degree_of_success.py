import logging
from src.adjudicator.exceptions import UnknownDegreeAdjustmentError
from src.adjudicator.models import (
    CheckDC,
    CheckDCModifiers,
    DegreeAdjustment,
    DegreeDirection,
    DegreeOfSuccess,
    DegreeOfSuccessResult,
    DegreeSelector,
    DieRoll,
)

logger = logging.getLogger(__name__)

# ============================================================
# RULE TABLES
# ============================================================
# Totals this far above (or below) the DC are critical.
CRITICAL_MARGIN = 10

# Order in which a CheckDC's modifiers are considered. First match wins.
SELECTOR_PRIORITY = (
    DegreeSelector.ALL,
    DegreeSelector.CRITICAL_FAILURE,
    DegreeSelector.FAILURE,
    DegreeSelector.SUCCESS,
    DegreeSelector.CRITICAL_SUCCESS,
)

# Degree a selector matches on. `all` matches every degree.
SELECTOR_DEGREES: dict[DegreeSelector, DegreeOfSuccess | None] = {
    DegreeSelector.ALL: None,
    DegreeSelector.CRITICAL_FAILURE: DegreeOfSuccess.CRITICAL_FAILURE,
    DegreeSelector.FAILURE: DegreeOfSuccess.FAILURE,
    DegreeSelector.SUCCESS: DegreeOfSuccess.SUCCESS,
    DegreeSelector.CRITICAL_SUCCESS: DegreeOfSuccess.CRITICAL_SUCCESS,
}

ADJUSTMENTS: dict[DegreeDirection, DegreeAdjustment] = {
    DegreeDirection.TWO_DEGREES_BETTER: DegreeAdjustment.INCREASE_BY_TWO,
    DegreeDirection.ONE_DEGREE_BETTER: DegreeAdjustment.INCREASE,
    DegreeDirection.ONE_DEGREE_WORSE: DegreeAdjustment.LOWER,
    DegreeDirection.TWO_DEGREES_WORSE: DegreeAdjustment.LOWER_BY_TWO,
}

# ============================================================
# DEGREE OF SUCCESS
# ============================================================

def adjust_degree_of_success(adjustment: DegreeAdjustment, degree: DegreeOfSuccess) -> DegreeOfSuccess:
    """Shift a degree by the adjustment's step count, saturating at both ends."""
    shifted = int(degree) + int(adjustment)
    clamped = max(DegreeOfSuccess.CRITICAL_FAILURE, min(DegreeOfSuccess.CRITICAL_SUCCESS, shifted))
    return DegreeOfSuccess(clamped)


def calculate_degree_of_success(
    roll: DieRoll,
    dc: int,
    critical_margin: int = CRITICAL_MARGIN,
) -> DegreeOfSuccess:
    """
    Compare a roll against a DC, then apply the natural-roll rules:
    - a natural maximum improves the result by one degree
    - a natural 1 worsens it by one degree
    """
    total = roll.total
    if total >= dc + critical_margin:
        degree = DegreeOfSuccess.CRITICAL_SUCCESS
    elif total >= dc:
        degree = DegreeOfSuccess.SUCCESS
    elif total > dc - critical_margin:
        degree = DegreeOfSuccess.FAILURE
    else:
        degree = DegreeOfSuccess.CRITICAL_FAILURE

    if roll.is_natural_max:
        degree = adjust_degree_of_success(DegreeAdjustment.INCREASE, degree)
    elif roll.is_natural_min:
        degree = adjust_degree_of_success(DegreeAdjustment.LOWER, degree)

    return degree


def resolve_direction(direction: DegreeDirection | str) -> DegreeAdjustment:
    """Translate a rules-data direction string into a DegreeAdjustment."""
    try:
        return ADJUSTMENTS[DegreeDirection(direction)]
    except (ValueError, KeyError):
        raise UnknownDegreeAdjustmentError(f"Unknown degree adjustment: {direction!r}") from None


def get_degree_adjustment(
    degree: DegreeOfSuccess,
    modifiers: CheckDCModifiers,
) -> DegreeAdjustment | None:
    """
    Select the single adjustment that applies to an unadjusted degree.

    Selectors are tried in SELECTOR_PRIORITY order and the first match wins.
    A one-step increase on a critical success and a one-step lowering on a
    critical failure are skipped, so a later selector may still match.
    Two-step adjustments are never skipped.
    """
    for selector in SELECTOR_PRIORITY:
        direction = modifiers.get(selector)
        if direction is None:
            continue
        adjustment = resolve_direction(direction)

        if degree == DegreeOfSuccess.CRITICAL_SUCCESS and adjustment == DegreeAdjustment.INCREASE:
            continue
        if degree == DegreeOfSuccess.CRITICAL_FAILURE and adjustment == DegreeAdjustment.LOWER:
            continue

        condition = SELECTOR_DEGREES[selector]
        if condition is None or condition == degree:
            logger.debug("Selected %s from '%s' for %s", adjustment.name, selector.value, degree.name)
            return adjustment

    return None


def get_degree_of_success(
    roll: DieRoll,
    check_dc: CheckDC,
    critical_margin: int = CRITICAL_MARGIN,
) -> DegreeOfSuccessResult:
    """Resolve a roll against a check DC, including any degree adjustment."""
    unadjusted = calculate_degree_of_success(roll, check_dc.value, critical_margin)
    value = unadjusted

    degree_adjustment = get_degree_adjustment(unadjusted, check_dc.modifiers)
    if degree_adjustment is not None:
        value = adjust_degree_of_success(degree_adjustment, unadjusted)

    logger.debug(
        "Check %s: d%d=%d%+d vs DC %d -> %s (unadjusted %s)",
        check_dc.label or "<unlabelled>",
        roll.die_faces,
        roll.die_value,
        roll.modifier,
        check_dc.value,
        value.name,
        unadjusted.name,
    )
    return DegreeOfSuccessResult(
        unadjusted=unadjusted,
        value=value,
        degree_adjustment=degree_adjustment,
    )
