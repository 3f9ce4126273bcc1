"""Terminal entry point for checking degree-of-success rulings by hand."""

from pydantic import ValidationError

from src.adjudicator.config.settings import settings
from src.adjudicator.utils.logging import setup_logging
from src.adjudicator.core import get_degree_of_success
from src.adjudicator.exceptions import AdjudicatorError
from src.adjudicator.models import CheckDC, CheckDCModifiers, DegreeOfSuccessResult, DieRoll

USAGE = "Enter: <die> <modifier> <dc> [selector=direction ...]   e.g. 20 5 25 failure=one-degree-better"


# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────
def parse_check(line: str) -> tuple[DieRoll, CheckDC]:
    """Parse one input line into a DieRoll and a CheckDC.

    Raises:
        ValueError: If the line is malformed. Pydantic ValidationError is a ValueError.
    """
    parts = line.split()
    if len(parts) < 3:
        raise ValueError(USAGE)

    die_value, modifier, dc = (int(p) for p in parts[:3])
    modifiers: dict[str, str] = {}
    for token in parts[3:]:
        selector, sep, direction = token.partition("=")
        if not sep:
            raise ValueError(f"Expected selector=direction, got {token!r}")
        modifiers[selector] = direction

    roll = DieRoll(die_value=die_value, modifier=modifier, die_faces=settings.die_faces)
    check_dc = CheckDC(value=dc, modifiers=CheckDCModifiers.model_validate(modifiers))
    return roll, check_dc


def format_result(result: DegreeOfSuccessResult) -> str:
    adjustment = result.degree_adjustment.name if result.degree_adjustment is not None else "none"
    return f"{result.slug} (unadjusted: {result.unadjusted.slug}, adjustment: {adjustment})"


# ─────────────────────────────────────────────────────────────────────────────
# Loop
# ─────────────────────────────────────────────────────────────────────────────
def get_input() -> str | None:
    """Read a line, handling EOF and interrupts."""
    try:
        text = input("\n> ").strip()
        return text if text else None
    except (EOFError, KeyboardInterrupt):
        return "quit"


def check_loop() -> None:
    print(USAGE)
    while True:
        line = get_input()

        if line is None:
            continue
        if line.lower() in ("quit", "exit", "q"):
            break

        try:
            roll, check_dc = parse_check(line)
            result = get_degree_of_success(roll, check_dc, settings.critical_margin)
        except (ValueError, ValidationError, AdjudicatorError) as e:
            print(f"[ERROR] {e}")
            continue
        print(format_result(result))


def main() -> None:
    """Main entry point."""
    logger = setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        enable_color=settings.enable_color,
    )
    logger.debug("Configuration: %s", settings)
    check_loop()


if __name__ == "__main__":
    main()
