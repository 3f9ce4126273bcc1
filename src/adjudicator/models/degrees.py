from typing import List, Literal
from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, Field, model_validator

# ============================================================
# DEGREES OF SUCCESS
# ============================================================
class DegreeOfSuccess(IntEnum):
    """Outcome tiers of a check, ordered worst to best"""
    CRITICAL_FAILURE = 0
    FAILURE = 1
    SUCCESS = 2
    CRITICAL_SUCCESS = 3

    @property
    def slug(self) -> str:
        return DEGREE_OF_SUCCESS_STRINGS[self.value]

    @classmethod
    def from_string(cls, slug: str) -> "DegreeOfSuccess":
        try:
            return cls(DEGREE_OF_SUCCESS_STRINGS.index(slug))
        except ValueError:
            raise ValueError(f"Unknown degree of success: {slug!r}") from None
class DegreeAdjustment(IntEnum):
    """Signed number of steps to shift a degree of success"""
    LOWER_BY_TWO = -2
    LOWER = -1
    INCREASE = 1
    INCREASE_BY_TWO = 2
class DegreeDirection(str, Enum):
    """Adjustment directions as they appear in rules data"""
    TWO_DEGREES_BETTER = "two-degrees-better"
    ONE_DEGREE_BETTER = "one-degree-better"
    ONE_DEGREE_WORSE = "one-degree-worse"
    TWO_DEGREES_WORSE = "two-degrees-worse"
class DegreeSelector(str, Enum):
    """Keys of a CheckDC modifiers map"""
    ALL = "all"
    CRITICAL_FAILURE = "criticalFailure"
    FAILURE = "failure"
    SUCCESS = "success"
    CRITICAL_SUCCESS = "criticalSuccess"

DEGREE_OF_SUCCESS_STRINGS = ("criticalFailure", "failure", "success", "criticalSuccess")

# ============================================================
# CHECK INPUTS
# ============================================================
class DieRoll(BaseModel):
    """An already-rolled die plus the static modifier added to it"""
    model_config = ConfigDict(frozen=True)

    die_value: int                          # Natural result shown on the die
    modifier: int = 0                       # Sum of all static modifiers
    die_faces: int = Field(default=20, ge=2)

    @model_validator(mode="after")
    def _die_value_in_range(self) -> "DieRoll":
        if not 1 <= self.die_value <= self.die_faces:
            raise ValueError(
                f"Die value {self.die_value} is outside the range of a d{self.die_faces}"
            )
        return self

    @property
    def total(self) -> int:
        return self.die_value + self.modifier

    @property
    def is_natural_max(self) -> bool:
        return self.die_value == self.die_faces

    @property
    def is_natural_min(self) -> bool:
        return self.die_value == 1
class CheckDCModifiers(BaseModel):
    """
    Per-degree adjustments for a single check.
    Accepts either the snake_case field names or the camelCase keys used in rules data.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    all: DegreeDirection | None = None
    critical_failure: DegreeDirection | None = Field(default=None, alias="criticalFailure")
    failure: DegreeDirection | None = None
    success: DegreeDirection | None = None
    critical_success: DegreeDirection | None = Field(default=None, alias="criticalSuccess")

    def get(self, selector: DegreeSelector) -> DegreeDirection | None:
        """Look up the direction registered under a selector key"""
        return getattr(self, SELECTOR_FIELDS[selector])
class DegreeOfSuccessAdjustment(BaseModel):
    """
    A conditional set of modifiers. Predicates are evaluated upstream, which
    flattens the matching entries into CheckDC.modifiers before resolution.
    """
    modifiers: CheckDCModifiers
    predicate: List[str] | None = None
class CheckDC(BaseModel):
    """The difficulty a check is rolled against"""
    value: int
    label: str | None = None
    modifiers: CheckDCModifiers = Field(default_factory=CheckDCModifiers)
    scope: Literal["AttackOutcome", "CheckOutcome"] | None = None
    adjustments: List[DegreeOfSuccessAdjustment] = []
    visibility: Literal["none", "gm", "owner", "all"] | None = None

# ============================================================
# CHECK RESULT
# ============================================================
class DegreeOfSuccessResult(BaseModel):
    """Outcome of resolving a DieRoll against a CheckDC"""
    model_config = ConfigDict(frozen=True)

    unadjusted: DegreeOfSuccess
    value: DegreeOfSuccess                  # Final degree after any adjustment
    degree_adjustment: DegreeAdjustment | None = None

    @property
    def slug(self) -> str:
        return self.value.slug

SELECTOR_FIELDS = {
    DegreeSelector.ALL: "all",
    DegreeSelector.CRITICAL_FAILURE: "critical_failure",
    DegreeSelector.FAILURE: "failure",
    DegreeSelector.SUCCESS: "success",
    DegreeSelector.CRITICAL_SUCCESS: "critical_success",
}
