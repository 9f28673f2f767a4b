from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from config.wage_constants import (
    DEFAULT_SELECTION,
    LEGAL_FACTORS,
    PAY_FREQUENCIES,
    STATES,
    TIME_BUCKETS,
    TIME_NOTES,
    URGENCY,
    WAGE_CATEGORIES,
    WAGE_TYPES,
)

# field name -> allowed values
ALLOWED_VALUES: Dict[str, List[str]] = {
    "state": list(STATES),
    "wage_type": list(WAGE_TYPES),
    "pay_frequency": list(PAY_FREQUENCIES),
    "time_since_owed": list(TIME_BUCKETS),
}


class InvalidSelectionError(ValueError):
    """Raised when a selection value is outside its enumerated set."""

    def __init__(self, field_name: str, value):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{value!r} is not a valid {field_name}")


@dataclass(frozen=True)
class WageSelection:
    state: str = DEFAULT_SELECTION["state"]
    wage_type: str = DEFAULT_SELECTION["wage_type"]
    pay_frequency: str = DEFAULT_SELECTION["pay_frequency"]
    time_since_owed: str = DEFAULT_SELECTION["time_since_owed"]


@dataclass(frozen=True)
class Urgency:
    label: str
    color: str
    bg: str


@dataclass
class WageSummary:
    selection: WageSelection
    urgency: Urgency
    time_note: str
    legal_factors: List[str] = field(default_factory=list)
    wage_categories: List[str] = field(default_factory=list)

    @property
    def labels(self) -> Dict[str, str]:
        """Display labels for the current selection."""
        return {
            "state": self.selection.state,
            "wage_type": WAGE_TYPES[self.selection.wage_type],
            "pay_frequency": PAY_FREQUENCIES[self.selection.pay_frequency],
            "time_since_owed": TIME_BUCKETS[self.selection.time_since_owed],
        }


def validate_selection(state: str, wage_type: str, pay_frequency: str,
                       time_since_owed: str) -> WageSelection:
    """Check each value against its enumeration and return the selection."""
    values = {
        "state": state,
        "wage_type": wage_type,
        "pay_frequency": pay_frequency,
        "time_since_owed": time_since_owed,
    }
    for name, value in values.items():
        if value not in ALLOWED_VALUES[name]:
            raise InvalidSelectionError(name, value)
    return WageSelection(**values)


def resolve_defaults(overrides: Optional[Mapping[str, str]] = None, logger=None) -> WageSelection:
    """Build the initial selection from configured defaults.

    Unknown keys are ignored; values outside their enumeration fall back to
    the built-in default for that field.
    """
    values = dict(DEFAULT_SELECTION)
    if overrides is None:
        return WageSelection(**values)
    if not isinstance(overrides, Mapping):
        if logger is not None:
            logger.warning("Configured defaults must be a mapping, got %r", overrides)
        return WageSelection(**values)
    for name, value in overrides.items():
        if name not in ALLOWED_VALUES:
            continue
        if value in ALLOWED_VALUES[name]:
            values[name] = value
        elif logger is not None:
            logger.warning("Ignoring configured default %s=%r", name, value)
    return WageSelection(**values)


def build_summary(selection: WageSelection) -> WageSummary:
    """Project a selection through the four lookup tables."""
    validate_selection(
        selection.state,
        selection.wage_type,
        selection.pay_frequency,
        selection.time_since_owed,
    )
    return WageSummary(
        selection=selection,
        urgency=Urgency(**URGENCY[selection.time_since_owed]),
        time_note=TIME_NOTES[selection.time_since_owed],
        legal_factors=list(LEGAL_FACTORS[selection.wage_type]),
        wage_categories=list(WAGE_CATEGORIES[selection.wage_type]),
    )


__all__ = [
    "ALLOWED_VALUES",
    "InvalidSelectionError",
    "WageSelection",
    "Urgency",
    "WageSummary",
    "validate_selection",
    "resolve_defaults",
    "build_summary",
]
