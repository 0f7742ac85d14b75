"""Filter criteria for the QR code listing.

Each criterion owns its current value and a default; it is *applied* when
the value differs from the default.  The combined predicate is the AND of
the applied criteria, so applying one more criterion never widens the
result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from qrcode_admin.models.listing import AppliedFilter
from qrcode_admin.models.qrcode import QRCode
from qrcode_admin.settings import Settings

Predicate = Callable[[QRCode], bool]


class FilterCriterion(ABC):
    """A single filter with a key, a label, a value and a default."""

    def __init__(self, key: str, label: str, default: Any) -> None:
        self.key = key
        self.label = label
        self.default = default
        self.value = default

    @property
    def is_applied(self) -> bool:
        return self.value != self.default

    def reset(self) -> None:
        self.value = self.default

    def coerce(self, value: Any) -> Any:
        """Normalise a value before it is stored (override per criterion)."""
        return value

    @abstractmethod
    def matches(self, code: QRCode, value: Any) -> bool:
        """Whether *code* passes this criterion at *value*."""

    @abstractmethod
    def summary(self) -> str:
        """Human-readable description of the current value."""


class RangeCriterion(FilterCriterion):
    """Numeric attribute lies within an inclusive ``(min, max)`` range."""

    def __init__(
        self,
        key: str,
        label: str,
        attribute: str,
        default: tuple[float, float],
        bounds: tuple[float, float],
        prefix: str = "",
    ) -> None:
        super().__init__(key, label, tuple(default))
        self.attribute = attribute
        self.bounds = bounds
        self.prefix = prefix

    def coerce(self, value: Any) -> tuple[float, float]:
        low, high = value
        lower, upper = self.bounds
        low = min(max(low, lower), upper)
        high = min(max(high, lower), upper)
        if low > high:
            raise ValueError(f"Invalid range for '{self.key}': {low} > {high}")
        return (low, high)

    def matches(self, code: QRCode, value: Any) -> bool:
        low, high = value
        return low <= getattr(code, self.attribute) <= high

    def summary(self) -> str:
        low, high = self.value
        return (
            f"{self.label} is between {self.prefix}{_fmt(low)} and {self.prefix}{_fmt(high)}"
        )


class TextCriterion(FilterCriterion):
    """Case-insensitive substring match against a string or list attribute."""

    def __init__(self, key: str, label: str, attribute: str) -> None:
        super().__init__(key, label, "")
        self.attribute = attribute

    def coerce(self, value: Any) -> str:
        return str(value or "")

    def matches(self, code: QRCode, value: Any) -> bool:
        needle = value.casefold()
        raw = getattr(code, self.attribute)
        haystack = [raw] if isinstance(raw, str) else list(raw or [])
        return any(needle in str(item).casefold() for item in haystack)

    def summary(self) -> str:
        return f"{self.label} {self.value}"


def _fmt(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)


class FilterSet:
    """Registered criteria in registration order."""

    def __init__(self, criteria: list[FilterCriterion] | None = None) -> None:
        self._criteria: dict[str, FilterCriterion] = {}
        for criterion in criteria or []:
            self.register(criterion)

    @classmethod
    def default(cls, settings: Settings | None = None) -> FilterSet:
        """The stock listing filters: money spent range and tag text."""
        if settings is None:
            settings = Settings()
        return cls(
            [
                RangeCriterion(
                    "moneySpent",
                    "Money spent",
                    attribute="money_spent",
                    default=(settings.money_spent_default_min, settings.money_spent_default_max),
                    bounds=(settings.money_spent_lower_bound, settings.money_spent_upper_bound),
                    prefix="$",
                ),
                TextCriterion("taggedWith", "Tagged with", attribute="tags"),
            ]
        )

    def register(self, criterion: FilterCriterion) -> None:
        if criterion.key in self._criteria:
            raise ValueError(f"Filter '{criterion.key}' is already registered")
        self._criteria[criterion.key] = criterion

    def get(self, key: str) -> FilterCriterion:
        try:
            return self._criteria[key]
        except KeyError:
            raise KeyError(f"No filter registered with key '{key}'") from None

    def keys(self) -> list[str]:
        return list(self._criteria)

    def value(self, key: str) -> Any:
        return self.get(key).value

    def set_value(self, key: str, value: Any) -> None:
        criterion = self.get(key)
        criterion.value = criterion.coerce(value)

    def reset(self, key: str) -> None:
        self.get(key).reset()

    def reset_all(self) -> None:
        for criterion in self._criteria.values():
            criterion.reset()

    def applied_summary(self) -> list[AppliedFilter]:
        """Applied criteria, in registration order, each with a remove action."""
        return [
            AppliedFilter(key=c.key, label=c.summary(), remove=c.reset)
            for c in self._criteria.values()
            if c.is_applied
        ]

    def predicate(self) -> Predicate:
        """AND of the applied criteria, bound to their values at call time."""
        active = [(c, c.value) for c in self._criteria.values() if c.is_applied]

        def _matches(code: QRCode) -> bool:
            return all(criterion.matches(code, value) for criterion, value in active)

        return _matches

