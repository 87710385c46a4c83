"""Localization provider for display strings derived from data points."""

from collections.abc import Mapping
from typing import Protocol

CREDIT_SCORE_KEYS: tuple[str, ...] = (
    "credit-score.excellent",
    "credit-score.good",
    "credit-score.fair",
    "credit-score.poor",
)

DEFAULT_STRINGS: dict[str, str] = {
    "credit-score.excellent": "Excellent (760+)",
    "credit-score.good": "Good (700-759)",
    "credit-score.fair": "Fair (640-699)",
    "credit-score.poor": "Poor (<639)",
}


class LocalizationProvider(Protocol):
    """Resolves fixed string identifiers to display strings."""

    def localized(self, key: str) -> str: ...


class DictLocalizationProvider:
    """Lookup table provider; unknown keys resolve to themselves."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings = dict(DEFAULT_STRINGS)
        if strings:
            self._strings.update(strings)

    def localized(self, key: str) -> str:
        return self._strings.get(key, key)


default_localizer = DictLocalizationProvider()
