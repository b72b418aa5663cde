# src/deadline_tracker/metrics/day_names.py

from __future__ import annotations

from datetime import date

from babel.dates import format_date

DEFAULT_LOCALE = "pt_BR"


class BabelDayNameFormatter:
    """
    Abbreviated weekday names from CLDR data ("seg.", "ter.", ... for pt_BR).

    Same data browsers use for toLocaleDateString(..., {weekday: "short"}).
    """

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self.locale = locale

    def __call__(self, day: date) -> str:
        return format_date(day, format="EEE", locale=self.locale)

    def __repr__(self) -> str:
        return f"BabelDayNameFormatter(locale={self.locale!r})"
