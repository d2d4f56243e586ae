"""Student records served by the campus dashboard.

The upstream feed sends every field as a string, including points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HIGH_POINTS_THRESHOLD = 80


class StudentTab(Enum):
    ALL = "all"
    HIGH = "high"
    LOW = "low"


class PointsTier(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


@dataclass(frozen=True)
class StudentRecord:
    id: str
    nim: str
    name: str
    class_name: str
    points: int | None  # None when the feed sent something non-numeric

    @staticmethod
    def parse_points(raw: object) -> int | None:
        """Read a leading integer the way the dashboard always has.

        ``"85"`` and ``" 85 pts"`` give 85, ``"n/a"`` gives None.
        """
        text = str(raw).strip()
        digits = ""
        for i, ch in enumerate(text):
            if ch.isdigit() or (i == 0 and ch in "+-"):
                digits += ch
            else:
                break
        try:
            return int(digits)
        except ValueError:
            return None

    def matches(self, term: str) -> bool:
        """Case-insensitive search over name, NIM and class."""
        needle = term.lower()
        return (
            needle in self.name.lower()
            or needle in self.nim.lower()
            or needle in self.class_name.lower()
        )

    def in_tab(self, tab: StudentTab) -> bool:
        if tab is StudentTab.ALL:
            return True
        if self.points is None:
            return False
        if tab is StudentTab.HIGH:
            return self.points > HIGH_POINTS_THRESHOLD
        return self.points <= HIGH_POINTS_THRESHOLD

    @property
    def tier(self) -> PointsTier:
        points = self.points if self.points is not None else 0
        if points > 90:
            return PointsTier.EXCELLENT
        if points > 80:
            return PointsTier.GOOD
        if points > 70:
            return PointsTier.FAIR
        return PointsTier.POOR
