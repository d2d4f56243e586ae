"""Unit tests for StudentRecord filtering and grading."""

import pytest

from shophub.domain.model.student import PointsTier, StudentRecord, StudentTab


def _student(points: int | None, name="Budi Santoso", nim="2201001", kelas="TI-2A"):
    return StudentRecord(id="1", nim=nim, name=name, class_name=kelas, points=points)


class TestParsePoints:

    @pytest.mark.parametrize(
        "raw, expected",
        [("85", 85), (" 92 ", 92), ("77.5", 77), ("100pts", 100), (64, 64)],
    )
    def test_leading_integer(self, raw, expected):
        assert StudentRecord.parse_points(raw) == expected

    @pytest.mark.parametrize("raw", ["", "n/a", None, "-"])
    def test_non_numeric_is_none(self, raw):
        assert StudentRecord.parse_points(raw) is None


class TestSearch:

    def test_matches_name_nim_or_class(self):
        s = _student(80)
        assert s.matches("budi")
        assert s.matches("2201")
        assert s.matches("ti-2a")
        assert not s.matches("siti")


class TestTabs:

    def test_all_includes_everyone(self):
        assert _student(None).in_tab(StudentTab.ALL)

    def test_high_is_strictly_above_eighty(self):
        assert _student(81).in_tab(StudentTab.HIGH)
        assert not _student(80).in_tab(StudentTab.HIGH)

    def test_low_is_eighty_or_below(self):
        assert _student(80).in_tab(StudentTab.LOW)
        assert not _student(81).in_tab(StudentTab.LOW)

    def test_unparseable_points_in_neither_points_tab(self):
        s = _student(None)
        assert not s.in_tab(StudentTab.HIGH)
        assert not s.in_tab(StudentTab.LOW)


class TestTier:

    @pytest.mark.parametrize(
        "points, tier",
        [
            (95, PointsTier.EXCELLENT),
            (91, PointsTier.EXCELLENT),
            (90, PointsTier.GOOD),
            (81, PointsTier.GOOD),
            (80, PointsTier.FAIR),
            (71, PointsTier.FAIR),
            (70, PointsTier.POOR),
            (None, PointsTier.POOR),
        ],
    )
    def test_tier_boundaries(self, points, tier):
        assert _student(points).tier is tier
