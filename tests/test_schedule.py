"""
Tests for schedule recomputation.

Covers:
- Dwell estimates by category keyword
- The reference three-stop scenario
- Idempotence, contiguity and anchor preservation
- Missing anchor handling
"""

import pytest

from timeline_engine.tools.schedule import (
    estimate_dwell_minutes,
    find_anchor_minutes,
    recompute_times,
)

from helpers import make_stop, names, window_minutes

GAP = 15


class TestDwellEstimate:
    @pytest.mark.parametrize(
        "category, minutes",
        [
            ("카페", 30),
            ("디저트 카페", 30),
            ("Coffee", 30),
            ("음식점", 60),
            ("맛집", 60),
            ("Restaurant", 60),
            ("쇼핑", 45),
            ("관광명소", 60),
            ("Attraction", 60),
            ("공원", 45),
            ("산책로", 45),
            ("전시", 90),
            ("박물관", 90),
            ("Museum", 90),
            ("숙박", 60),
            ("레포츠", 45),
            ("", 45),
            (None, 45),
        ],
    )
    def test_table(self, category, minutes):
        assert estimate_dwell_minutes(category) == minutes

    def test_first_matching_row_wins(self):
        """A cafe inside a museum counts as a cafe."""
        assert estimate_dwell_minutes("박물관 카페") == 30

    def test_explicit_default(self):
        assert estimate_dwell_minutes("레포츠", default_duration=120) == 120


class TestReferenceScenario:
    def test_three_stops(self, scenario_stops):
        result = recompute_times(scenario_stops)

        assert [stop.time for stop in result] == [
            "09:00 - 09:30",
            "09:45 - 10:45",
            "11:00 - 11:45",
        ]

    def test_replacing_restaurant_with_cafe_shifts_later_stops(self, scenario_stops):
        before = recompute_times(scenario_stops)
        swapped = list(before)
        swapped[1] = swapped[1].model_copy(update={"name": "B2", "category": "cafe"})

        after = recompute_times(swapped)

        assert after[0].time == before[0].time
        assert after[1].time == "09:45 - 10:15"
        for old, new in zip(before[2:], after[2:]):
            old_start, old_end = window_minutes(old)
            new_start, new_end = window_minutes(new)
            assert old_start - new_start == 30
            assert old_end - new_end == 30


class TestProperties:
    @pytest.fixture
    def day(self):
        return [
            make_stop("서울숲", "공원", "09:10 - 10:00 [🟢 여유]"),
            make_stop("대림창고", "카페", "10:20 - 11:00"),
            make_stop("소문난성수감자탕", "음식점", "11:30 - 12:30 [🔴 혼잡]"),
            make_stop("디뮤지엄", "전시", ""),
            make_stop("숲길", "산책", "16:00 - 17:00"),
        ]

    def test_idempotent(self, day):
        once = recompute_times(day)
        twice = recompute_times(once)

        assert [stop.time for stop in twice] == [stop.time for stop in once]

    def test_contiguous_windows(self, day):
        result = recompute_times(day)

        for previous, current in zip(result, result[1:]):
            prev_start, prev_end = window_minutes(previous)
            start, end = window_minutes(current)
            assert start == prev_end + GAP
            assert end == start + estimate_dwell_minutes(current.category)

    def test_anchor_preserved(self, day):
        result = recompute_times(day)

        assert window_minutes(result[0])[0] == window_minutes(day[0])[0]

    def test_congestion_tags_dropped(self, day):
        result = recompute_times(day)

        assert all("[" not in stop.time for stop in result)

    def test_other_fields_untouched(self, day):
        day[1] = make_stop("대림창고", "카페", "10:20 - 11:00", transit=["도보 : 12분"])

        result = recompute_times(day)

        assert names(result) == names(day)
        assert result[1].transit_to_here == ["도보 : 12분"]

    def test_input_not_mutated(self, day):
        original_times = [stop.time for stop in day]

        recompute_times(day)

        assert [stop.time for stop in day] == original_times

    def test_wraps_past_midnight(self):
        stops = [make_stop("포장마차", "음식점", "23:30 - 00:10"), make_stop("한강", "공원")]

        result = recompute_times(stops)

        assert result[0].time == "23:30 - 00:30"
        assert result[1].time == "00:45 - 01:30"

    def test_custom_gap(self, scenario_stops):
        result = recompute_times(scenario_stops, gap_minutes=0)

        assert result[1].time == "09:30 - 10:30"


class TestMissingAnchor:
    def test_empty_list(self):
        assert recompute_times([]) == []
        assert find_anchor_minutes([]) is None

    def test_first_stop_without_time_is_left_alone(self):
        stops = [make_stop("A", "cafe"), make_stop("B", "park", "10:00 - 10:45")]

        result = recompute_times(stops)

        assert find_anchor_minutes(stops) is None
        assert [stop.time for stop in result] == ["", "10:00 - 10:45"]

    def test_anchor_from_tagged_window(self):
        stops = [make_stop("A", "cafe", "07:40 - 08:10 [🟡 보통]")]

        assert find_anchor_minutes(stops) == 7 * 60 + 40
