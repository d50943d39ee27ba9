"""
Pytest fixtures for timeline engine tests.
"""

from typing import List

import pytest

from timeline_engine.schemas import Plan, Stop

from helpers import make_stop


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def plan_dict() -> dict:
    """Two-day plan in the backend JSON shape."""
    return {
        "plan_id": "plan_3f9a1c",
        "summary": {
            "region": "성수동",
            "start_date": "2025-05-03",
            "end_date": "2025-05-04",
            "transport": "대중교통",
            "transport_mode": "walkAndPublic",
        },
        "variants": {
            "day1": {
                "route": [
                    {"name": "서울숲", "category": "공원", "lat": 37.5444, "lng": 127.0374},
                    {"name": "대림창고", "category": "카페", "category2": "카페", "lat": 37.5418, "lng": 127.0566},
                    {"name": "성수 수제화거리", "category": "쇼핑", "lat": 37.5447, "lng": 127.0552},
                    {"name": "디뮤지엄", "category": "전시", "lat": 37.5441, "lng": 127.0405},
                ],
                "restaurants": [
                    {"name": "소문난성수감자탕", "category": "음식점", "lat": 37.5424, "lng": 127.0559},
                ],
                "accommodations": [],
                "timelines": {
                    "fastest_version": [
                        {
                            "name": "서울숲",
                            "category": "공원",
                            "time": "09:00 - 09:45 [🟢 여유]",
                            "transit_to_here": [],
                            "population_level": "🟢 여유",
                            "traffic_level": "-",
                        },
                        {
                            "name": "대림창고",
                            "category": "카페",
                            "time": "10:05 - 10:35",
                            "transit_to_here": ["도보 : 12분", "[버스][2016, 2224] : 서울숲역 → 성수역 : 6분"],
                        },
                        {
                            "name": "소문난성수감자탕",
                            "category": "음식점",
                            "time": "10:50 - 11:50 [🟡 보통]",
                            "transit_to_here": ["도보 : 4분"],
                        },
                        {
                            "name": "성수 수제화거리",
                            "category": "쇼핑",
                            "time": "12:00 - 12:45",
                            "transit_to_here": ["도보 : 6분"],
                        },
                        {
                            "name": "디뮤지엄",
                            "category": "전시",
                            "time": "13:10 - 14:40",
                            "transit_to_here": ["[지하철][수도권 2호선] : 성수 → 뚝섬 : 2분 [🔴 정체 +3분]", "도보 : 8분"],
                        },
                    ],
                    "min_transfer_version": [
                        {"name": "서울숲", "category": "공원", "time": "09:00 - 09:45", "transit_to_here": []},
                        {"name": "소문난성수감자탕", "category": "음식점", "time": "10:00 - 11:00", "transit_to_here": []},
                        {"name": "대림창고", "category": "카페", "time": "11:15 - 11:45", "transit_to_here": []},
                        {"name": "디뮤지엄", "category": "전시", "time": "12:10 - 13:40", "transit_to_here": []},
                        {"name": "성수 수제화거리", "category": "쇼핑", "time": "14:00 - 14:45", "transit_to_here": []},
                    ],
                },
            },
            "day2": {
                "route": [
                    {"name": "뚝섬한강공원", "category": "공원", "lat": 37.5292, "lng": 127.0696},
                ],
                "restaurants": [],
                "accommodations": [
                    {"name": "호텔 포코 성수", "category": "숙박", "lat": 37.5411, "lng": 127.0601},
                ],
                "timelines": {
                    "fastest_version": [
                        {"name": "호텔 포코 성수", "category": "숙박", "time": "08:00 - 09:00", "transit_to_here": []},
                        {"name": "뚝섬한강공원", "category": "공원", "time": "09:20 - 10:05", "transit_to_here": ["도보 : 15분"]},
                    ],
                    "min_transfer_version": [],
                },
            },
        },
    }


@pytest.fixture
def plan(plan_dict) -> Plan:
    return Plan.from_dict(plan_dict)


@pytest.fixture
def scenario_stops() -> List[Stop]:
    """A(09:00-10:00, cafe), B(no time, restaurant), C(no time, park)."""
    return [
        make_stop("A", "cafe", "09:00 - 10:00"),
        make_stop("B", "restaurant"),
        make_stop("C", "park"),
    ]
