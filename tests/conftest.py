"""Test fixtures for schedule planner tests."""

import json

import pytest

from schedule_planner.models import Location, MeetingInterval, Section, TravelRules


def _raw_meeting(
    day="M",
    start="0900",
    end="0950",
    pm_code="A",
    campus="BUSCH",
    building="ARC",
    room="103",
    mode="LEC",
):
    return {
        "meetingDay": day,
        "startTime": start,
        "endTime": end,
        "pmCode": pm_code,
        "campusName": campus,
        "buildingCode": building,
        "roomNumber": room,
        "meetingModeDesc": mode,
        "baClassHours": "",
    }


def _online_meeting():
    return {
        "meetingDay": None,
        "startTime": None,
        "endTime": None,
        "pmCode": None,
        "campusName": "** INVALID **",
        "buildingCode": None,
        "roomNumber": None,
        "meetingModeDesc": "ONLINE INSTRUCTION(INTERNET)",
        "baClassHours": "B",
    }


def _make_section(index, intervals=(), course_id="01:198:111", number="01", **kwargs):
    """Section with meetings given as (start, end, campus) tuples."""
    return Section(
        index=index,
        number=number,
        course_id=course_id,
        meeting_times=[
            MeetingInterval(start=start, end=end, location=Location(campus=campus))
            for start, end, campus in intervals
        ],
        **kwargs,
    )


@pytest.fixture
def raw_meeting():
    """Factory for raw catalog meeting records."""
    return _raw_meeting


@pytest.fixture
def online_meeting():
    """Raw catalog record of an asynchronous meeting."""
    return _online_meeting()


@pytest.fixture
def make_section():
    """Factory for sections built straight from minute intervals."""
    return _make_section


@pytest.fixture
def rules():
    """Default travel rules (20 same campus, 40 between campuses)."""
    return TravelRules.default()


@pytest.fixture
def catalog_data():
    """Catalog document with a few New Brunswick undergraduate courses.

    Meetings on the weekly minute scale:
    - 10001: MON 620-700, THU 4940-5020 (BUSCH)
    - 10002: TUE 2280-2360, FRI 6600-6680 (LIVINGSTON)
    - 10101: online only
    - 20001: MON 600-680, WED 3480-3560 (BUSCH)
    - 20002: MON 720-800, WED 3600-3680 (BUSCH)
    - 20003: TUE 2460-2540 (COLLEGE AVENUE)
    """
    return {
        "collections": {
            "undergraduate-nb": [
                {
                    "code": "198",
                    "description": "COMPUTER SCIENCE",
                    "course_211": {"title": "COMPUTER ARCHITECTURE", "sections": ["10001", "10002"]},
                    "course_111": {"title": "INTRO COMPUTER SCI", "sections": ["10101"]},
                },
                {
                    "code": "640",
                    "description": "MATHEMATICS",
                    "course_251": {"title": "MULTIVAR CALC", "sections": ["20001", "20002", "20003"]},
                    "course_999": {"title": "NOT OFFERED", "sections": []},
                },
            ],
        },
        "sections": [
            {
                "index": "10001",
                "number": "01",
                "printed": "Y",
                "openStatus": True,
                "instructors": [{"name": "KANIA, JAY"}],
                "examCode": "A",
                "meetingTimes": [
                    _raw_meeting("M", "1020", "1140", "A", "BUSCH"),
                    _raw_meeting("TH", "1020", "1140", "A", "BUSCH"),
                ],
            },
            {
                "index": "10002",
                "number": "02",
                "printed": "Y",
                "openStatus": False,
                "instructors": [{"name": "SMITH, ANN"}],
                "examCode": "B",
                "meetingTimes": [
                    _raw_meeting("T", "0200", "0320", "P", "LIVINGSTON"),
                    _raw_meeting("F", "0200", "0320", "P", "LIVINGSTON"),
                ],
            },
            {
                "index": "10101",
                "number": "90",
                "printed": "N",
                "openStatus": True,
                "instructors": [],
                "meetingTimes": [_online_meeting()],
            },
            {
                "index": "20001",
                "number": "01",
                "printed": "Y",
                "openStatus": True,
                "instructors": [{"name": "LEE, KIM"}],
                "meetingTimes": [
                    _raw_meeting("M", "1000", "1120", "A", "BUSCH"),
                    _raw_meeting("W", "1000", "1120", "A", "BUSCH"),
                ],
            },
            {
                "index": "20002",
                "number": "02",
                "printed": "Y",
                "openStatus": True,
                "instructors": [{"name": "LEE, KIM"}],
                "meetingTimes": [
                    _raw_meeting("M", "1200", "0120", "P", "BUSCH"),
                    _raw_meeting("W", "1200", "0120", "P", "BUSCH"),
                ],
            },
            {
                "index": "20003",
                "number": "03",
                "printed": "Y",
                "openStatus": True,
                "instructors": [{"name": "ROE, SAM"}],
                "meetingTimes": [_raw_meeting("T", "0500", "0620", "P", "COLLEGE AVENUE")],
            },
        ],
        "openStatuses": {"10001": False, "10002": True},
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    """Catalog document written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory (every loader falls back to defaults)."""
    path = tmp_path / "config"
    path.mkdir()
    return path
