"""
Pytest fixtures for schedule generation tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chronoplan.scheduler import ScheduleGenerator
from chronoplan.types import Commitment, ScheduleRequest
from chronoplan.weekly import WeeklyScheduleGenerator


@pytest.fixture
def generator():
    """ScheduleGenerator instance."""
    return ScheduleGenerator()


@pytest.fixture
def weekly_generator():
    """WeeklyScheduleGenerator instance."""
    return WeeklyScheduleGenerator()


@pytest.fixture
def fixed_now():
    """A Wednesday, so derived week starts are easy to tell from the input."""
    return datetime(2025, 1, 15, 9, 30)


@pytest.fixture
def standard_request():
    """07:00 wake, 23:00 sleep, intermediate chronotype, no commitments."""
    return ScheduleRequest(wake_time="07:00", sleep_time="23:00", chronotype="intermediate")


@pytest.fixture
def workday_commitments():
    """A typical day with a standup, lunch and a weekday class."""
    return [
        Commitment(start="09:00", end="09:30", title="Standup", recurrence="daily", id="standup"),
        Commitment(start="12:30", end="13:15", title="Lunch", recurrence="daily"),
        Commitment(start="18:00", end="19:30", title="Evening class", recurrence="weekly"),
    ]


@pytest.fixture
def workday_request(workday_commitments):
    """Intermediate chronotype with the workday commitments."""
    return ScheduleRequest(
        wake_time="07:00",
        sleep_time="23:00",
        chronotype="intermediate",
        commitments=workday_commitments,
    )
