"""
Tests for the synthetic circadian energy curve.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from chronoplan.circadian_math import is_asleep, to_minutes
from chronoplan.science.energy import (
    CHRONOTYPE_CURVES,
    DEFAULT_ENERGY,
    average_energy,
    energy_at,
    energy_curve,
)

CHRONOTYPES = ["morning", "intermediate", "evening"]
SLEEP_WINDOWS = [("07:00", "23:00"), ("09:00", "01:00"), ("05:30", "21:30"), ("12:00", "04:00")]


class TestCurveShape:
    """Structural properties that hold for every input."""

    @pytest.mark.parametrize("chronotype", CHRONOTYPES)
    @pytest.mark.parametrize("wake,sleep", SLEEP_WINDOWS)
    def test_length_and_bounds(self, chronotype, wake, sleep):
        """1440 entries, each in [0, 1]."""
        curve = energy_curve(wake, sleep, chronotype)
        assert len(curve) == 1440
        assert all(0.0 <= e <= 1.0 for e in curve)

    @pytest.mark.parametrize("chronotype", CHRONOTYPES)
    @pytest.mark.parametrize("wake,sleep", SLEEP_WINDOWS)
    def test_zero_while_asleep(self, chronotype, wake, sleep):
        """Every minute in the sleep window is exactly 0."""
        curve = energy_curve(wake, sleep, chronotype)
        w, s = to_minutes(wake), to_minutes(sleep)
        asleep = [m for m in range(1440) if is_asleep(m, w, s)]
        assert asleep, "Test windows should all contain sleep"
        assert all(curve[m] == 0.0 for m in asleep)

    def test_awake_minutes_have_energy(self):
        """The baseline keeps waking energy above zero around the peaks."""
        curve = energy_curve("07:00", "23:00", "intermediate")
        assert curve[to_minutes("10:00")] > 0.5


class TestChronotypeParameters:
    """Peak placement relative to wake time."""

    def test_table_covers_all_chronotypes(self):
        assert set(CHRONOTYPE_CURVES) == set(CHRONOTYPES)

    def test_morning_first_peak_value(self):
        """Two hours after wake a morning type is near its first peak."""
        curve = energy_curve("07:00", "23:00", "morning")
        assert curve[to_minutes("09:00")] == pytest.approx(0.8977, abs=1e-3)

    def test_curve_matches_energy_at(self):
        """Waking minutes are energy_at() of minutes since wake."""
        curve = energy_curve("06:00", "22:00", "evening")
        params = CHRONOTYPE_CURVES["evening"]
        for since_wake in (0, 240, 540, 720):
            assert curve[360 + since_wake] == pytest.approx(energy_at(since_wake, params))

    def test_evening_peaks_later_than_morning(self):
        morning = energy_curve("07:00", "23:00", "morning")
        evening = energy_curve("07:00", "23:00", "evening")
        assert evening.index(max(evening)) > morning.index(max(morning))

    def test_curve_follows_wake_time(self):
        """Shifting wake and sleep by an hour shifts the curve by an hour."""
        early = energy_curve("06:00", "22:00", "intermediate")
        late = energy_curve("07:00", "23:00", "intermediate")
        for minute in range(360, 1320):
            assert late[minute + 60] == pytest.approx(early[minute])


class TestAverageEnergy:
    """Tests for range averaging."""

    def test_constant_curve(self):
        assert average_energy([0.25] * 1440, 100, 200) == pytest.approx(0.25)

    def test_empty_range_uses_default(self):
        assert average_energy([0.9] * 1440, 300, 300) == DEFAULT_ENERGY

    def test_indexes_wrap_past_midnight(self):
        """Minutes 1440-1449 read curve entries 0-9."""
        curve = [0.0] * 1440
        for m in range(10):
            curve[m] = 1.0
        assert average_energy(curve, 1440, 1450) == pytest.approx(1.0)
        assert average_energy(curve, 1435, 1445) == pytest.approx(0.5)
