"""
Tests for greedy focus/exercise/break placement.

Slots are built by hand so energies are exact.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from chronoplan.scheduling.activity_placer import PLACEMENT_PROFILES, ActivityPlacer
from chronoplan.types import Slot


def _labels(blocks):
    return [b.label for b in blocks]


class TestPlacementProfiles:
    def test_thresholds(self):
        assert PLACEMENT_PROFILES["morning"].focus.min_energy == 0.6
        assert PLACEMENT_PROFILES["morning"].exercise.duration == 60
        assert PLACEMENT_PROFILES["intermediate"].exercise.min_energy == 0.4
        assert PLACEMENT_PROFILES["evening"].focus.duration == 60

    def test_profiles_are_read_only(self):
        with pytest.raises(TypeError):
            PLACEMENT_PROFILES["morning"] = PLACEMENT_PROFILES["evening"]


class TestPassOrder:
    """Focus first, then exercise, then breaks."""

    @pytest.fixture
    def slots(self):
        return [
            Slot(index=0, start=420, end=480, energy=0.7),  # too short for focus
            Slot(index=1, start=600, end=720, energy=0.6),
            Slot(index=2, start=800, end=820, energy=0.3),
            Slot(index=3, start=900, end=910, energy=0.2),  # too short for anything
        ]

    def test_labels_in_pass_order(self, slots):
        blocks = ActivityPlacer("intermediate").place(slots)
        assert _labels(blocks) == ["focus", "exercise", "break"]

    def test_focus_skips_short_high_energy_slot(self, slots):
        """The best slot is too short, so focus goes to the next eligible one."""
        focus = ActivityPlacer("intermediate").place(slots)[0]
        assert (focus.start, focus.end) == ("10:00", "11:30")
        assert focus.confidence == pytest.approx(0.6)
        assert focus.priority == "high"
        assert focus.estimated_duration == 90

    def test_exercise_takes_leftover_slot(self, slots):
        exercise = ActivityPlacer("intermediate").place(slots)[1]
        assert (exercise.start, exercise.end) == ("07:00", "07:45")
        assert exercise.confidence == pytest.approx(0.7)
        assert exercise.priority == "medium"

    def test_break_spans_whole_slot(self, slots):
        rest = ActivityPlacer("intermediate").place(slots)[2]
        assert (rest.start, rest.end) == ("13:20", "13:40")
        assert rest.confidence == pytest.approx(0.7)
        assert rest.estimated_duration == 20

    def test_ids_count_generated_blocks(self, slots):
        blocks = ActivityPlacer("intermediate").place(slots)
        assert [b.id for b in blocks] == ["focus-1", "exercise-2", "break-3"]


class TestOneBlockPerSlot:
    def test_long_slot_gets_single_focus(self):
        """Residual time after a focus block is not reused."""
        slots = [Slot(index=0, start=480, end=780, energy=0.9)]
        blocks = ActivityPlacer("morning").place(slots)
        assert _labels(blocks) == ["focus"]
        assert (blocks[0].start, blocks[0].end) == ("08:00", "09:30")

    def test_every_eligible_slot_gets_focus(self):
        slots = [
            Slot(index=0, start=480, end=600, energy=0.8),
            Slot(index=1, start=700, end=820, energy=0.7),
        ]
        assert _labels(ActivityPlacer("morning").place(slots)) == ["focus", "focus"]

    def test_identical_slots_tracked_independently(self):
        """Usage is tracked by index, not by value."""
        slots = [
            Slot(index=0, start=480, end=600, energy=0.8),
            Slot(index=1, start=480, end=600, energy=0.8),
        ]
        blocks = ActivityPlacer("morning").place(slots)
        assert [b.id for b in blocks] == ["focus-1", "focus-2"]


class TestThresholds:
    def test_no_focus_when_energy_too_low(self):
        """Morning focus needs 0.6 and exercise 0.5; 0.45 only earns breaks."""
        slots = [
            Slot(index=0, start=480, end=600, energy=0.45),
            Slot(index=1, start=700, end=900, energy=0.45),
        ]
        assert _labels(ActivityPlacer("morning").place(slots)) == ["break", "break"]

    def test_evening_focus_is_shorter(self):
        slots = [Slot(index=0, start=840, end=960, energy=0.5)]
        focus = ActivityPlacer("evening").place(slots)[0]
        assert focus.label == "focus"
        assert (focus.start, focus.end) == ("14:00", "15:00")
        assert focus.priority == "medium"

    def test_energy_exactly_at_threshold_qualifies(self):
        slots = [Slot(index=0, start=480, end=600, energy=0.5)]
        assert _labels(ActivityPlacer("intermediate").place(slots)) == ["focus"]

    def test_low_energy_break_is_confident(self):
        slots = [Slot(index=0, start=480, end=500, energy=0.1)]
        rest = ActivityPlacer("intermediate").place(slots)[0]
        assert rest.confidence == pytest.approx(0.9)

    def test_empty_slots(self):
        assert ActivityPlacer("evening").place([]) == []


class TestMidnightSlots:
    def test_focus_crossing_midnight(self):
        """Slots past 1439 come out as wrapped clock times."""
        slots = [Slot(index=0, start=1410, end=1500, energy=0.5)]
        focus = ActivityPlacer("evening").place(slots)[0]
        assert (focus.start, focus.end) == ("23:30", "00:30")
