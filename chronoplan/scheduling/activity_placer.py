"""
Greedy placement of generated blocks into free slots.

Three passes over the slots, highest mean energy first:
1. focus - every unused slot meeting the focus thresholds
2. exercise - every still-unused slot meeting the exercise thresholds
3. break - every still-unused slot of at least 15 minutes, full length

A slot hosts at most one generated block. Focus and exercise blocks sit at
the start of their slot with a fixed length; whatever remains of the slot
is left empty.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from ..circadian_math import to_time
from ..types import ActivityType, Chronotype, Priority, ScheduleBlock, Slot

logger = logging.getLogger(__name__)

MIN_BREAK_MINUTES = 15


@dataclass(frozen=True)
class ActivityPreference:
    """Placement thresholds for one generated activity kind."""

    min_energy: float
    duration: int  # Minutes
    priority: Priority


@dataclass(frozen=True)
class PlacementProfile:
    focus: ActivityPreference
    exercise: ActivityPreference


PLACEMENT_PROFILES: MappingProxyType[Chronotype, PlacementProfile] = MappingProxyType(
    {
        "morning": PlacementProfile(
            focus=ActivityPreference(min_energy=0.6, duration=90, priority="high"),
            exercise=ActivityPreference(min_energy=0.5, duration=60, priority="medium"),
        ),
        "intermediate": PlacementProfile(
            focus=ActivityPreference(min_energy=0.5, duration=90, priority="high"),
            exercise=ActivityPreference(min_energy=0.4, duration=45, priority="medium"),
        ),
        "evening": PlacementProfile(
            focus=ActivityPreference(min_energy=0.4, duration=60, priority="medium"),
            exercise=ActivityPreference(min_energy=0.5, duration=45, priority="high"),
        ),
    }
)


class ActivityPlacer:
    """
    Place focus, exercise and break blocks for one chronotype.

    Slot usage is tracked by `Slot.index`, so two slots with identical
    bounds and energy are still told apart.
    """

    def __init__(self, chronotype: Chronotype) -> None:
        self.chronotype = chronotype
        self.profile = PLACEMENT_PROFILES[chronotype]

    def place(self, slots: list[Slot]) -> list[ScheduleBlock]:
        """
        Run the three placement passes.

        Args:
            slots: Free slots from find_available_slots()

        Returns:
            Generated blocks in placement order (not time order)
        """
        ranked = sorted(slots, key=lambda s: s.energy, reverse=True)
        used: set[int] = set()
        blocks: list[ScheduleBlock] = []

        for slot in ranked:
            if slot.index in used:
                continue
            if self._fits(slot, self.profile.focus):
                blocks.append(self._focus_block(slot, len(blocks) + 1))
                used.add(slot.index)

        for slot in ranked:
            if slot.index in used:
                continue
            if self._fits(slot, self.profile.exercise):
                blocks.append(self._exercise_block(slot, len(blocks) + 1))
                used.add(slot.index)

        for slot in ranked:
            if slot.index in used:
                continue
            if slot.duration >= MIN_BREAK_MINUTES:
                blocks.append(self._break_block(slot, len(blocks) + 1))
                used.add(slot.index)

        logger.debug(
            "Placed %d blocks in %d slots for %s chronotype",
            len(blocks),
            len(slots),
            self.chronotype,
        )
        return blocks

    @staticmethod
    def _fits(slot: Slot, pref: ActivityPreference) -> bool:
        return slot.energy >= pref.min_energy and slot.duration >= pref.duration

    def _fixed_length_block(
        self,
        slot: Slot,
        label: ActivityType,
        pref: ActivityPreference,
        number: int,
        title: str,
        rationale: str,
        tags: list[str],
    ) -> ScheduleBlock:
        return ScheduleBlock(
            id=f"{label}-{number}",
            start=to_time(slot.start),
            end=to_time(slot.start + pref.duration),
            label=label,
            title=title,
            rationale=rationale,
            confidence=slot.energy,
            priority=pref.priority,
            estimated_duration=pref.duration,
            tags=tags,
        )

    def _focus_block(self, slot: Slot, number: int) -> ScheduleBlock:
        return self._fixed_length_block(
            slot,
            "focus",
            self.profile.focus,
            number,
            title="Deep Focus Work",
            rationale=(
                f"High energy period ({round(slot.energy * 100)}%) suits demanding, focused work"
            ),
            tags=["work", "productivity"],
        )

    def _exercise_block(self, slot: Slot, number: int) -> ScheduleBlock:
        return self._fixed_length_block(
            slot,
            "exercise",
            self.profile.exercise,
            number,
            title="Physical Activity",
            rationale=f"Good energy level ({round(slot.energy * 100)}%) for exercise",
            tags=["health", "fitness"],
        )

    def _break_block(self, slot: Slot, number: int) -> ScheduleBlock:
        return ScheduleBlock(
            id=f"break-{number}",
            start=to_time(slot.start),
            end=to_time(slot.end),
            label="break",
            title="Rest & Recovery",
            rationale=f"Lower energy period ({round(slot.energy * 100)}%) is time to recover",
            # Low-energy slots are the most confident break placements
            confidence=1 - slot.energy,
            priority="low",
            estimated_duration=slot.duration,
            tags=["rest", "recovery"],
        )
