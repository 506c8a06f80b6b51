"""Experience awards for creatures, hazards and accomplishments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import CreatureContribution, InvalidEncounterInput


MIN_LEVEL_DIFFERENCE = -4
MAX_LEVEL_DIFFERENCE = 4
SIMPLE_HAZARD_DIVISOR = 5
XP_PER_LEVEL = 1000

# Keyed by creature level minus party level, covering every clamped difference.
XP_BY_LEVEL_DIFFERENCE: dict[int, int] = {
    -4: 10,
    -3: 15,
    -2: 20,
    -1: 30,
    0: 40,
    1: 60,
    2: 80,
    3: 120,
    4: 160,
}


class AccomplishmentLevel(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"


ACCOMPLISHMENT_XP: dict[AccomplishmentLevel, int] = {
    AccomplishmentLevel.MINOR: 10,
    AccomplishmentLevel.MODERATE: 30,
    AccomplishmentLevel.MAJOR: 80,
}


@dataclass(frozen=True)
class LevelProgress:
    levels_gained: int
    experience_this_level: int


def clamp_level_difference(difference: int) -> int:
    return max(MIN_LEVEL_DIFFERENCE, min(MAX_LEVEL_DIFFERENCE, difference))


def creature_xp(party_level: int, creature_level: int) -> int:
    """Return the XP a creature of ``creature_level`` is worth to the party.

    Differences beyond +/-4 saturate at the table edges instead of failing.
    """
    return XP_BY_LEVEL_DIFFERENCE[clamp_level_difference(creature_level - party_level)]


def hazard_xp(party_level: int, hazard_level: int, is_complex: bool) -> int:
    """Complex hazards are worth a full creature; simple hazards one fifth of one."""
    base_xp = creature_xp(party_level, hazard_level)
    if is_complex:
        return base_xp
    return base_xp // SIMPLE_HAZARD_DIVISOR


def contribution_xp(party_level: int, contribution: CreatureContribution) -> int:
    if contribution.is_hazard:
        return hazard_xp(party_level, contribution.level, contribution.is_complex_hazard)
    return creature_xp(party_level, contribution.level)


def experience_for_accomplishment(level: AccomplishmentLevel | str | None) -> int:
    if level is None:
        return 0
    try:
        accomplishment = AccomplishmentLevel(level.lower() if isinstance(level, str) else level)
    except ValueError as exc:
        raise InvalidEncounterInput(f"unknown accomplishment level: {level!r}") from exc
    return ACCOMPLISHMENT_XP[accomplishment]


def experience_progress(total_xp: int) -> LevelProgress:
    """Split campaign XP into levels gained and XP banked toward the next level."""
    if total_xp < 0:
        raise InvalidEncounterInput(f"total_xp must be >= 0, got {total_xp}")
    levels_gained, experience_this_level = divmod(total_xp, XP_PER_LEVEL)
    return LevelProgress(levels_gained=levels_gained, experience_this_level=experience_this_level)
