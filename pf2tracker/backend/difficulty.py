"""Difficulty bands and party-size normalization of encounter XP."""

from __future__ import annotations

import logging
import math
from enum import IntEnum

from .models import InvalidEncounterInput, ThresholdConfigurationError


logger = logging.getLogger(__name__)

BASELINE_PARTY_SIZE = 4


class DifficultyBand(IntEnum):
    TRIVIAL = 0
    LOW = 1
    MODERATE = 2
    SEVERE = 3
    EXTREME = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


BASE_THRESHOLDS: dict[DifficultyBand, int] = {
    DifficultyBand.TRIVIAL: 40,
    DifficultyBand.LOW: 60,
    DifficultyBand.MODERATE: 80,
    DifficultyBand.SEVERE: 120,
    DifficultyBand.EXTREME: 160,
}

PER_PLAYER_INCREMENTS: dict[DifficultyBand, int] = {
    DifficultyBand.TRIVIAL: 10,
    DifficultyBand.LOW: 20,
    DifficultyBand.MODERATE: 20,
    DifficultyBand.SEVERE: 30,
    DifficultyBand.EXTREME: 40,
}

# TRIVIAL is the fallback band and is never crossed explicitly.
_CLASSIFIED_BANDS = (
    DifficultyBand.EXTREME,
    DifficultyBand.SEVERE,
    DifficultyBand.MODERATE,
    DifficultyBand.LOW,
)


def _size_offset(party_size: int) -> int:
    return party_size - BASELINE_PARTY_SIZE


def _require_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise InvalidEncounterInput(f"{name} must be finite, got {value!r}")


def thresholds(party_size: int) -> dict[DifficultyBand, int]:
    """Return the XP threshold of every band for ``party_size`` players, in band order.

    Each threshold moves by the band's per-player increment for every player
    above or below a party of four. Sizes whose crossable thresholds would
    not strictly increase are rejected with ``ThresholdConfigurationError``.
    """
    diff_off = _size_offset(party_size)
    table = {band: BASE_THRESHOLDS[band] + PER_PLAYER_INCREMENTS[band] * diff_off for band in DifficultyBand}

    crossable = [table[band] for band in reversed(_CLASSIFIED_BANDS)]
    if any(lower >= upper for lower, upper in zip(crossable, crossable[1:])):
        raise ThresholdConfigurationError(f"party_size {party_size} produces non-increasing thresholds: {table}")
    return table


def classify(raw_xp: float, party_size: int) -> DifficultyBand:
    """Return the hardest band whose size-adjusted threshold ``raw_xp`` reaches."""
    _require_finite(raw_xp, "raw_xp")
    table = thresholds(party_size)
    for band in _CLASSIFIED_BANDS:
        if raw_xp >= table[band]:
            logger.debug("classified raw_xp=%s party_size=%s as %s", raw_xp, party_size, band.label)
            return band
    return DifficultyBand.TRIVIAL


def adjust_for_party_size(raw_xp: float, party_size: int) -> float:
    """Remove the party-size correction so encounters compare on a four-player scale.

    The correction is taken from the band the raw value falls in.
    """
    if raw_xp == 0:
        return raw_xp
    band = classify(raw_xp, party_size)
    if band is DifficultyBand.TRIVIAL:
        return raw_xp
    return raw_xp - PER_PLAYER_INCREMENTS[band] * _size_offset(party_size)


def classify_final(total_xp: float, extra_experience: float) -> DifficultyBand:
    """Classify a finalized encounter whose XP is already on the four-player scale.

    ``extra_experience`` is bonus XP that never counts toward difficulty, so it
    is removed before comparing against the baseline thresholds.
    """
    _require_finite(total_xp, "total_xp")
    _require_finite(extra_experience, "extra_experience")
    return classify(total_xp - extra_experience, BASELINE_PARTY_SIZE)
