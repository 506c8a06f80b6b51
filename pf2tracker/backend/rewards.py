"""Suggested XP and currency rewards per difficulty band."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .difficulty import BASE_THRESHOLDS, DifficultyBand
from .models import COPPER_PER_GOLD, CurrencyAward, InvalidEncounterInput


CURRENCY_MULTIPLIERS: dict[DifficultyBand, float] = {
    DifficultyBand.TRIVIAL: 0.5,
    DifficultyBand.LOW: 1,
    DifficultyBand.MODERATE: 2,
    DifficultyBand.SEVERE: 4,
    DifficultyBand.EXTREME: 8,
}

# Every multiplier is a whole number of copper per gold piece of base reward.
_COPPER_MULTIPLIERS: dict[DifficultyBand, int] = {
    band: int(multiplier * COPPER_PER_GOLD) for band, multiplier in CURRENCY_MULTIPLIERS.items()
}


@dataclass(frozen=True)
class Reward:
    xp: int
    currency: CurrencyAward


def decompose_currency(total: float) -> CurrencyAward:
    """Split a gold amount into gold, silver and copper.

    Each denomination is truncated, never rounded, so the result can be worth
    slightly less than ``total`` but never more.
    """
    if not math.isfinite(total) or total < 0:
        raise InvalidEncounterInput(f"currency total must be a finite value >= 0, got {total!r}")
    gold_fraction, gold = math.modf(total)
    copper_fraction, _ = math.modf(total * 10)
    return CurrencyAward(
        gold=int(gold),
        silver=math.floor(gold_fraction * 10),
        copper=math.floor(copper_fraction * 10),
    )


def reward_for(level: int, band: DifficultyBand) -> Reward:
    """Return the band XP and the suggested currency for a party of ``level``.

    The currency is worked out in whole copper, so it stays exact at any level
    and matches ``decompose_currency`` of the gold total.
    """
    if level < 1:
        raise InvalidEncounterInput(f"level must be >= 1, got {level}")
    copper = 2 ** (level - 1) * _COPPER_MULTIPLIERS[band]
    return Reward(xp=BASE_THRESHOLDS[band], currency=CurrencyAward.from_copper(copper))
