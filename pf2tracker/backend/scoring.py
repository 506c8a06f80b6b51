"""Score an encounter draft into XP, difficulty and suggested rewards."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .budget import build_budget
from .difficulty import DifficultyBand, classify
from .models import CurrencyAward, EncounterDraft, ExperienceBudget
from .rewards import Reward, reward_for


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncounterSummary:
    budget: ExperienceBudget
    band: DifficultyBand
    suggested_reward: Reward
    treasure: CurrencyAward
    extra_experience: int
    total_experience: float


def score_encounter(draft: EncounterDraft) -> EncounterSummary:
    """Score ``draft`` for its party.

    ``band`` comes from the raw XP and the real party size. ``total_experience``
    is the adjusted XP plus the draft's extra experience. For parties other
    than four, classifying that total with ``classify_final`` can land in a
    different band than ``band``, because TRIVIAL encounters get no party-size
    correction and each band corrects by its own per-player increment.
    """
    budget = build_budget(draft.party, draft.contributions)
    band = classify(budget.raw, draft.party.party_size)
    summary = EncounterSummary(
        budget=budget,
        band=band,
        suggested_reward=reward_for(draft.party.party_level, band),
        treasure=draft.treasure,
        extra_experience=draft.extra_experience,
        total_experience=budget.adjusted + draft.extra_experience,
    )
    logger.debug(
        "scored encounter %r: raw=%s adjusted=%s band=%s",
        draft.name,
        budget.raw,
        budget.adjusted,
        band.label,
    )
    return summary
