"""Accumulate creature and hazard XP into raw and party-size-adjusted totals."""

from __future__ import annotations

from collections.abc import Iterable

from .difficulty import adjust_for_party_size
from .experience import contribution_xp
from .models import CreatureContribution, ExperienceBudget, PartyConfig


def build_budget(party: PartyConfig, contributions: Iterable[CreatureContribution]) -> ExperienceBudget:
    raw = sum(contribution_xp(party.party_level, contribution) for contribution in contributions)
    return ExperienceBudget(raw=raw, adjusted=adjust_for_party_size(raw, party.party_size))
