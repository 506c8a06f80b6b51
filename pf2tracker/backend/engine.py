"""Reducer for encounter draft edits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from .models import (
    COPPER_PER_GOLD,
    COPPER_PER_SILVER,
    CreatureContribution,
    CurrencyAward,
    EncounterDraft,
    InvalidEncounterInput,
    PartyConfig,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftActionResult:
    draft: EncounterDraft
    engine_events: list[dict[str, Any]]


def apply_draft_action(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    """Apply a builder action to ``draft`` and return the next draft.

    Unknown or malformed actions return the draft unchanged with no events.
    Well-formed actions carrying out-of-domain values raise
    ``InvalidEncounterInput``.
    """
    action_type = str(action.get("type", "")).upper()
    if action_type == "SET_PARTY":
        return _apply_set_party(draft=draft, action=action)
    if action_type == "ADD_CREATURE":
        return _apply_add_creature(draft=draft, action=action)
    if action_type == "REMOVE_CREATURE":
        return _apply_remove(draft=draft, action=action, field_name="creatures", kind="creature_removed")
    if action_type == "ADD_HAZARD":
        return _apply_add_hazard(draft=draft, action=action)
    if action_type == "REMOVE_HAZARD":
        return _apply_remove(draft=draft, action=action, field_name="hazards", kind="hazard_removed")
    if action_type == "ADD_TREASURE":
        return _apply_add_treasure(draft=draft, action=action)
    if action_type == "SET_EXTRA_EXPERIENCE":
        return _apply_set_extra_experience(draft=draft, action=action)
    return _ignored(draft, action)


def _ignored(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    logger.info("ignoring draft action %r", action)
    return DraftActionResult(draft=draft, engine_events=[])


def _int_field(action: dict[str, Any], key: str, default: int | None = None) -> int | None:
    value = action.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _bool_field(action: dict[str, Any], key: str, default: bool = False) -> bool | None:
    value = action.get(key, default)
    if not isinstance(value, bool):
        return None
    return value


def _apply_set_party(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    party_level = _int_field(action, "partyLevel", draft.party.party_level)
    party_size = _int_field(action, "partySize", draft.party.party_size)
    if party_level is None or party_size is None:
        return _ignored(draft, action)

    party = PartyConfig(party_level=party_level, party_size=party_size)
    return DraftActionResult(
        draft=replace(draft, party=party),
        engine_events=[
            {"kind": "party_changed", "partyLevel": party_level, "partySize": party_size, "action": action}
        ],
    )


def _apply_add_creature(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    level = _int_field(action, "level")
    level_adjustment = _int_field(action, "levelAdjustment", 0)
    if level is None or level_adjustment is None:
        return _ignored(draft, action)

    creature = CreatureContribution.for_creature(level, level_adjustment)
    return DraftActionResult(
        draft=replace(draft, creatures=draft.creatures + (creature,)),
        engine_events=[{"kind": "creature_added", "level": creature.level, "action": action}],
    )


def _apply_add_hazard(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    level = _int_field(action, "level")
    is_complex = _bool_field(action, "isComplex")
    if level is None or is_complex is None:
        return _ignored(draft, action)

    hazard = CreatureContribution.for_hazard(level, is_complex)
    return DraftActionResult(
        draft=replace(draft, hazards=draft.hazards + (hazard,)),
        engine_events=[
            {"kind": "hazard_added", "level": hazard.level, "isComplex": hazard.is_complex_hazard, "action": action}
        ],
    )


def _apply_remove(draft: EncounterDraft, action: dict[str, Any], field_name: str, kind: str) -> DraftActionResult:
    index = _int_field(action, "index")
    entries: tuple[CreatureContribution, ...] = getattr(draft, field_name)
    if index is None or not 0 <= index < len(entries):
        return _ignored(draft, action)

    remaining = entries[:index] + entries[index + 1 :]
    return DraftActionResult(
        draft=replace(draft, **{field_name: remaining}),
        engine_events=[{"kind": kind, "index": index, "action": action}],
    )


def _apply_add_treasure(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    gold = _int_field(action, "gold", 0)
    silver = _int_field(action, "silver", 0)
    copper = _int_field(action, "copper", 0)
    if gold is None or silver is None or copper is None:
        return _ignored(draft, action)
    if min(gold, silver, copper) < 0:
        raise InvalidEncounterInput(f"treasure amounts must be >= 0, got {action!r}")

    added = CurrencyAward.from_copper(gold * COPPER_PER_GOLD + silver * COPPER_PER_SILVER + copper)
    treasure = draft.treasure + added
    return DraftActionResult(
        draft=replace(draft, treasure=treasure),
        engine_events=[{"kind": "treasure_added", "copper": added.as_copper(), "action": action}],
    )


def _apply_set_extra_experience(draft: EncounterDraft, action: dict[str, Any]) -> DraftActionResult:
    experience = _int_field(action, "experience")
    if experience is None:
        return _ignored(draft, action)
    if experience < 0:
        raise InvalidEncounterInput(f"extra experience must be >= 0, got {experience}")

    return DraftActionResult(
        draft=replace(draft, extra_experience=experience),
        engine_events=[{"kind": "extra_experience_set", "experience": experience, "action": action}],
    )
