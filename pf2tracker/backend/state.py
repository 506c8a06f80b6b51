"""Builders for fresh encounter drafts."""

from __future__ import annotations

from .models import EncounterDraft, InvalidEncounterInput, PartyConfig


def build_initial_draft(name: str, party_level: int, party_size: int) -> EncounterDraft:
    """Return an empty draft for the given party; the caller owns the value."""
    cleaned_name = name.strip()
    if not cleaned_name:
        raise InvalidEncounterInput("encounter name must not be blank")
    return EncounterDraft(
        name=cleaned_name,
        party=PartyConfig(party_level=party_level, party_size=party_size),
    )
