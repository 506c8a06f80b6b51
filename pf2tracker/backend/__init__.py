"""Backend package for the Pathfinder 2e encounter tracker."""

from .budget import build_budget
from .config import TrackerSettings, configure_logging, load_settings
from .difficulty import DifficultyBand, adjust_for_party_size, classify, classify_final, thresholds
from .engine import DraftActionResult, apply_draft_action
from .experience import (
    AccomplishmentLevel,
    LevelProgress,
    contribution_xp,
    creature_xp,
    experience_for_accomplishment,
    experience_progress,
    hazard_xp,
)
from .library import LibraryEntity, contribution_for, item_value, parse_library_entity
from .models import (
    CreatureContribution,
    CurrencyAward,
    EncounterDraft,
    ExperienceBudget,
    InvalidEncounterInput,
    PartyConfig,
    ThresholdConfigurationError,
)
from .rewards import Reward, decompose_currency, reward_for
from .scoring import EncounterSummary, score_encounter
from .state import build_initial_draft

__all__ = [
    "AccomplishmentLevel",
    "adjust_for_party_size",
    "apply_draft_action",
    "build_budget",
    "build_initial_draft",
    "classify",
    "classify_final",
    "configure_logging",
    "contribution_for",
    "contribution_xp",
    "creature_xp",
    "CreatureContribution",
    "CurrencyAward",
    "decompose_currency",
    "DifficultyBand",
    "DraftActionResult",
    "EncounterDraft",
    "EncounterSummary",
    "experience_for_accomplishment",
    "experience_progress",
    "ExperienceBudget",
    "hazard_xp",
    "InvalidEncounterInput",
    "item_value",
    "LevelProgress",
    "LibraryEntity",
    "load_settings",
    "parse_library_entity",
    "PartyConfig",
    "Reward",
    "reward_for",
    "score_encounter",
    "ThresholdConfigurationError",
    "thresholds",
    "TrackerSettings",
]
