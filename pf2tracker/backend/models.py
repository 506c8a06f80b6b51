"""Value types shared by the experience, difficulty and reward helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


class InvalidEncounterInput(ValueError):
    """Raised when a caller passes a value outside the rules' domain."""


class ThresholdConfigurationError(InvalidEncounterInput):
    """Raised when a party size yields non-increasing difficulty thresholds."""


ELITE_ADJUSTMENT = 1
WEAK_ADJUSTMENT = -1
COPPER_PER_SILVER = 10
COPPER_PER_GOLD = 100


@dataclass(frozen=True)
class PartyConfig:
    party_level: int
    party_size: int

    def __post_init__(self) -> None:
        if self.party_level < 1:
            raise InvalidEncounterInput(f"party_level must be >= 1, got {self.party_level}")
        if self.party_size < 1:
            raise InvalidEncounterInput(f"party_size must be >= 1, got {self.party_size}")


@dataclass(frozen=True)
class CreatureContribution:
    level: int
    is_hazard: bool = False
    is_complex_hazard: bool = False

    def __post_init__(self) -> None:
        if self.is_complex_hazard and not self.is_hazard:
            raise InvalidEncounterInput("only hazards can be complex")

    @classmethod
    def for_creature(cls, level: int, level_adjustment: int = 0) -> CreatureContribution:
        """Build a creature entry, applying the elite (+1) or weak (-1) template."""
        if level_adjustment not in (WEAK_ADJUSTMENT, 0, ELITE_ADJUSTMENT):
            raise InvalidEncounterInput(f"level_adjustment must be -1, 0 or 1, got {level_adjustment}")
        return cls(level=level + level_adjustment)

    @classmethod
    def for_hazard(cls, level: int, is_complex: bool) -> CreatureContribution:
        return cls(level=level, is_hazard=True, is_complex_hazard=is_complex)


@dataclass(frozen=True)
class ExperienceBudget:
    raw: float
    adjusted: float


@dataclass(frozen=True)
class CurrencyAward:
    gold: int = 0
    silver: int = 0
    copper: int = 0

    def __post_init__(self) -> None:
        if self.gold < 0:
            raise InvalidEncounterInput(f"gold must be >= 0, got {self.gold}")
        if not 0 <= self.silver <= 9:
            raise InvalidEncounterInput(f"silver must be within 0-9, got {self.silver}")
        if not 0 <= self.copper <= 9:
            raise InvalidEncounterInput(f"copper must be within 0-9, got {self.copper}")

    @classmethod
    def from_copper(cls, value: int) -> CurrencyAward:
        """Split a copper amount into denominations, folding carries into gold."""
        if value < 0:
            raise InvalidEncounterInput(f"currency value must be >= 0, got {value}")
        gold, remainder = divmod(value, COPPER_PER_GOLD)
        silver, copper = divmod(remainder, COPPER_PER_SILVER)
        return cls(gold=gold, silver=silver, copper=copper)

    @classmethod
    def from_gold(cls, gold: int) -> CurrencyAward:
        return cls(gold=gold)

    def as_copper(self) -> int:
        return self.gold * COPPER_PER_GOLD + self.silver * COPPER_PER_SILVER + self.copper

    def __add__(self, other: CurrencyAward) -> CurrencyAward:
        if not isinstance(other, CurrencyAward):
            return NotImplemented
        return CurrencyAward.from_copper(self.as_copper() + other.as_copper())


@dataclass(frozen=True)
class EncounterDraft:
    name: str
    party: PartyConfig
    creatures: tuple[CreatureContribution, ...] = ()
    hazards: tuple[CreatureContribution, ...] = ()
    treasure: CurrencyAward = field(default_factory=CurrencyAward)
    extra_experience: int = 0

    @property
    def contributions(self) -> tuple[CreatureContribution, ...]:
        return self.creatures + self.hazards
