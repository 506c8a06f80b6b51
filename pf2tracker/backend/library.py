"""Library entity payloads, one closed model per entity kind."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .models import COPPER_PER_GOLD, COPPER_PER_SILVER, CreatureContribution, CurrencyAward, InvalidEncounterInput


Rarity = Literal["common", "uncommon", "rare", "unique"]


class _LibraryEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    name: str = Field(min_length=1)
    description: str | None = None
    rarity: Rarity = "common"
    source: str | None = None
    traits: tuple[str, ...] = ()


class LibraryCreature(_LibraryEntry):
    kind: Literal["creature"] = "creature"
    level: int = Field(ge=-1)
    size: str
    creature_type: str
    family: str | None = None
    alignment: str | None = None


class LibraryHazard(_LibraryEntry):
    kind: Literal["hazard"] = "hazard"
    level: int = Field(ge=-1)
    complexity: Literal["simple", "complex"] = "simple"
    stealth: str | None = None
    disable: str | None = None

    @property
    def is_complex(self) -> bool:
        return self.complexity == "complex"


class ItemPrice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    gold: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    copper: int = Field(default=0, ge=0)


class LibraryItem(_LibraryEntry):
    kind: Literal["item"] = "item"
    level: int = Field(ge=0)
    category: str
    price: ItemPrice = Field(default_factory=ItemPrice)
    bulk: float | None = None
    hands: int | None = None
    consumable: bool = False


class LibraryClass(_LibraryEntry):
    kind: Literal["class"] = "class"
    hit_points: int = Field(ge=0)
    key_ability: str
    skills: tuple[str, ...] = ()


class LibrarySpell(_LibraryEntry):
    kind: Literal["spell"] = "spell"
    rank: int = Field(ge=0, le=10)
    traditions: tuple[str, ...] = ()
    casting_time: str
    components: tuple[str, ...] = ()
    range: str | None = None
    duration: str | None = None
    saving_throw: str | None = None


LibraryEntity = Annotated[
    Union[LibraryCreature, LibraryHazard, LibraryItem, LibraryClass, LibrarySpell],
    Field(discriminator="kind"),
]

_ENTITY_ADAPTER: TypeAdapter[LibraryEntity] = TypeAdapter(LibraryEntity)


def parse_library_entity(payload: dict[str, Any]) -> LibraryEntity:
    """Validate a raw payload into the variant named by its ``kind`` field."""
    return _ENTITY_ADAPTER.validate_python(payload)


def contribution_for(entity: LibraryEntity, level_adjustment: int = 0) -> CreatureContribution:
    """Turn a creature or hazard entry into an encounter contribution."""
    if isinstance(entity, LibraryCreature):
        return CreatureContribution.for_creature(entity.level, level_adjustment)
    if isinstance(entity, LibraryHazard):
        if level_adjustment != 0:
            raise InvalidEncounterInput("hazards cannot take elite or weak adjustments")
        return CreatureContribution.for_hazard(entity.level, entity.is_complex)
    raise InvalidEncounterInput(f"{entity.kind} entries do not contribute encounter XP")


def item_value(item: LibraryItem) -> CurrencyAward:
    price = item.price
    return CurrencyAward.from_copper(price.gold * COPPER_PER_GOLD + price.silver * COPPER_PER_SILVER + price.copper)
