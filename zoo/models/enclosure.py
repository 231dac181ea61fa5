"""Enclosure registry domain models."""
from typing import Iterator, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Occupant(BaseModel):
    """A group of one species currently housed in an enclosure."""

    model_config = ConfigDict(frozen=True)

    species_id: str
    count: int = Field(..., gt=0)


class Enclosure(BaseModel):
    """A habitat unit with a biome tag, a capacity and its current occupants."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique enclosure number, used for result ordering.")
    biome: str = Field(..., description="Biome tag, possibly compound (e.g. 'savanna-river').")
    capacity: int = Field(..., gt=0)
    occupants: Tuple[Occupant, ...] = Field(default_factory=tuple)

    def species_ids(self) -> Set[str]:
        return {occupant.species_id for occupant in self.occupants}

    def houses(self, species_id: str) -> bool:
        return any(occupant.species_id == species_id for occupant in self.occupants)


class EnclosureRegistry(BaseModel):
    """Ordered collection of the zoo's enclosures."""

    model_config = ConfigDict(frozen=True)

    enclosures: Tuple[Enclosure, ...]

    @model_validator(mode="after")
    def _unique_ids(self) -> "EnclosureRegistry":
        seen = set()
        for enclosure in self.enclosures:
            if enclosure.id in seen:
                raise ValueError(f"Duplicate enclosure id: {enclosure.id}")
            seen.add(enclosure.id)
        return self

    def __iter__(self) -> Iterator[Enclosure]:
        return iter(self.enclosures)

    def __len__(self) -> int:
        return len(self.enclosures)

    def all(self) -> Tuple[Enclosure, ...]:
        return self.enclosures

    def get(self, enclosure_id: int) -> Enclosure:
        for enclosure in self.enclosures:
            if enclosure.id == enclosure_id:
                return enclosure
        raise KeyError(f"Enclosure {enclosure_id} not found.")
