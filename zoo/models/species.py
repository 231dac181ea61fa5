"""Species catalog domain models."""
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from zoo.errors import UnknownSpecies


class DietClass(str, Enum):
    CARNIVORE = "carnivore"
    NON_CARNIVORE = "non_carnivore"


class Species(BaseModel):
    """Biological attributes the placement rules need for one species."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable identifier used in requests.")
    unit_size: int = Field(..., gt=0, description="Space one individual occupies.")
    biomes: Tuple[str, ...] = Field(..., min_length=1, description="Biome tags the species accepts.")
    diet: DietClass = DietClass.NON_CARNIVORE

    @property
    def is_carnivore(self) -> bool:
        return self.diet is DietClass.CARNIVORE


class SpeciesCatalog(BaseModel):
    """Collection wrapper for the species the zoo handles."""

    model_config = ConfigDict(frozen=True)

    species: Tuple[Species, ...]

    @model_validator(mode="after")
    def _unique_ids(self) -> "SpeciesCatalog":
        ids = self.list_ids()
        duplicates = sorted({species_id for species_id in ids if ids.count(species_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate species ids: {', '.join(duplicates)}")
        return self

    def __contains__(self, species_id: object) -> bool:
        return any(species.id == species_id for species in self.species)

    def lookup(self, species_id: str) -> Species:
        for species in self.species:
            if species.id == species_id:
                return species
        raise UnknownSpecies(species_id)

    def list_ids(self) -> List[str]:
        return [species.id for species in self.species]
