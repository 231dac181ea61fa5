import pytest

from zoo.models import DietClass, Enclosure, EnclosureRegistry, Occupant, Species, SpeciesCatalog
from zoo.services.viability import ViabilityEngine


@pytest.fixture
def catalog() -> SpeciesCatalog:
    carnivore = DietClass.CARNIVORE
    return SpeciesCatalog(
        species=[
            Species(id="lion", unit_size=3, biomes=["savanna"], diet=carnivore),
            Species(id="leopard", unit_size=2, biomes=["savanna"], diet=carnivore),
            Species(id="crocodile", unit_size=3, biomes=["river"], diet=carnivore),
            Species(id="monkey", unit_size=1, biomes=["savanna", "forest"]),
            Species(id="gazelle", unit_size=2, biomes=["savanna"]),
            Species(id="hippopotamus", unit_size=4, biomes=["savanna", "river"]),
        ]
    )


@pytest.fixture
def registry() -> EnclosureRegistry:
    return EnclosureRegistry(
        enclosures=[
            Enclosure(id=1, biome="savanna", capacity=10, occupants=[Occupant(species_id="monkey", count=3)]),
            Enclosure(id=2, biome="forest", capacity=5),
            Enclosure(id=3, biome="savanna-river", capacity=7, occupants=[Occupant(species_id="gazelle", count=1)]),
            Enclosure(id=4, biome="river", capacity=8),
            Enclosure(id=5, biome="savanna", capacity=9, occupants=[Occupant(species_id="lion", count=1)]),
        ]
    )


@pytest.fixture
def engine(catalog: SpeciesCatalog, registry: EnclosureRegistry) -> ViabilityEngine:
    return ViabilityEngine(catalog, registry)
