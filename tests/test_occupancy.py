import pytest

from zoo.models import Enclosure, EnclosureRegistry, Occupant, SpeciesCatalog
from zoo.services.occupancy import OccupancyCalculator


@pytest.fixture
def calculator(catalog: SpeciesCatalog) -> OccupancyCalculator:
    return OccupancyCalculator(catalog)


@pytest.mark.parametrize(
    "enclosure_id, expected",
    [(1, 3), (2, 0), (3, 2), (4, 0), (5, 3)],
)
def test_reference_enclosures(
    calculator: OccupancyCalculator, registry: EnclosureRegistry, enclosure_id: int, expected: int
) -> None:
    assert calculator.occupied_space(registry.get(enclosure_id)) == expected


def test_free_space_is_capacity_minus_occupied(
    calculator: OccupancyCalculator, registry: EnclosureRegistry
) -> None:
    assert calculator.free_space(registry.get(1)) == 7
    assert calculator.free_space(registry.get(5)) == 6


def test_mixed_species_add_one_unit(calculator: OccupancyCalculator) -> None:
    enclosure = Enclosure(
        id=7,
        biome="savanna",
        capacity=20,
        occupants=[Occupant(species_id="monkey", count=2), Occupant(species_id="gazelle", count=1)],
    )
    assert calculator.occupied_space(enclosure) == 2 + 2 + 1


def test_mixed_species_overhead_is_flat(calculator: OccupancyCalculator) -> None:
    enclosure = Enclosure(
        id=7,
        biome="savanna",
        capacity=20,
        occupants=[
            Occupant(species_id="monkey", count=1),
            Occupant(species_id="gazelle", count=1),
            Occupant(species_id="hippopotamus", count=1),
        ],
    )
    assert calculator.occupied_space(enclosure) == 1 + 2 + 4 + 1


def test_repeated_entries_of_one_species_are_not_mixed(calculator: OccupancyCalculator) -> None:
    enclosure = Enclosure(
        id=7,
        biome="forest",
        capacity=20,
        occupants=[Occupant(species_id="monkey", count=1), Occupant(species_id="monkey", count=2)],
    )
    assert calculator.occupied_space(enclosure) == 3
