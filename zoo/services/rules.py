"""Placement rules applied to every candidate enclosure.

Each rule is a pure predicate. An enclosure is viable for a request only when
all four hold; the order in which they run does not change the outcome.
"""
from __future__ import annotations

from zoo.models import Enclosure, Species

SAVANNA = "savanna"
SAVANNA_RIVER = "savanna-river"

HIPPOPOTAMUS = "hippopotamus"
MONKEY = "monkey"
MONKEY_MIN_FOUNDING_GROUP = 2


def biome_ok(enclosure: Enclosure, species: Species) -> bool:
    """Exact tag match, or any savanna enclosure for a species listing savanna-river.

    Compound tags are never split: a 'savanna-river' enclosure does not
    satisfy a species that only accepts 'savanna' or 'river'.
    """
    if enclosure.biome in species.biomes:
        return True
    return SAVANNA in enclosure.biome and SAVANNA_RIVER in species.biomes


def diet_ok(enclosure: Enclosure, species: Species) -> bool:
    """Carnivores only join enclosures holding nothing but their own kind.

    Only the incoming species is inspected; a non-carnivore is never blocked
    by carnivores already present.
    """
    if not species.is_carnivore:
        return True
    return all(occupant.species_id == species.id for occupant in enclosure.occupants)


def capacity_ok(free_space: int, unit_size: int, quantity: int) -> bool:
    return free_space >= unit_size * quantity


def comfort_ok(enclosure: Enclosure, species_id: str, quantity: int) -> bool:
    # Hippopotamuses share space only in the savanna-river habitat.
    if (enclosure.houses(HIPPOPOTAMUS) or species_id == HIPPOPOTAMUS) and enclosure.biome != SAVANNA_RIVER:
        return False

    # A lone monkey cannot found a new group.
    if species_id == MONKEY and not enclosure.occupants and quantity < MONKEY_MIN_FOUNDING_GROUP:
        return False

    return True
