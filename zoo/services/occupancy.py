"""Space accounting for enclosure occupants."""
from __future__ import annotations

from zoo.models import Enclosure, SpeciesCatalog

# Flat cost of keeping more than one species in the same enclosure.
MIXED_SPECIES_OVERHEAD = 1


class OccupancyCalculator:
    """Converts an enclosure's occupant list into consumed space."""

    def __init__(self, catalog: SpeciesCatalog):
        self.catalog = catalog

    def occupied_space(self, enclosure: Enclosure) -> int:
        space = sum(
            self.catalog.lookup(occupant.species_id).unit_size * occupant.count
            for occupant in enclosure.occupants
        )
        if len(enclosure.species_ids()) > 1:
            space += MIXED_SPECIES_OVERHEAD
        return space

    def free_space(self, enclosure: Enclosure) -> int:
        return enclosure.capacity - self.occupied_space(enclosure)
