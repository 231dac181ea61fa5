"""Domain models for the enclosure viability service."""

from .enclosure import Enclosure, EnclosureRegistry, Occupant
from .species import DietClass, Species, SpeciesCatalog

__all__ = [
    "DietClass",
    "Species",
    "SpeciesCatalog",
    "Occupant",
    "Enclosure",
    "EnclosureRegistry",
]
