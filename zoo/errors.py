"""Error taxonomy for enclosure viability analysis."""
from __future__ import annotations


class ViabilityError(Exception):
    """Base class for the outcomes that end an analysis without results."""

    code = "viability_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownSpecies(ViabilityError):
    code = "unknown_species"

    def __init__(self, species_id: str):
        super().__init__(f"Invalid animal: '{species_id}'")
        self.species_id = species_id


class InvalidQuantity(ViabilityError):
    code = "invalid_quantity"

    def __init__(self, quantity: int):
        super().__init__(f"Invalid quantity: {quantity}")
        self.quantity = quantity


class NoViableEnclosure(ViabilityError):
    code = "no_viable_enclosure"

    def __init__(self, species_id: str, quantity: int):
        super().__init__("No viable enclosure")
        self.species_id = species_id
        self.quantity = quantity


class ReferenceDataError(Exception):
    """Raised when species or enclosure reference data cannot be loaded."""
