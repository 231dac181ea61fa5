"""Deterministic viability analysis for placing a species group in an enclosure."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, model_validator

from zoo.errors import InvalidQuantity, NoViableEnclosure, ReferenceDataError, ViabilityError
from zoo.models import Enclosure, EnclosureRegistry, Species, SpeciesCatalog
from zoo.services.occupancy import OccupancyCalculator
from zoo.services.rules import biome_ok, capacity_ok, comfort_ok, diet_ok

logger = logging.getLogger(__name__)


@dataclass
class RuleCheck:
    name: str
    passed: bool
    detail: str


@dataclass
class EnclosureAssessment:
    enclosure: Enclosure
    free_space: int
    checks: List[RuleCheck]

    @property
    def viable(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failed_checks(self) -> List[RuleCheck]:
        return [check for check in self.checks if not check.passed]

    @property
    def failed_rules(self) -> List[str]:
        return [check.name for check in self.failed_checks]


@dataclass(frozen=True)
class ResultLine:
    enclosure_id: int
    free_space: int
    capacity: int

    def format(self) -> str:
        return f"Enclosure {self.enclosure_id} (free space: {self.free_space} total: {self.capacity})"

    def __str__(self) -> str:
        return self.format()


class ErrorDetail(BaseModel):
    code: str
    message: str


class AnalysisResult(BaseModel):
    """Either a non-empty list of viable enclosures or a single error, never both."""

    viable_enclosures: Optional[List[str]] = None
    error: Optional[ErrorDetail] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "AnalysisResult":
        if (self.viable_enclosures is None) == (self.error is None):
            raise ValueError("AnalysisResult needs exactly one of viable_enclosures or error")
        if self.viable_enclosures is not None and not self.viable_enclosures:
            raise ValueError("viable_enclosures must not be empty")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_error(cls, exc: ViabilityError) -> "AnalysisResult":
        return cls(error=ErrorDetail(code=exc.code, message=exc.message))


def ensure_catalogued(catalog: SpeciesCatalog, registry: EnclosureRegistry) -> None:
    """Raise ReferenceDataError if any occupant's species is missing from the catalog."""
    for enclosure in registry.all():
        unknown = sorted(species_id for species_id in enclosure.species_ids() if species_id not in catalog)
        if unknown:
            raise ReferenceDataError(
                f"Enclosure {enclosure.id} houses species missing from the catalog: {', '.join(unknown)}"
            )


class ViabilityEngine:
    """Reports which enclosures can take an additional group of one species.

    The catalog and registry are treated as a read-only snapshot; nothing is
    mutated, so repeated calls with the same inputs give the same answer.
    """

    def __init__(self, catalog: SpeciesCatalog, registry: EnclosureRegistry):
        ensure_catalogued(catalog, registry)
        self.catalog = catalog
        self.registry = registry
        self.occupancy = OccupancyCalculator(catalog)

    def assess(self, enclosure: Enclosure, species: Species, quantity: int) -> EnclosureAssessment:
        """Run every rule against one enclosure and keep the individual verdicts."""
        occupied = self.occupancy.occupied_space(enclosure)
        free_space = enclosure.capacity - occupied
        required = species.unit_size * quantity

        checks = [
            RuleCheck(
                name="biome",
                passed=biome_ok(enclosure, species),
                detail=f"enclosure={enclosure.biome}, accepted={'|'.join(species.biomes)}",
            ),
            RuleCheck(
                name="diet",
                passed=diet_ok(enclosure, species),
                detail=f"diet={species.diet.value}, occupants={'|'.join(sorted(enclosure.species_ids())) or '-'}",
            ),
            RuleCheck(
                name="capacity",
                passed=capacity_ok(free_space, species.unit_size, quantity),
                detail=f"free={free_space}, required={required}, occupied={occupied}/{enclosure.capacity}",
            ),
            RuleCheck(
                name="comfort",
                passed=comfort_ok(enclosure, species.id, quantity),
                detail=f"quantity={quantity}, occupants={len(enclosure.occupants)}",
            ),
        ]
        return EnclosureAssessment(enclosure=enclosure, free_space=free_space, checks=checks)

    def evaluate(self, species_id: str, quantity: int) -> List[ResultLine]:
        """Return viable enclosures sorted by id, raising a ViabilityError otherwise."""
        species = self.catalog.lookup(species_id)
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        results: List[ResultLine] = []
        for enclosure in self.registry.all():
            assessment = self.assess(enclosure, species, quantity)
            if not assessment.viable:
                logger.debug(
                    "Enclosure %d rejected for %d x %s: %s",
                    enclosure.id,
                    quantity,
                    species_id,
                    "; ".join(f"{check.name} ({check.detail})" for check in assessment.failed_checks),
                )
                continue
            results.append(
                ResultLine(
                    enclosure_id=enclosure.id,
                    free_space=assessment.free_space - species.unit_size * quantity,
                    capacity=enclosure.capacity,
                )
            )

        if not results:
            raise NoViableEnclosure(species_id, quantity)

        results.sort(key=lambda line: line.enclosure_id)
        return results

    def analyze(self, species_id: str, quantity: int) -> AnalysisResult:
        """Public entry point: the outcome of one request as a result value."""
        try:
            lines = self.evaluate(species_id, quantity)
        except ViabilityError as exc:
            logger.info("Analysis for %d x %s failed: %s", quantity, species_id, exc.message)
            return AnalysisResult.from_error(exc)

        logger.info("Analysis for %d x %s found %d viable enclosure(s)", quantity, species_id, len(lines))
        return AnalysisResult(viable_enclosures=[line.format() for line in lines])
