"""Data loading utilities for the species catalog and enclosure registry."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from zoo.config import Settings, get_settings
from zoo.errors import ReferenceDataError
from zoo.models import EnclosureRegistry, SpeciesCatalog
from zoo.services.viability import ViabilityEngine, ensure_catalogued

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise ReferenceDataError(f"Required data file missing: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_species_catalog(path: Path) -> SpeciesCatalog:
    payload = _load_json(path)
    try:
        catalog = SpeciesCatalog.model_validate(payload)
    except ValidationError as exc:
        raise ReferenceDataError(f"Invalid species catalog {path}: {exc}") from exc
    logger.info("Loaded %d species from %s", len(catalog.species), path)
    return catalog


@lru_cache(1)
def load_species_catalog() -> SpeciesCatalog:
    return read_species_catalog(get_settings().species_catalog_path)


def load_enclosure_registry(catalog: SpeciesCatalog, path: Optional[Path] = None) -> EnclosureRegistry:
    """Read the registry and check every occupant refers to a catalogued species."""

    path = path or get_settings().enclosure_registry_path
    payload = _load_json(path)
    try:
        registry = EnclosureRegistry.model_validate(payload)
    except ValidationError as exc:
        raise ReferenceDataError(f"Invalid enclosure registry {path}: {exc}") from exc

    ensure_catalogued(catalog, registry)
    logger.info("Loaded %d enclosures from %s", len(registry), path)
    return registry


def build_engine(settings: Optional[Settings] = None) -> ViabilityEngine:
    if settings is None:
        catalog = load_species_catalog()
        registry = load_enclosure_registry(catalog)
    else:
        catalog = read_species_catalog(settings.species_catalog_path)
        registry = load_enclosure_registry(catalog, settings.enclosure_registry_path)
    return ViabilityEngine(catalog, registry)
