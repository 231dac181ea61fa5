"""Run the reference placement requests against the packaged zoo layout."""
import logging

from zoo.config import get_settings
from zoo.services.data_loader import build_engine

EXAMPLE_REQUESTS = [
    ("unicorn", 1),
    ("monkey", 0),
    ("monkey", 2),
    ("crocodile", 1),
]


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s %(message)s")

    engine = build_engine()
    for species_id, quantity in EXAMPLE_REQUESTS:
        result = engine.analyze(species_id, quantity)
        print(f"{species_id} x {quantity}: {result.model_dump_json(exclude_none=True)}")


if __name__ == "__main__":
    main()
