"""Export JSON schemas for the trip form, model draft, and itinerary."""

import json
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from pydantic import BaseModel  # noqa: E402

from tripgen.models import DraftItinerary, Itinerary, TravelRequest  # noqa: E402

SCHEMA_MODELS: dict[str, type[BaseModel]] = {
    "TravelRequest": TravelRequest,
    "DraftItinerary": DraftItinerary,
    "Itinerary": Itinerary,
}


def export_schemas(schemas_dir: Path) -> list[Path]:
    """Write one ``<Name>.schema.json`` per model; itinerary keys use camelCase aliases."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, model in SCHEMA_MODELS.items():
        schema = model.model_json_schema(by_alias=True, mode="serialization")
        path = schemas_dir / f"{name}.schema.json"
        with open(path, "w") as f:
            json.dump(schema, f, indent=2)
        written.append(path)
    return written


def main() -> None:
    """Export schemas to docs/schemas/."""
    for path in export_schemas(Path("docs/schemas")):
        print(f"Exported {path.stem} to {path}")


if __name__ == "__main__":
    main()
