"""Export JSON schemas for TripData and the generator item contract."""

import json
from pathlib import Path

from tripmate.app.models import GeneratedItem, TripData


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # TripData schema
    trip_schema = TripData.model_json_schema()
    trip_path = schemas_dir / "TripData.schema.json"
    with open(trip_path, "w") as f:
        json.dump(trip_schema, f, indent=2)
    print(f"Exported TripData schema to {trip_path}")

    # Generator wire contract, camelCase as the generator sends it
    generated_schema = GeneratedItem.model_json_schema(by_alias=True)
    generated_path = schemas_dir / "GeneratedItem.schema.json"
    with open(generated_path, "w") as f:
        json.dump(generated_schema, f, indent=2)
    print(f"Exported GeneratedItem schema to {generated_path}")


if __name__ == "__main__":
    main()
