"""
JSON Schema generator for the profile model.

The profile schema is the logical schema of saved planner state and of share
tokens, so it is published for front ends that build profiles.
"""

import json
from pathlib import Path
from typing import Any, Dict

from .profile import Profile


def generate_profile_schema() -> Dict[str, Any]:
    """Generate the JSON schema for the Profile model, using wire aliases."""
    return Profile.model_json_schema(by_alias=True)


def save_profile_schema(output_path: Path) -> None:
    """Save the profile JSON schema to a file."""
    schema = generate_profile_schema()

    schema.update(
        {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "title": "Net Worth Planner Profile Schema v1",
            "description": "Base financial profile with yearly adjustments and events",
        }
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(schema, f, indent=2)


if __name__ == "__main__":
    schema_path = Path(__file__).parent.parent.parent / "schema" / "profile_v1.json"
    save_profile_schema(schema_path)
    print(f"Schema saved to {schema_path}")
