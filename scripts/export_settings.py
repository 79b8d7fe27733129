"""Export the environment variable reference for the ingest API as JSON.

Usage:
    python scripts/export_settings.py [output_path]

Writes docs/env-vars.json by default.
"""

import json
import sys
from pathlib import Path
from typing import Type

from pydantic import AliasChoices, SecretStr
from pydantic_core import PydanticUndefined
from pydantic_settings import BaseSettings

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from infrastructure.settings import (  # noqa: E402
    AppSettings,
    DatabaseSettings,
    SecuritySettings,
)


def env_var_names(name: str, field) -> list[str]:
    """Environment variable names that populate ``field``."""
    alias = field.validation_alias
    if isinstance(alias, AliasChoices):
        return [str(choice).upper() for choice in alias.choices]
    if isinstance(alias, str):
        return [alias.upper()]
    return [name.upper()]


def get_model_metadata(settings_class: Type[BaseSettings]):
    prefix = settings_class.model_config.get("env_prefix", "")
    properties = []

    for name, field in settings_class.model_fields.items():
        type_name = getattr(field.annotation, "__name__", str(field.annotation))
        default = field.get_default()

        # Required means no default at all; an explicit None default is optional
        is_required = default is PydanticUndefined

        if isinstance(default, SecretStr):
            display_default = "********"
        elif is_required or default is None:
            display_default = None
        elif isinstance(default, (bool, int)):
            display_default = default
        else:
            display_default = str(default)

        properties.append(
            {
                "env_vars": [f"{prefix}{var}" for var in env_var_names(name, field)],
                "type": "Secret" if "Secret" in type_name else type_name,
                "default": display_default,
                "required": is_required,
                "description": field.description or "",
            }
        )

    return {
        "class_name": settings_class.__name__,
        "prefix": prefix,
        "doc": settings_class.__doc__ or "",
        "properties": properties,
    }


def export_settings(output_path: Path) -> None:
    classes = [DatabaseSettings, SecuritySettings, AppSettings]

    data = {cls.__name__: get_model_metadata(cls) for cls in classes}

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Exported settings to {output_path}")


if __name__ == "__main__":
    target = (
        Path(sys.argv[1])
        if len(sys.argv) > 1
        else root_path / "docs" / "env-vars.json"
    )
    export_settings(target)
