"""
Loads and validates the `vendurl` section of the project's package.json.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vendurl.exceptions import ConfigurationError
from vendurl.models.config import VendorConfig

log = logging.getLogger(__name__)

PROJECT_FILE = "package.json"
CONFIG_SECTION = "vendurl"


class ConfigManager:
    """Handles reading the manifest from a project directory."""

    def __init__(self, project_dir: Path):
        self.project_dir = project_dir
        self.config_file_path = project_dir / PROJECT_FILE

    def load_config(self) -> VendorConfig:
        """
        Loads the manifest from package.json and validates it.

        Returns:
            A validated VendorConfig object with defaults applied.

        Raises:
            ConfigurationError: If the file is missing, unparsable, or the
            `vendurl` section is absent or invalid.
        """
        project = self._read_project_file()
        name = project.get("name")
        section = project.get(CONFIG_SECTION)

        if not isinstance(section, dict) or not isinstance(
            section.get("packages"), dict
        ):
            label = name if isinstance(name, str) else self.project_dir.name
            raise ConfigurationError(
                f'"{label}" is missing "{CONFIG_SECTION}" in {PROJECT_FILE} '
                f'(expected an object with a "packages" mapping).'
            )

        try:
            config = VendorConfig.model_validate(
                {**section, "name": name if isinstance(name, str) else None}
            )
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

        log.debug(
            f"Loaded {len(config.packages)} package(s) from {self.config_file_path}"
        )
        return config

    def _read_project_file(self) -> dict[str, Any]:
        """Reads and parses package.json into a dictionary."""
        if not self.config_file_path.is_file():
            raise ConfigurationError(
                f"Project file not found at '{self.config_file_path}'."
            )

        try:
            with open(self.config_file_path, encoding="utf-8") as f:
                project = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Error parsing {self.config_file_path}: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Could not read {self.config_file_path}: {e}"
            ) from e

        if not isinstance(project, dict):
            raise ConfigurationError(
                f"{self.config_file_path} must contain a JSON object."
            )
        return project
