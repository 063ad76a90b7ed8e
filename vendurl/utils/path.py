"""
Utilities for handling destination directories and output file paths.
"""

import os
from pathlib import Path

from pathvalidate import ValidationError, validate_filepath


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def resolve_destination(project_dir: Path, destination: str) -> Path:
    """
    Joins a configured destination onto the project directory.

    Leading separators are dropped, so "/" and "/vendor" stay inside the
    project, and "~" is taken literally.

    Raises:
        ValueError: If the destination climbs out of the project directory.
    """
    target = project_dir / destination.lstrip("/\\")
    normalized = Path(os.path.abspath(target))
    if not normalized.is_relative_to(os.path.abspath(project_dir)):
        raise ValueError(
            f'Destination "{destination}" points outside of "{project_dir}".'
        )
    return target


def output_path(directory: Path, filename: str) -> Path:
    """
    Builds the path a vendored file is written to.

    Raises:
        ValueError: If the filename is not a valid file path or would land
        outside of `directory`.
    """
    try:
        validate_filepath(filename, platform="auto")
    except ValidationError as e:
        raise ValueError(f"Invalid filename '{filename}': {e}") from e

    target = directory / filename
    if not target.resolve().is_relative_to(directory.resolve()):
        raise ValueError(f"Filename '{filename}' points outside of '{directory}'.")
    return target
