"""Auto-detect the API documentation format."""

from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of an API specification file.

    Returns: 'swagger' (2.0), 'openapi' (3.x), or 'unknown'.
    JSON files are handled by the YAML loader.
    """
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return "unknown"
    return format_of(data)


def format_of(data: object) -> str:
    """Classify an already parsed document the same way as detect_format."""
    if isinstance(data, dict):
        if "swagger" in data:
            return "swagger"
        if "openapi" in data:
            return "openapi"
    return "unknown"
