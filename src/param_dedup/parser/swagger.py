"""Swagger 2.0 document loading and dumping."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from param_dedup.errors import DocumentLoadError
from param_dedup.model.base import SwaggerDoc
from param_dedup.parser.detect import format_of


def load_document(file_path: Path) -> SwaggerDoc:
    """Parse a Swagger 2.0 YAML or JSON file into a SwaggerDoc."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"{file_path}: not valid YAML/JSON: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(f"{file_path}: top level must be a mapping")
    fmt = format_of(data)
    if fmt == "openapi":
        raise DocumentLoadError(f"{file_path}: OpenAPI 3.x is not supported, expected Swagger 2.0")
    if fmt != "swagger":
        raise DocumentLoadError(f"{file_path}: missing 'swagger' version field")

    try:
        return SwaggerDoc.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(f"{file_path}: {e}") from e


def dump_document(doc: SwaggerDoc, fmt: str = "json") -> str:
    """Render a document as 'json' or 'yaml' text."""
    data = doc.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def output_format_for(file_path: Path) -> str:
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"
