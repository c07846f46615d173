"""YAML document schemas for the files under the rules root."""

from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from pf_ruler.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)
from pf_ruler.utils import read_yaml


TECH_STACK_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "tech_stack.yaml",
    "type": "object",
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "config.yaml",
    "type": "object",
}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def load_yaml_mapping(path: Path, schema: dict[str, Any]) -> dict[str, Any]:
    """Read a required YAML file and check it against ``schema``.

    An empty document is treated as an empty mapping.
    """
    if not path.is_file():
        raise MissingConfigFileError(path)
    try:
        payload = read_yaml(path)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise InvalidYamlFormatError(path, str(exc)) from exc
    if payload is None:
        payload = {}

    error = next(iter(Draft202012Validator(schema).iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, format_schema_error(error))
    return payload
