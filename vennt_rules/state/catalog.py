"""
Read-only loading of catalog and character files.

Catalog exports and character snapshots may be JSON or YAML. Loading
validates into the schema models; anything unreadable raises CatalogError
naming the file.
"""

import json
import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .schema import CollectedEntity, PathsAndAbilities

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

ModelT = TypeVar("ModelT", bound=BaseModel)


class CatalogError(Exception):
    """A catalog or character file could not be read."""
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load {path}: {reason}")


def read_data(path: Path | str) -> dict:
    """Parse a JSON or YAML file into a dict, choosing the parser by suffix."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(path, str(e)) from e

    if not isinstance(data, dict):
        raise CatalogError(path, "top level must be a mapping")
    return data


def _load(path: Path | str, model: type[ModelT]) -> ModelT:
    path = Path(path)
    data = read_data(path)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise CatalogError(path, f"{e.error_count()} validation error(s)\n{e}") from e


def load_catalog(path: Path | str) -> PathsAndAbilities:
    """Load the published catalog of paths and abilities."""
    catalog = _load(path, PathsAndAbilities)
    logger.info(f"Loaded catalog {path}: {len(catalog.abilities)} abilities, {len(catalog.paths)} paths")
    return catalog


def load_character(path: Path | str) -> CollectedEntity:
    """Load a collected character snapshot."""
    character = _load(path, CollectedEntity)
    logger.info(
        f"Loaded character {character.entity.name}: {len(character.abilities)} abilities"
    )
    if not character.entity.attributes:
        logger.warning(f"Character {character.entity.name} has no attributes; costs won't be gated")
    return character
