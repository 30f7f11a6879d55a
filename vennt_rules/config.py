"""
Rules configuration.

Holds the fixed vocabularies the rules depend on. Defaults can be
overridden from a JSON file, e.g. to add house-ruled free abilities.
"""

import json
import logging
from pathlib import Path
from typing import TypedDict

logger = logging.getLogger(__name__)


class RulesConfig(TypedDict, total=False):
    """Rules configuration."""
    spendable_resources: list[str]  # Resources checked by can_use_ability
    free_abilities: list[str]  # Abilities that never cost XP
    magic_path_markers: list[str]  # Path substrings that mark spellcasting paths
    ability_fields: list[str]  # Every known custom field name
    player_specific_fields: list[str]  # Never replaced by catalog updates
    path_sentinel_cost: int  # Rank cost for paths with no parsable purchase


DEFAULT_CONFIG: RulesConfig = {
    "spendable_resources": ["hp", "mp", "vim", "hero"],
    "free_abilities": ["Alchemist's Training"],  # Free with Tinker's Training
    "magic_path_markers": ["Arcana", "Spellcaster", "Magician", "Wizard"],
    "ability_fields": [
        "activation",
        "build_dc",
        "build_time",
        "cast_dl",
        "cost",
        "damage",
        "dc",
        "expedited",
        "flavor",
        "info",
        "keys",
        "mp_cost",
        "not_req",
        "optional",
        "partial_key",
        "path",
        "prereq",
        "purchase",
        "range",
        "repeatable",
        "req",
        "times_taken",
        "unlocks",
    ],
    "player_specific_fields": ["keys", "times_taken"],
    "path_sentinel_cost": 5000,  # Arbitrary amount that costs a lot
}


def get_config(config: RulesConfig | None = None) -> RulesConfig:
    """Return config with defaults filled in for any missing keys."""
    merged = DEFAULT_CONFIG.copy()
    if config:
        merged.update(config)
    return merged


def load_config(path: Path | str) -> RulesConfig:
    """Load config from file, or return defaults if not found."""
    path = Path(path)

    if not path.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
        # Merge with defaults to handle missing keys
        config = DEFAULT_CONFIG.copy()
        config.update(saved)
        return config
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable rules config {path}: {e}")
        return DEFAULT_CONFIG.copy()


def save_config(config: RulesConfig, path: Path | str) -> bool:
    """Save config to file. Returns True on success."""
    path = Path(path)

    # Ensure directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except IOError:
        return False
