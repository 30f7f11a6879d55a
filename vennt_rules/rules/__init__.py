"""
Ability rules as pure functions.

Separates logic from data models for easier testing.
"""

from .activation import generate_ability_activation
from .cost import (
    actual_xp_cost,
    ability_uses_cost_adjust,
    default_xp_cost,
    gift_in_ability_expedited,
)
from .criteria import ability_pass_criteria_check, is_spell
from .sorting import ability_names, sort_abilities, sort_paths
from .usability import can_use_ability, merge_cost_maps
from .versions import diff_exists_between_ability_fields, find_new_ability_version

__all__ = [
    # Criteria
    "ability_pass_criteria_check",
    "is_spell",
    # Cost
    "default_xp_cost",
    "gift_in_ability_expedited",
    "ability_uses_cost_adjust",
    "actual_xp_cost",
    # Usability
    "merge_cost_maps",
    "can_use_ability",
    # Sorting
    "sort_paths",
    "sort_abilities",
    "ability_names",
    # Versions
    "diff_exists_between_ability_fields",
    "find_new_ability_version",
    # Activation
    "generate_ability_activation",
]
