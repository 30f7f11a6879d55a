"""
Catalog drift detection for owned abilities.

When the catalog publishes a new version of an ability, a character's
stored copy can be refreshed. Player-specific fields (chosen keys, times
taken) never count as drift and are never overwritten.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import RulesConfig, get_config
from ..state.schema import AbilityFields

if TYPE_CHECKING:
    from ..state.schema import EntityAbility, PathsAndAbilities

logger = logging.getLogger(__name__)


def ability_updatable_fields(config: RulesConfig | None = None) -> list[str]:
    """Custom fields a catalog update may change."""
    config = get_config(config)
    excluded = set(config["player_specific_fields"])
    return [field for field in config["ability_fields"] if field not in excluded]


def _dump_fields(ability: "EntityAbility") -> dict:
    return ability.custom_fields.model_dump() if ability.custom_fields else {}


def values_equal(a, b) -> bool:
    """
    Deep structural equality that keeps flags and amounts apart.

    Plain ``==`` treats True as 1; a cost that turns from a flag into an
    amount is a real change. 1 and 1.0 are still the same number.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(values_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def diff_exists_between_ability_fields(
    a: "EntityAbility",
    b: "EntityAbility",
    config: RulesConfig | None = None,
) -> bool:
    """Whether two versions of an ability differ in anything a catalog update touches."""
    if a.name != b.name:
        return True

    if a.custom_fields is not None or b.custom_fields is not None:
        a_fields = _dump_fields(a)
        b_fields = _dump_fields(b)
        for field in ability_updatable_fields(config):
            if not values_equal(a_fields.get(field), b_fields.get(field)):
                logger.debug(f"{a.name}: field '{field}' differs from catalog")
                return True

    if a.uses is None and b.uses is None:
        return False
    a_uses = a.uses.model_dump() if a.uses else None
    b_uses = b.uses.model_dump() if b.uses else None
    return not values_equal(a_uses, b_uses)


def find_new_ability_version(
    ability: "EntityAbility",
    catalog: "PathsAndAbilities",
    config: RulesConfig | None = None,
) -> "EntityAbility | None":
    """
    Build an updated copy of an owned ability if the catalog version changed.

    The update keeps the owned ability's identity, takes the catalog's
    effect and uses, and layers the owned custom fields over the catalog's
    so player customizations survive.

    Returns:
        A new ability, or None if the ability isn't in the catalog or
        nothing changed
    """
    found = catalog.find_ability(ability.name)
    if found is None:
        return None
    if not diff_exists_between_ability_fields(ability, found, config):
        return None

    custom_fields = {}
    if found.custom_fields is not None:
        custom_fields.update(found.custom_fields.model_dump(exclude_unset=True))
    if ability.custom_fields is not None:
        custom_fields.update(ability.custom_fields.model_dump(exclude_unset=True))

    logger.debug(f"New catalog version available for {ability.name}")
    return ability.model_copy(
        update={
            "effect": found.effect,
            "uses": found.uses.model_copy(deep=True) if found.uses else None,
            "custom_fields": AbilityFields.model_validate(custom_fields),
        },
        deep=True,
    )
