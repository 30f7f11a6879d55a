"""
Use-criteria evaluation as pure functions.

A criteria tree decides whether a benefit granted by one ability (the
"uses" ability) applies to another ability. Evaluation never raises:
unknown node types, operators and special names all evaluate false.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel

from ..config import RulesConfig, get_config
from ..state.schema import (
    UseCriteriaAttr,
    UseCriteriaBase,
    UseCriteriaField,
    UseCriteriaKey,
    UseCriteriaSpecial,
)
from .numbers import format_number, parse_int

if TYPE_CHECKING:
    from ..state.schema import AttributeMap, EntityAbility, UseCriteria


Comparator = Callable[[str, str], bool]


def _equals(field1: str, field2: str) -> bool:
    return field1 == field2


def _gte(field1: str, field2: str) -> bool:
    left = parse_int(field1)
    right = parse_int(field2)
    if left is None or right is None:
        return False
    return left >= right


def _never(field1: str, field2: str) -> bool:
    return False


COMPARATORS: dict[str, Comparator] = {
    "equals": _equals,
    "gte": _gte,
}


def criteria_field_operator(operator: str) -> Comparator:
    """Look up the comparator for an operator name. Unknown operators never match."""
    return COMPARATORS.get(operator, _never)


def _lookup_key(uses_ability: "EntityAbility", key: str) -> str | None:
    fields = uses_ability.custom_fields
    if fields is None or not fields.keys:
        return None
    # An empty string counts as unset
    return fields.keys.get(key) or None


def _step(value: Any, key: str) -> Any:
    if isinstance(value, BaseModel):
        if key in type(value).model_fields:
            return getattr(value, key)
        return (value.model_extra or {}).get(key)
    return value.get(key)


def resolve_field_path(ability: "EntityAbility", path: list[str]) -> Any:
    """
    Walk a field path down from an ability.

    Returns None when the walk hits something that isn't a model or mapping
    before the path is exhausted.
    """
    value: Any = ability
    for key in path:
        if not isinstance(value, (BaseModel, dict)):
            return None
        value = _step(value, key)
    return value


def _check_base(
    ability: "EntityAbility | None",
    criteria: UseCriteriaBase,
    uses_ability: "EntityAbility",
    attrs: "AttributeMap",
    config: RulesConfig | None,
) -> bool:
    results = (
        ability_pass_criteria_check(ability, test, uses_ability, attrs, config)
        for test in criteria.tests
    )
    if criteria.operator == "every":
        return all(results)
    if criteria.operator == "some":
        return any(results)
    return False


def _check_field(
    ability: "EntityAbility | None",
    criteria: UseCriteriaField,
    uses_ability: "EntityAbility",
) -> bool:
    # No target ability: the benefit is being checked on its own
    if ability is None:
        return True
    key_value = _lookup_key(uses_ability, criteria.key)
    if key_value is None:
        return False
    field = resolve_field_path(ability, criteria.path)
    if not isinstance(field, str):
        return False
    return criteria_field_operator(criteria.operator)(key_value, field)


def _check_key(uses_ability: "EntityAbility", criteria: UseCriteriaKey) -> bool:
    key_value = _lookup_key(uses_ability, criteria.key)
    if key_value is None:
        return False
    return criteria_field_operator(criteria.operator)(key_value, criteria.value)


def _check_attr(criteria: UseCriteriaAttr, attrs: "AttributeMap") -> bool:
    found = attrs.get(criteria.attr)
    if found is None:
        return False
    return criteria_field_operator(criteria.operator)(format_number(found.val), criteria.value)


def is_spell(ability: "EntityAbility", config: RulesConfig | None = None) -> bool:
    """
    Whether an ability counts as a spell.

    Abilities with a casting DL or MP cost table are spells outright.
    Otherwise it must sit on a magic path and cost MP to use.
    """
    fields = ability.custom_fields
    if fields is None:
        return False
    # An MP cost table marks a spell even when empty
    if fields.cast_dl or isinstance(fields.mp_cost, list) or fields.mp_cost:
        return True
    if fields.path:
        markers = get_config(config)["magic_path_markers"]
        magic_path = any(marker in fields.path for marker in markers)
        return bool(magic_path and fields.cost and fields.cost.get("mp"))
    return False


SPECIAL_CHECKS: dict[str, Callable[["EntityAbility", RulesConfig | None], bool]] = {
    "isSpell": is_spell,
}


def _check_special(
    ability: "EntityAbility | None",
    criteria: UseCriteriaSpecial,
    config: RulesConfig | None,
) -> bool:
    if ability is None:
        return True
    check = SPECIAL_CHECKS.get(criteria.name)
    if check is None:
        return False
    return check(ability, config)


def ability_pass_criteria_check(
    ability: "EntityAbility | None",
    criteria: "UseCriteria",
    uses_ability: "EntityAbility",
    attrs: "AttributeMap",
    config: RulesConfig | None = None,
) -> bool:
    """
    Evaluate a criteria tree.

    Args:
        ability: The ability the benefit would apply to, or None to check
            the benefit independent of any target
        criteria: Root of the criteria tree
        uses_ability: The ability granting the benefit (source of ``keys``)
        attrs: The character's attribute snapshot
        config: Optional rules config override

    Returns:
        True if the criteria pass. Never raises for unrecognized nodes.
    """
    if isinstance(criteria, UseCriteriaBase):
        return _check_base(ability, criteria, uses_ability, attrs, config)
    if isinstance(criteria, UseCriteriaField):
        return _check_field(ability, criteria, uses_ability)
    if isinstance(criteria, UseCriteriaKey):
        return _check_key(uses_ability, criteria)
    if isinstance(criteria, UseCriteriaAttr):
        return _check_attr(criteria, attrs)
    if isinstance(criteria, UseCriteriaSpecial):
        return _check_special(ability, criteria, config)
    return False
