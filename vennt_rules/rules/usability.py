"""Whether a character can pay to use an ability right now."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import RulesConfig, get_config

if TYPE_CHECKING:
    from ..state.schema import AbilityCostMap, AttributeMap, EntityAbility


def merge_cost_maps(
    cost: "AbilityCostMap | None",
    additional_cost: "dict[str, int | float] | None" = None,
) -> "AbilityCostMap":
    """
    Combine an ability's cost with an extra cost (e.g. from an upcast).

    Returns a new map. Amounts for the same resource are summed; flags
    (passive, respite...) are kept as flags, never added.
    """
    cost_map: AbilityCostMap = dict(cost or {})
    for resource, amount in (additional_cost or {}).items():
        current = cost_map.get(resource)
        if isinstance(current, bool) or isinstance(amount, bool):
            cost_map[resource] = current or amount
        elif current:
            cost_map[resource] = amount + current
        else:
            cost_map[resource] = amount
    return cost_map


def activation_mentions_passive(ability: "EntityAbility") -> bool:
    """Activation text contains "passive" anywhere, case-insensitively."""
    fields = ability.custom_fields
    return bool(fields and fields.activation and "passive" in fields.activation.lower())


def can_use_ability(
    ability: "EntityAbility",
    attrs: "AttributeMap",
    additional_cost: "dict[str, int | float] | None" = None,
    config: RulesConfig | None = None,
) -> bool:
    """
    Check whether the character has the resources to use an ability.

    Passive and already-active abilities are never "used". Resources the
    character doesn't track are not checked.

    Args:
        ability: The ability to use
        attrs: The character's attribute snapshot
        additional_cost: Extra resource cost on top of the ability's own
        config: Optional rules config override

    Returns:
        True if every tracked resource covers the cost
    """
    cost_map = merge_cost_maps(
        ability.custom_fields.cost if ability.custom_fields else None,
        additional_cost,
    )
    if ability.active or cost_map.get("passive") or activation_mentions_passive(ability):
        return False

    for resource in get_config(config)["spendable_resources"]:
        current = attrs.get(resource)
        if current is None:
            continue
        resource_cost = cost_map.get(resource)
        if resource_cost and resource_cost > current.val:
            return False
    return True
