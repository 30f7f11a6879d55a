"""
Display ordering for a character's abilities.

Usable abilities come first, passives last. Within that, abilities are
gathered by path (cheapest paths first) and then ordered by price.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from ..config import RulesConfig, get_config
from .cost import is_sp_purchase
from .numbers import parse_int

if TYPE_CHECKING:
    from ..state.schema import EntityAbility


def is_passive_for_display(ability: "EntityAbility") -> bool:
    """
    Passive check used for ordering.

    Stricter than the usability check: the activation text must be exactly
    "passive", not merely mention it.
    """
    fields = ability.custom_fields
    if fields is None:
        return False
    if fields.cost and fields.cost.get("passive"):
        return True
    return bool(fields.activation and fields.activation.lower() == "passive")


def _purchase_cost(purchase: str | None) -> int:
    cost = parse_int(purchase)
    return 0 if cost is None else cost


def sort_paths(
    abilities: list["EntityAbility"],
    config: RulesConfig | None = None,
) -> list[str]:
    """
    Rank paths by their cheapest ability.

    Abilities with no parsable purchase price count as very expensive, so
    paths made only of those sink to the end. Ties keep first-seen order.
    """
    sentinel = get_config(config)["path_sentinel_cost"]
    path_costs: dict[str, int] = {}

    for ability in abilities:
        fields = ability.custom_fields
        if not ability.name or fields is None or not fields.path:
            continue
        cost = parse_int(fields.purchase)
        if cost is None:
            cost = sentinel
        path_costs[fields.path] = min(cost, path_costs.get(fields.path, cost))

    return sorted(path_costs, key=lambda path: path_costs[path])


def _make_comparator(path_rank: dict[str, int]):
    def compare(a1: "EntityAbility", a2: "EntityAbility") -> int:
        f1 = a1.custom_fields
        f2 = a2.custom_fields

        # 1. passive abilities go at the end of the list
        a1_passive = is_passive_for_display(a1)
        a2_passive = is_passive_for_display(a2)
        if a1_passive != a2_passive:
            return 1 if a1_passive else -1

        # 2. among passives, SP-bought abilities go after XP-bought ones
        if a1_passive and f1 and f1.purchase and f2 and f2.purchase:
            a1_sp = is_sp_purchase(f1.purchase)
            a2_sp = is_sp_purchase(f2.purchase)
            if a1_sp != a2_sp:
                return 1 if a1_sp else -1

        # 3. gather abilities by path
        p1 = f1.path if f1 else None
        p2 = f2.path if f2 else None
        if p1 and p2 and p1 != p2:
            return path_rank[p1] - path_rank[p2]

        # 4. otherwise by XP price
        return _purchase_cost(f1.purchase if f1 else None) - _purchase_cost(
            f2.purchase if f2 else None
        )

    return compare


def sort_abilities(
    abilities: list["EntityAbility | None"],
    config: RulesConfig | None = None,
) -> list["EntityAbility"]:
    """
    Order abilities for display.

    Entries without a name are dropped. The input list is not modified;
    the sort is stable so equal abilities keep their relative order.
    """
    named = [ability for ability in abilities if ability is not None and ability.name]
    path_rank = {path: idx for idx, path in enumerate(sort_paths(named, config))}
    return sorted(named, key=cmp_to_key(_make_comparator(path_rank)))


def ability_names(abilities: list["EntityAbility"]) -> list[str | None]:
    """Names of the given abilities, in list order. Unnamed entries map to None."""
    return [ability.name for ability in abilities]
