"""
XP cost calculation.

An ability's effective cost starts from its listed purchase price, is
halved when the character's gift expedites it, then adjusted by every
discount or surcharge granted by the abilities the character owns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import RulesConfig, get_config
from ..state.schema import CharacterGift
from .criteria import ability_pass_criteria_check
from .numbers import parse_int

if TYPE_CHECKING:
    from ..state.schema import AttributeMap, CollectedEntity, EntityAbility

logger = logging.getLogger(__name__)


def is_sp_purchase(purchase: str) -> bool:
    """Whether a purchase string is priced in SP rather than XP."""
    return "sp" in purchase


def default_xp_cost(ability: "EntityAbility", config: RulesConfig | None = None) -> int:
    """
    Listed XP cost of an ability.

    Returns 0 for abilities with no purchase price, SP-priced abilities,
    free abilities, and prices that don't parse.
    """
    fields = ability.custom_fields
    if (
        fields is None
        or not fields.purchase
        or is_sp_purchase(fields.purchase)
        or ability.name in get_config(config)["free_abilities"]
    ):
        return 0
    cost = parse_int(fields.purchase)
    return 0 if cost is None else cost


def gift_in_ability_expedited(
    ability: "EntityAbility",
    gift: CharacterGift | str | None,
) -> bool:
    """Whether a gift is one that expedites (halves the cost of) this ability."""
    if not gift:
        return False
    gift_name = gift.value if isinstance(gift, CharacterGift) else gift
    if gift_name == CharacterGift.NONE.value:
        return False
    expedited = ability.custom_fields.expedited if ability.custom_fields else None
    return bool(expedited and gift_name in expedited)


def ability_uses_cost_adjust(
    ability: "EntityAbility",
    entity: "CollectedEntity",
    attrs: "AttributeMap",
    config: RulesConfig | None = None,
) -> float:
    """
    Total cost adjustment granted to an ability by everything the entity owns.

    Flat ``adjust_ability_cost`` entries always apply. Each entry in
    ``criteria_benefits`` applies only when its criteria pass for the
    ability being priced.
    """
    total_adjust = 0
    for uses_ability in entity.abilities:
        uses = uses_ability.uses
        if uses is None:
            continue

        if uses.adjust_ability_cost:
            total_adjust += uses.adjust_ability_cost.adjust_cost
            logger.debug(
                f"{uses_ability.name} adjusts cost of {ability.name} by "
                f"{uses.adjust_ability_cost.adjust_cost}"
            )

        for benefit in uses.criteria_benefits or []:
            if benefit.adjust_ability_cost is None:
                continue
            if ability_pass_criteria_check(ability, benefit.criteria, uses_ability, attrs, config):
                total_adjust += benefit.adjust_ability_cost.adjust_cost
                logger.debug(
                    f"{uses_ability.name} criteria benefit adjusts cost of "
                    f"{ability.name} by {benefit.adjust_ability_cost.adjust_cost}"
                )

    return total_adjust


def actual_xp_cost(
    ability: "EntityAbility",
    attrs: "AttributeMap",
    entity: "CollectedEntity | None" = None,
    config: RulesConfig | None = None,
) -> float:
    """
    Effective XP cost of an ability for a character.

    Args:
        ability: The ability being priced
        attrs: The character's attribute snapshot
        entity: The full character. Without it only the listed cost is known.
        config: Optional rules config override

    Returns:
        Listed cost, halved once if either gift expedites it, plus all
        adjustments granted by owned abilities
    """
    cost: float = default_xp_cost(ability, config)
    if entity is None:
        return cost

    other_fields = entity.entity.other_fields
    if gift_in_ability_expedited(ability, other_fields.gift) or gift_in_ability_expedited(
        ability, other_fields.second_gift
    ):
        cost = cost / 2

    cost += ability_uses_cost_adjust(ability, entity, attrs, config)
    return cost
