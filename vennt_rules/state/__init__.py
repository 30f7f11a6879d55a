"""Character and catalog state for the Vennt rules."""

from .schema import (
    AbilityCostMap,
    AbilityFields,
    AbilityUses,
    AdjustAbilityCost,
    AttributeMap,
    AttributeValue,
    BaseEntity,
    CharacterGift,
    CollectedEntity,
    CriteriaBenefit,
    EntityAbility,
    EntityType,
    OtherFields,
    PathsAndAbilities,
    UseCriteria,
    UseCriteriaAttr,
    UseCriteriaBase,
    UseCriteriaField,
    UseCriteriaKey,
    UseCriteriaSpecial,
    UseCriteriaUnknown,
    build_attribute_map,
)
from .catalog import CatalogError, load_catalog, load_character

__all__ = [
    # Schema
    "AbilityCostMap",
    "AbilityFields",
    "AbilityUses",
    "AdjustAbilityCost",
    "AttributeMap",
    "AttributeValue",
    "BaseEntity",
    "CharacterGift",
    "CollectedEntity",
    "CriteriaBenefit",
    "EntityAbility",
    "EntityType",
    "OtherFields",
    "PathsAndAbilities",
    "UseCriteria",
    "UseCriteriaAttr",
    "UseCriteriaBase",
    "UseCriteriaField",
    "UseCriteriaKey",
    "UseCriteriaSpecial",
    "UseCriteriaUnknown",
    "build_attribute_map",
    # Catalog
    "CatalogError",
    "load_catalog",
    "load_character",
]
