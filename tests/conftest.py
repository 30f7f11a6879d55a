"""
Pytest fixtures for vennt_rules tests.

Provides sample abilities, attribute snapshots and characters.
"""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from vennt_rules.state.schema import (
    AttributeValue,
    BaseEntity,
    CharacterGift,
    CollectedEntity,
    EntityAbility,
    OtherFields,
    PathsAndAbilities,
)


def make_ability(name: str | None = "Test Ability", **custom_fields) -> EntityAbility:
    """Build an ability from custom field keyword arguments."""
    return EntityAbility.model_validate({"name": name, "custom_fields": custom_fields})


@pytest.fixture
def attrs():
    """Attribute snapshot for a mid-level character."""
    return {
        "str": AttributeValue(val=12),
        "wis": AttributeValue(val=3),
        "hp": AttributeValue(val=20, max=25),
        "mp": AttributeValue(val=5, max=10),
        "vim": AttributeValue(val=8, max=8),
        "hero": AttributeValue(val=1, max=3),
    }


@pytest.fixture
def fireball():
    """A straightforward spell."""
    return EntityAbility.model_validate({
        "name": "Fireball",
        "effect": "Hurl a ball of fire.",
        "custom_fields": {
            "purchase": "50",
            "path": "Path of the Wizard",
            "cost": {"mp": 4, "actions": 2},
            "activation": "2 Actions, 4 MP",
            "cast_dl": 12,
            "expedited": ["Magic"],
        },
    })


@pytest.fixture
def discount_ability():
    """Owned ability discounting every spell by 5 XP."""
    return EntityAbility.model_validate({
        "name": "Spell Scholar",
        "custom_fields": {"purchase": "20", "activation": "Passive"},
        "uses": {
            "criteria_benefits": [
                {
                    "criteria": {"type": "special", "name": "isSpell"},
                    "adjust_ability_cost": {"adjust_cost": -5},
                },
            ],
        },
    })


@pytest.fixture
def character(discount_ability):
    """Character with a Magic gift and a spell discount."""
    return CollectedEntity(
        entity=BaseEntity(
            name="Ayla",
            attributes={"str": 2, "wis": 3, "hp": 20, "max_hp": 25, "mp": 5, "max_mp": 10},
            other_fields=OtherFields(gift=CharacterGift.MAGIC),
        ),
        abilities=[discount_ability],
    )


@pytest.fixture
def catalog(fireball):
    """Catalog holding the current version of Fireball."""
    return PathsAndAbilities(abilities=[fireball])
