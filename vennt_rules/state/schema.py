"""
Pydantic models for Vennt character data.

Mirrors the shapes the character manager stores: attribute snapshots,
abilities with their custom fields and granted benefits, the use-criteria
tree, and the collected character entity. Models are read-only inputs to
the rules; nothing here holds behavior beyond small lookups.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class CharacterGift(str, Enum):
    ALERTNESS = "Alertness"  # Perception
    CRAFT = "Craft"          # Technology
    ALACRITY = "Alacrity"    # Agility
    FINESSE = "Finesse"      # Dexterity
    MIND = "Mind"            # Intelligence
    MAGIC = "Magic"          # Spirit
    RAGE = "Rage"            # Strength
    SCIENCE = "Science"      # Wisdom
    CHARM = "Charm"          # Charisma
    NONE = "None"            # Chose no gift


class EntityType(str, Enum):
    CHARACTER = "CHARACTER"
    COG = "COG"


# -----------------------------------------------------------------------------
# Attributes
# -----------------------------------------------------------------------------

class AttributeValue(BaseModel):
    """A stat's current value and, for pools like hp, its maximum."""
    val: int | float
    max: int | float | None = None


AttributeMap = dict[str, AttributeValue]


def build_attribute_map(attributes: dict[str, int | float]) -> AttributeMap:
    """
    Pair raw entity attributes into an AttributeMap.

    Pools are stored flat (``hp`` and ``max_hp``); the ``max_`` entries
    become the ``max`` of their base attribute rather than stats of their own.
    """
    attrs: AttributeMap = {}
    for name, value in attributes.items():
        if name.startswith("max_"):
            continue
        attrs[name] = AttributeValue(val=value, max=attributes.get(f"max_{name}"))
    return attrs


# -----------------------------------------------------------------------------
# Use Criteria
# -----------------------------------------------------------------------------

CRITERIA_TYPES = ("base", "field", "key", "attr", "special")


class UseCriteriaBase(BaseModel):
    """Boolean AND ("every") / OR ("some") over child criteria."""
    type: Literal["base"] = "base"
    operator: str
    tests: list["UseCriteria"] = Field(default_factory=list)


class UseCriteriaField(BaseModel):
    """Compare a field of the evaluated ability against a key of the granting ability."""
    type: Literal["field"] = "field"
    key: str
    path: list[str] = Field(default_factory=list)
    operator: str


class UseCriteriaKey(BaseModel):
    """Compare a key of the granting ability against a literal."""
    type: Literal["key"] = "key"
    key: str
    operator: str
    value: str


class UseCriteriaAttr(BaseModel):
    """Compare a character attribute against a literal."""
    type: Literal["attr"] = "attr"
    attr: str
    operator: str
    value: str


class UseCriteriaSpecial(BaseModel):
    """Named built-in predicate, e.g. "isSpell"."""
    type: Literal["special"] = "special"
    name: str


class UseCriteriaUnknown(BaseModel):
    """Any criteria node with an unrecognized type. Always evaluates false."""
    model_config = ConfigDict(extra="allow")

    type: Any = None


def _criteria_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if kind in CRITERIA_TYPES else "unknown"


UseCriteria = Annotated[
    Union[
        Annotated[UseCriteriaBase, Tag("base")],
        Annotated[UseCriteriaField, Tag("field")],
        Annotated[UseCriteriaKey, Tag("key")],
        Annotated[UseCriteriaAttr, Tag("attr")],
        Annotated[UseCriteriaSpecial, Tag("special")],
        Annotated[UseCriteriaUnknown, Tag("unknown")],
    ],
    Discriminator(_criteria_tag),
]

UseCriteriaBase.model_rebuild()


# -----------------------------------------------------------------------------
# Abilities
# -----------------------------------------------------------------------------

# Resource name -> amount (hp, mp, vim, hero, actions...) or flag (passive, respite...)
AbilityCostMap = dict[str, bool | int | float]


class AbilityFields(BaseModel):
    """
    Descriptive and rules fields of an ability.

    Catalog data grows new fields over time, so unknown keys are kept
    rather than rejected.
    """
    model_config = ConfigDict(extra="allow")

    purchase: str | None = None  # "10" (XP) or "5sp" (SP)
    path: str | None = None
    cost: AbilityCostMap | None = None
    activation: str | None = None  # Free text, e.g. "2 Actions, 1 MP" or "Passive"
    expedited: list[str] | None = None  # Gifts that halve the XP cost
    keys: dict[str, str] | None = None  # Player-chosen lookup values used by criteria
    cast_dl: int | str | None = None
    mp_cost: list[int] | int | None = None
    flavor: str | None = None
    info: str | None = None
    range: str | None = None
    dc: int | str | None = None
    prereq: str | None = None
    req: str | None = None
    not_req: bool | None = None
    unlocks: str | None = None
    partial_key: str | None = None
    repeatable: bool | None = None
    optional: str | None = None
    times_taken: int | None = None
    build_dc: int | str | None = None
    build_time: str | None = None
    damage: str | None = None


class AdjustAbilityCost(BaseModel):
    adjust_cost: int | float


class CriteriaBenefit(BaseModel):
    """A bonus granted to other abilities when its criteria match."""
    model_config = ConfigDict(extra="allow")

    criteria: UseCriteria
    adjust_ability_cost: AdjustAbilityCost | None = None


class AbilityUses(BaseModel):
    """Side effects an owned ability grants."""
    model_config = ConfigDict(extra="allow")

    adjust_ability_cost: AdjustAbilityCost | None = None
    criteria_benefits: list[CriteriaBenefit] | None = None


class EntityAbility(BaseModel):
    """An ability, either from the catalog or owned by a character."""
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    entity_id: str | None = None
    name: str | None = None
    effect: str = ""
    active: bool = False  # Toggled on by the player; already paid for
    custom_fields: AbilityFields | None = None
    uses: AbilityUses | None = None
    comment: str | None = None


# -----------------------------------------------------------------------------
# Entities
# -----------------------------------------------------------------------------

def generate_id() -> str:
    return str(uuid4())[:8]


class OtherFields(BaseModel):
    model_config = ConfigDict(extra="allow")

    gift: CharacterGift | None = None
    second_gift: CharacterGift | None = None


class BaseEntity(BaseModel):
    id: str = Field(default_factory=generate_id)
    name: str
    type: EntityType = EntityType.CHARACTER
    attributes: dict[str, int | float] = Field(default_factory=dict)
    other_fields: OtherFields = Field(default_factory=OtherFields)
    public: bool = False
    owner: str | None = None


class CollectedEntity(BaseModel):
    """A character together with everything it owns."""
    entity: BaseEntity
    abilities: list[EntityAbility] = Field(default_factory=list)
    items: list[dict[str, Any]] = Field(default_factory=list)
    text: list[dict[str, Any]] = Field(default_factory=list)
    flux: list[dict[str, Any]] = Field(default_factory=list)  # Quests and journal entries

    @property
    def attribute_map(self) -> AttributeMap:
        return build_attribute_map(self.entity.attributes)


class PathsAndAbilities(BaseModel):
    """The published catalog of paths and abilities."""
    paths: list[dict[str, Any]] = Field(default_factory=list)
    abilities: list[EntityAbility] = Field(default_factory=list)

    def find_ability(self, name: str | None) -> EntityAbility | None:
        """Exact-name lookup. Returns None if not in the catalog."""
        if not name:
            return None
        return next((a for a in self.abilities if a.name == name), None)
