"""Tests for ability display ordering."""

from vennt_rules.rules.sorting import (
    ability_names,
    is_passive_for_display,
    sort_abilities,
    sort_paths,
)
from vennt_rules.state.schema import EntityAbility

from conftest import make_ability


def names(abilities):
    return [ability.name for ability in abilities]


class TestSortPaths:
    """Test ranking paths by their cheapest ability."""

    def test_cheaper_path_first(self):
        abilities = [
            make_ability("A1", path="A", purchase="10"),
            make_ability("B1", path="B", purchase="5"),
        ]

        assert sort_paths(abilities) == ["B", "A"]

    def test_uses_minimum_cost_in_path(self):
        abilities = [
            make_ability("A1", path="A", purchase="50"),
            make_ability("B1", path="B", purchase="20"),
            make_ability("A2", path="A", purchase="10"),
        ]

        assert sort_paths(abilities) == ["A", "B"]

    def test_unpriced_paths_sink(self):
        abilities = [
            make_ability("A1", path="A", purchase="Special"),
            make_ability("B1", path="B"),
            make_ability("C1", path="C", purchase="100"),
        ]

        assert sort_paths(abilities) == ["C", "A", "B"]

    def test_skips_unnamed_and_pathless(self):
        abilities = [
            make_ability(None, path="Ghost", purchase="1"),
            make_ability("Loose", purchase="1"),
            make_ability("A1", path="A", purchase="10"),
        ]

        assert sort_paths(abilities) == ["A"]


class TestPassiveForDisplay:
    """Display passivity needs the exact activation text."""

    def test_exact_activation(self):
        assert is_passive_for_display(make_ability(activation="PASSIVE"))

    def test_substring_is_not_passive(self):
        assert not is_passive_for_display(make_ability(activation="Passive, 1 Vim"))

    def test_cost_flag(self):
        assert is_passive_for_display(make_ability(cost={"passive": True}))


class TestSortAbilities:
    """Test sort_abilities."""

    def test_non_passive_before_passive(self):
        abilities = [
            make_ability("Toughness", activation="Passive", purchase="5"),
            make_ability("Strike", purchase="50", cost={"actions": 1}),
            make_ability("Armor", cost={"passive": True}, purchase="1"),
            make_ability("Dash", purchase="10"),
        ]

        result = sort_abilities(abilities)

        assert names(result) == ["Dash", "Strike", "Armor", "Toughness"]

    def test_sp_passives_after_xp_passives(self):
        abilities = [
            make_ability("Bought", activation="Passive", purchase="2sp"),
            make_ability("Learned", activation="Passive", purchase="30"),
        ]

        assert names(sort_abilities(abilities)) == ["Learned", "Bought"]

    def test_gathers_by_path(self):
        abilities = [
            make_ability("Bolt", path="Wizard", purchase="40"),
            make_ability("Jab", path="Brawler", purchase="5"),
            make_ability("Spark", path="Wizard", purchase="10"),
            make_ability("Hook", path="Brawler", purchase="20"),
        ]

        assert names(sort_abilities(abilities)) == ["Jab", "Hook", "Spark", "Bolt"]

    def test_price_order_without_paths(self):
        abilities = [
            make_ability("C", purchase="30"),
            make_ability("A", purchase="Special"),
            make_ability("B", purchase="10"),
        ]

        assert names(sort_abilities(abilities)) == ["A", "B", "C"]

    def test_drops_unnamed_entries(self):
        abilities = [make_ability(None, purchase="1"), None, make_ability("Kept")]

        assert names(sort_abilities(abilities)) == ["Kept"]

    def test_does_not_modify_input(self):
        abilities = [make_ability("B", purchase="20"), make_ability("A", purchase="10")]

        sort_abilities(abilities)

        assert names(abilities) == ["B", "A"]

    def test_equal_entries_keep_order(self):
        abilities = [make_ability(f"Tie {i}", purchase="10", path="Same") for i in range(5)]

        assert names(sort_abilities(abilities)) == names(abilities)

    def test_sorting_is_idempotent(self):
        abilities = [
            make_ability("Toughness", activation="Passive", purchase="5"),
            make_ability("Bought", activation="Passive", purchase="2sp"),
            make_ability("Bolt", path="Wizard", purchase="40"),
            make_ability("Jab", path="Brawler", purchase="5"),
            make_ability("Spark", path="Wizard", purchase="10"),
            make_ability("Tie 1", purchase="10"),
            make_ability("Tie 2", purchase="10"),
            EntityAbility(name="Bare"),
        ]

        once = sort_abilities(abilities)
        twice = sort_abilities(once)

        assert names(twice) == names(once)

    def test_passives_always_last(self, fireball, discount_ability):
        abilities = [discount_ability, fireball, make_ability("Dash", purchase="100")]

        result = sort_abilities(abilities)
        flags = [is_passive_for_display(ability) for ability in result]

        assert flags == sorted(flags)


class TestAbilityNames:
    """Test ability_names."""

    def test_maps_every_entry(self):
        abilities = [make_ability("One"), make_ability(None), make_ability("Two")]

        assert ability_names(abilities) == ["One", None, "Two"]
