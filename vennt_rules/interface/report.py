"""
Ability report for a character.

Builds one row per owned ability (in display order) and renders them as a
rich table.
"""

from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from ..config import RulesConfig
from ..rules import (
    actual_xp_cost,
    can_use_ability,
    find_new_ability_version,
    sort_abilities,
)
from ..rules.numbers import format_number
from ..state.schema import CollectedEntity, PathsAndAbilities

# Shared console instance
console = Console()

THEME = {
    "primary": "steel_blue1",
    "accent": "green",
    "warning": "yellow",
    "dim": "grey50",
}


@dataclass
class AbilityRow:
    """One line of the ability report."""
    name: str
    path: str
    cost: float
    usable: bool
    update_available: bool


def build_report(
    character: CollectedEntity,
    catalog: PathsAndAbilities | None = None,
    config: RulesConfig | None = None,
) -> list[AbilityRow]:
    """Evaluate every owned ability of a character, in display order."""
    attrs = character.attribute_map
    rows = []
    for ability in sort_abilities(character.abilities, config):
        fields = ability.custom_fields
        update = (
            find_new_ability_version(ability, catalog, config) is not None
            if catalog is not None
            else False
        )
        rows.append(AbilityRow(
            name=ability.name or "",
            path=(fields.path if fields else None) or "",
            cost=actual_xp_cost(ability, attrs, character, config),
            usable=can_use_ability(ability, attrs, config=config),
            update_available=update,
        ))
    return rows


def render_report(character: CollectedEntity, rows: list[AbilityRow]) -> Table:
    """Render report rows as a table."""
    table = Table(title=f"[bold {THEME['primary']}]{character.entity.name}[/bold {THEME['primary']}]")
    table.add_column("Ability")
    table.add_column("Path", style=THEME["dim"])
    table.add_column("XP", justify="right")
    table.add_column("Usable")
    table.add_column("Update")

    for row in rows:
        table.add_row(
            row.name,
            row.path,
            format_number(row.cost),
            f"[{THEME['accent']}]yes[/{THEME['accent']}]" if row.usable else f"[{THEME['dim']}]no[/{THEME['dim']}]",
            f"[{THEME['warning']}]new version[/{THEME['warning']}]" if row.update_available else "",
        )

    return table
