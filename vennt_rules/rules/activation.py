"""Activation text for abilities built from a cost map."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..state.schema import AbilityCostMap


def title_text(text: str) -> str:
    """Title-case a field name: "hero_points" -> "Hero Points"."""
    return " ".join(word.capitalize() for word in text.replace("_", " ").split())


def generate_ability_activation(cost: "AbilityCostMap") -> str:
    """
    Describe a cost map the way activation lines are written.

    {"actions": 2, "mp": 3} -> "2 Actions, 3 Mp"
    {"passive": True} -> "Passive"
    """
    parts = []
    for cost_type, amount in cost.items():
        title = title_text(cost_type)
        if isinstance(amount, bool):
            parts.append(title)
        else:
            parts.append(f"{amount} {title}")
    return ", ".join(parts)
